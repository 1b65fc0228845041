"""promptpath: working-directory segment renderer for shell prompts."""

from promptpath.config import Properties, PromptPathConfig
from promptpath.environment import POSIX, WINDOWS, PathFlavor, SystemEnvironment
from promptpath.segment import PathSegment

__version__ = "0.1.0"

__all__ = [
    "POSIX",
    "WINDOWS",
    "PathFlavor",
    "PathSegment",
    "PromptPathConfig",
    "Properties",
    "SystemEnvironment",
]
