"""Path name helpers that follow a given path flavor rather than the host OS."""

from __future__ import annotations

import ntpath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from promptpath.environment import PathFlavor


def no_volume_name(path: str) -> str:
    """POSIX paths carry no volume name."""
    del path
    return ""


def windows_volume_name(path: str) -> str:
    """Return the leading drive (``C:``) or UNC share (``\\\\host\\share``) of *path*."""
    return ntpath.splitdrive(path)[0]


def base(path: str, flavor: PathFlavor) -> str:
    """Return the last element of *path*.

    Trailing path separators are removed before extracting the last element.
    If the path is empty, base returns ".".
    If the path consists entirely of separators, base returns a single separator.

    Examples:
        /usr/local/bin/ -> bin
        C:\\Users\\dev  -> dev (windows flavor)
        /               -> /
    """
    if not path:
        return "."
    sep = flavor.separator
    path = path.rstrip(sep)
    path = path[len(flavor.volume_name(path)) :]
    path = path.rpartition(sep)[2]
    # If empty now, it had only separators (or only a volume name)
    return path or sep
