"""Debug logging for prompt rendering.

A prompt is redrawn on every command, so nothing may reach stderr unless the
user asked for it. Library modules only create loggers; this module owns the
single handler the CLI attaches when debugging is switched on.
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "promptpath"

_debug_logging_initialized: bool = False


def debug_requested(flag: bool = False) -> bool:
    """Decide whether debug output is on.

    Debug mode is enabled when:
    1. PROMPTPATH_DEBUG env var is "1" or "true" (explicit override)
    2. The ``--debug`` flag was passed

    PROMPTPATH_DEBUG set to "0" or "false" wins over the flag.
    """
    env_debug = os.environ.get("PROMPTPATH_DEBUG", "").lower()
    if env_debug in ("1", "true"):
        return True
    if env_debug in ("0", "false"):
        return False
    return flag


def setup_debug_logging() -> None:
    """Attach a stderr handler to the promptpath logger.

    This is idempotent - calling it multiple times has no effect after the first call.
    """
    global _debug_logging_initialized

    if _debug_logging_initialized:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)

    _debug_logging_initialized = True

    package_logger.debug("Debug logging initialized")


def reset_debug_logging() -> None:
    """Detach handlers added by setup_debug_logging (used by tests)."""
    global _debug_logging_initialized

    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    _debug_logging_initialized = False
