"""Path segment: renders the working directory for a shell prompt.

Styles:
    agnoster  root + one folder icon per skipped folder + current folder (default)
    short     first known prefix (registry root, PowerShell provider, home) swapped for its icon
    full      working directory as-is
    folder    current folder only

Every render re-reads configuration and environment; the segment keeps no state
between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from promptpath.constants import (
    DEFAULT_FOLDER_ICON,
    DEFAULT_HOME_ICON,
    DEFAULT_REGISTRY_ICON,
    DEFAULT_STYLE,
    HOME_DEPTH_PLACEHOLDER,
    HOME_ENV_VAR,
    POWERSHELL_FILESYSTEM_PREFIX,
    UNKNOWN_STYLE_TEMPLATE,
    WINDOWS_REGISTRY_ROOT,
)
from promptpath.enums import PathStyle, Property
from promptpath.pathname import base

if TYPE_CHECKING:
    from promptpath.environment import EnvironmentProbe

log = logging.getLogger(__name__)


class PropertyStore(Protocol):
    """Key -> string lookup; absent keys yield the caller's default."""

    def get_string(self, key: str, default: str) -> str: ...


class PathSegment:
    """Prompt segment showing the current working directory."""

    def __init__(self, props: PropertyStore, env: EnvironmentProbe) -> None:
        self._props = props
        self._env = env

    @property
    def enabled(self) -> bool:
        """The path segment always has something to show."""
        return True

    def render(self) -> str:
        """Render the working directory in the configured style. Never raises."""
        style = self._props.get_string(Property.STYLE, DEFAULT_STYLE)
        match style:
            case PathStyle.AGNOSTER:
                return self._agnoster_path()
            case PathStyle.SHORT:
                return self._short_path()
            case PathStyle.FULL:
                return self._working_dir()
            case PathStyle.FOLDER:
                return base(self._working_dir(), self._env.flavor)
            case _:
                log.debug("Unknown path style %r", style)
                return UNKNOWN_STYLE_TEMPLATE.format(style=style)

    def _short_path(self) -> str:
        pwd = self._working_dir()
        # Highest priority first; only the first matching prefix is replaced
        mapped_locations = (
            (WINDOWS_REGISTRY_ROOT, self._registry_icon()),
            (POWERSHELL_FILESYSTEM_PREFIX, ""),
            (self._home_dir(), self._home_icon()),
        )
        for location, value in mapped_locations:
            if pwd.startswith(location):
                return value + pwd[len(location) :]
        return pwd

    def _agnoster_path(self) -> str:
        pwd = self._working_dir()
        separator_icon = self._props.get_string(
            Property.FOLDER_SEPARATOR_ICON, self._env.path_separator()
        )
        folder_icon = self._props.get_string(Property.FOLDER_ICON, DEFAULT_FOLDER_ICON)

        parts = [self.root_location(pwd)]
        depth = self.path_depth(pwd)
        parts.extend(f"{separator_icon}{folder_icon}" for _ in range(1, depth))
        # A working directory equal to its root renders as the root alone
        if depth > 0:
            parts.append(f"{separator_icon}{base(pwd, self._env.flavor)}")
        return "".join(parts)

    def _working_dir(self) -> str:
        try:
            return self._env.getwd()
        except OSError as exc:
            log.debug("Cannot read working directory: %s", exc)
            return ""

    def _home_dir(self) -> str:
        # On Unix systems, $HOME may come with a trailing slash, unlike the Windows variant
        return self._env.getenv(HOME_ENV_VAR)

    def _home_icon(self) -> str:
        return self._props.get_string(Property.HOME_ICON, DEFAULT_HOME_ICON)

    def _registry_icon(self) -> str:
        return self._props.get_string(Property.WINDOWS_REGISTRY_ICON, DEFAULT_REGISTRY_ICON)

    def in_home_dir(self, pwd: str) -> bool:
        """Literal prefix test against $HOME, no separator normalization."""
        return pwd.startswith(self._home_dir())

    def root_location(self, pwd: str) -> str:
        """Return the first path component: home icon, registry icon, drive or top folder."""
        pwd = pwd.removeprefix(POWERSHELL_FILESYSTEM_PREFIX)
        if self.in_home_dir(pwd):
            return self._home_icon()

        separator = self._env.path_separator()
        pwd = pwd.removeprefix(separator)
        root = next((part for part in pwd.split(separator) if part), "")
        if root == WINDOWS_REGISTRY_ROOT:
            return self._registry_icon()
        return root

    def path_depth(self, pwd: str) -> int:
        """Count the folders between the root and the current folder.

        The home directory counts as a single segment. A bare root yields 0 or less.
        """
        home = self._home_dir()
        if self.in_home_dir(pwd):
            pwd = HOME_DEPTH_PLACEHOLDER + pwd[len(home) :]
        valid_parts = [part for part in pwd.split(self._env.path_separator()) if part]
        return len(valid_parts) - 1
