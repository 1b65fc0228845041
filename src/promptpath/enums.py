"""Segment enums."""

from __future__ import annotations

from enum import StrEnum


class PathStyle(StrEnum):
    """Presentation styles for the path segment."""

    AGNOSTER = "agnoster"
    SHORT = "short"
    FULL = "full"
    FOLDER = "folder"


class Property(StrEnum):
    """Configuration keys read by the path segment."""

    STYLE = "style"
    FOLDER_SEPARATOR_ICON = "folder_separator_icon"
    HOME_ICON = "home_icon"
    FOLDER_ICON = "folder_icon"
    WINDOWS_REGISTRY_ICON = "windows_registry_icon"
