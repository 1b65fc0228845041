"""Segment constants - no circular dependencies."""

from __future__ import annotations

from typing import Final

from promptpath.enums import PathStyle

DEFAULT_STYLE: Final = PathStyle.AGNOSTER
DEFAULT_HOME_ICON: Final = "~"
DEFAULT_FOLDER_ICON: Final = ".."
DEFAULT_REGISTRY_ICON: Final = "HK:"

HOME_ENV_VAR: Final = "HOME"

# Synthetic segment standing in for the whole home directory when counting depth
HOME_DEPTH_PLACEHOLDER: Final = "root"

# PowerShell prefixes provider-qualified paths with this, e.g. after `cd \\server\share`
# See https://community.idera.com/database-tools/powershell/powertips/b/tips/posts/correcting-powershell-paths
POWERSHELL_FILESYSTEM_PREFIX: Final = "Microsoft.PowerShell.Core\\FileSystem::"

WINDOWS_REGISTRY_ROOT: Final = "HKCU:"

UNKNOWN_STYLE_TEMPLATE: Final = "Path style: {style} is not available"
