"""Environment access for the path segment.

Everything platform specific (separator, volume names, the process working
directory) sits behind ``EnvironmentProbe`` so rendering logic can be
exercised against POSIX- and Windows-shaped paths on any host.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol

from promptpath.pathname import no_volume_name, windows_volume_name


@dataclass(frozen=True, slots=True)
class PathFlavor:
    """Separator and volume-name rules of one platform family."""

    name: str
    separator: str
    volume_name: Callable[[str], str]


POSIX = PathFlavor(name="posix", separator="/", volume_name=no_volume_name)
WINDOWS = PathFlavor(name="windows", separator="\\", volume_name=windows_volume_name)

_FLAVORS = {flavor.name: flavor for flavor in (POSIX, WINDOWS)}


def native_flavor() -> PathFlavor:
    """Get the flavor matching the running interpreter."""
    return WINDOWS if os.name == "nt" else POSIX


def get_flavor(name: str) -> PathFlavor:
    """Look up a flavor by name (``posix`` or ``windows``).

    Raises:
        KeyError: If *name* is not a known flavor.
    """
    return _FLAVORS[name.lower()]


class EnvironmentProbe(Protocol):
    """Read-only view of the process environment."""

    @property
    def flavor(self) -> PathFlavor: ...

    def getwd(self) -> str:
        """Return the working directory; raises OSError when it cannot be read."""
        ...

    def path_separator(self) -> str: ...

    def getenv(self, name: str) -> str:
        """Return the variable's value, or "" when unset."""
        ...


class SystemEnvironment:
    """EnvironmentProbe backed by the running process.

    Shells usually pass ``$PWD`` explicitly: it keeps symlinked directories
    as the user typed them, where ``os.getcwd()`` resolves them.
    """

    def __init__(
        self,
        pwd: str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        flavor: PathFlavor | None = None,
    ) -> None:
        self._pwd = pwd
        self._environ = os.environ if environ is None else environ
        self._flavor = flavor or native_flavor()

    @property
    def flavor(self) -> PathFlavor:
        return self._flavor

    def getwd(self) -> str:
        if self._pwd is not None:
            return self._pwd
        return os.getcwd()

    def path_separator(self) -> str:
        return self._flavor.separator

    def getenv(self, name: str) -> str:
        return self._environ.get(name, "")
