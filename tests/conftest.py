"""Pytest fixtures for promptpath tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

from promptpath.debug_log import reset_debug_logging

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _isolated_config_dir(monkeypatch, tmp_path: Path) -> Path:
    """Keep tests away from the user's real config file and debug switch."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("PROMPTPATH_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("PROMPTPATH_DEBUG", raising=False)
    return config_dir


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Drop handlers a test's --debug run attached to the package logger."""
    reset_debug_logging()
    yield
    reset_debug_logging()
