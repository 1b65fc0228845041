"""Property-based tests for the path segment using Hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from promptpath.enums import PathStyle
from promptpath.environment import POSIX, WINDOWS
from promptpath.pathname import base
from tests.helpers.mocks import make_segment

pytestmark = pytest.mark.unit


# =============================================================================
# Strategies
# =============================================================================

# Folder names that can never collide with the home prefix or the icons below
folder_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789_.", min_size=1, max_size=12)
folder_lists = st.lists(folder_names, min_size=1, max_size=8)
separator_runs = st.integers(min_value=1, max_value=3)
flavors = st.sampled_from([POSIX, WINDOWS])
KNOWN_STYLES = frozenset(style.value for style in PathStyle)
styles = st.sampled_from(sorted(KNOWN_STYLES))

HOME_OUTSIDE_TREE = "/nonexistent-home"


def _join(folders: list[str], runs: list[int], sep: str = "/") -> str:
    return "".join(sep * run + folder for run, folder in zip(runs, folders, strict=True))


# =============================================================================
# Totality
# =============================================================================


@given(pwd=st.text(max_size=60), home=st.text(max_size=20), flavor=flavors, style=styles)
def test_every_style_returns_a_string(pwd: str, home: str, flavor, style: str) -> None:
    result = make_segment(pwd, home=home, flavor=flavor, style=style).render()
    assert isinstance(result, str)


@given(style=st.text(max_size=20).filter(lambda style: style not in KNOWN_STYLES))
def test_unknown_styles_name_themselves(style: str) -> None:
    result = make_segment("/usr/local", style=style).render()
    assert result == f"Path style: {style} is not available"


# =============================================================================
# Depth and breadcrumb
# =============================================================================


@given(folders=folder_lists, data=st.data())
def test_depth_counts_intermediate_folders(folders: list[str], data: st.DataObject) -> None:
    runs = data.draw(st.lists(separator_runs, min_size=len(folders), max_size=len(folders)))
    trailing = data.draw(st.integers(min_value=0, max_value=2))
    pwd = _join(folders, runs) + "/" * trailing

    segment = make_segment(pwd, home=HOME_OUTSIDE_TREE)
    assert segment.path_depth(pwd) == len(folders) - 1


@given(folders=folder_lists)
def test_agnoster_shape(folders: list[str]) -> None:
    pwd = "/" + "/".join(folders)
    segment = make_segment(
        pwd, home=HOME_OUTSIDE_TREE, folder_separator_icon=" > ", folder_icon="@"
    )

    expected = folders[0]
    if len(folders) > 1:
        expected += " > @" * (len(folders) - 2) + " > " + folders[-1]
    assert segment.render() == expected


@given(folders=folder_lists)
def test_agnoster_below_home_starts_with_icon(folders: list[str]) -> None:
    pwd = "/home/dev/" + "/".join(folders)
    rendered = make_segment(pwd, folder_icon="@").render()

    assert rendered.startswith("~/")
    assert rendered.endswith("/" + folders[-1])
    assert rendered.count("@") == len(folders) - 1


# =============================================================================
# Short path and folder
# =============================================================================


@given(folders=st.lists(folder_names, max_size=6))
def test_short_replaces_home_once(folders: list[str]) -> None:
    suffix = "".join("/" + folder for folder in folders)
    assert make_segment("/home/dev" + suffix, style="short").render() == "~" + suffix


@given(folders=folder_lists)
def test_folder_is_last_element_regardless_of_depth(folders: list[str]) -> None:
    pwd = "/" + "/".join(folders)
    assert make_segment(pwd, style="folder").render() == folders[-1]


@given(path=st.text(max_size=40))
def test_posix_base_is_a_fixed_point(path: str) -> None:
    once = base(path, POSIX)
    assert base(once, POSIX) == once
    assert once == "/" or "/" not in once
