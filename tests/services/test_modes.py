"""Tests for mode selection."""

import pytest

from app.services.modes import ResolveMode, ShortenMode, extract_short_code, select_mode


@pytest.mark.parametrize("path", ["/", ""])
def test_root_selects_shorten_mode(path):
    assert select_mode(path) == ShortenMode()


@pytest.mark.parametrize(
    "path, code",
    [
        ("/abc123", "abc123"),
        ("abc123", "abc123"),
        ("/a/b", "a/b"),
        ("//", "/"),
        ("//abc", "/abc"),
        ("/ ", " "),
    ],
)
def test_other_paths_select_resolve_mode(path, code):
    mode = select_mode(path)

    assert isinstance(mode, ResolveMode)
    assert mode.code == code


def test_only_one_separator_is_stripped():
    assert extract_short_code("///x") == "//x"


def test_mode_names():
    assert select_mode("/").name == "shorten"
    assert select_mode("/x").name == "resolve"
