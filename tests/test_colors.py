from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.core.colors import is_hex_color, to_rgba


def test_to_rgba_formats_components_and_alpha() -> None:
    assert to_rgba("#1DA1F2", 0.5) == "rgba(29, 161, 242, 0.5)"
    assert to_rgba("#000000", 1) == "rgba(0, 0, 0, 1)"
    assert to_rgba("1d9bf0", 0.9) == "rgba(29, 155, 240, 0.9)"


def test_to_rgba_ignores_surrounding_whitespace() -> None:
    assert to_rgba("  #ffffff ", 0.25) == "rgba(255, 255, 255, 0.25)"


def test_to_rgba_rejects_non_hex() -> None:
    with pytest.raises(ValueError):
        to_rgba("#zzzzzz", 1)


def test_to_rgba_rejects_empty_color() -> None:
    with pytest.raises(ValueError):
        to_rgba("", 1)


def test_is_hex_color() -> None:
    assert is_hex_color("#1DA1F2")
    assert is_hex_color(" #ececec ")
    assert not is_hex_color("")
    assert not is_hex_color(None)
    assert not is_hex_color("#fff")
    assert not is_hex_color("1da1f2")
    assert not is_hex_color("#1da1f")
