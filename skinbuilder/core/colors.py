"""Color helpers."""

from __future__ import annotations

import re

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
_HEX_COLOR_RE = re.compile(HEX_COLOR_PATTERN)


def is_hex_color(value: str | None) -> bool:
    """True for a ``#rrggbb`` color, the only form the renderer accepts from the editor."""
    return bool(value) and _HEX_COLOR_RE.match(value.strip()) is not None


def to_rgba(hex_color: str, alpha: float) -> str:
    """Return ``rgba(r, g, b, alpha)`` for a 6-digit ``#rrggbb`` color.

    Three-digit shorthand is not supported and is not expanded.
    """
    value = int(hex_color.strip().lstrip("#"), 16)
    r = (value >> 16) & 255
    g = (value >> 8) & 255
    b = value & 255
    return f"rgba({r}, {g}, {b}, {alpha:g})"
