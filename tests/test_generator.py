from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.core.errors import UnknownVariantError
from skinbuilder.core.generator import (
    RenderedSkin,
    render,
    render_markup,
    render_preview_page,
    render_style,
)
from skinbuilder.core.models import default_project


def test_render_returns_both_artifacts() -> None:
    project = default_project()
    skin = render(project)
    assert isinstance(skin, RenderedSkin)
    assert skin.html == render_markup(project)
    assert skin.css == render_style(project)


def test_rendering_is_memoized_by_value() -> None:
    project = default_project()
    assert render_markup(project) is render_markup(replace(project))


def test_style_ignores_messages() -> None:
    project = default_project()
    assert render_style(project) == render_style(replace(project, messages=()))


def test_unknown_variant_raises() -> None:
    project = replace(default_project(), variant="myspace")
    with pytest.raises(UnknownVariantError):
        render_markup(project)
    with pytest.raises(UnknownVariantError):
        render_style(project)


def test_preview_page_mounts_fragment_in_root() -> None:
    project = default_project()
    page = render_preview_page(project)
    assert page.startswith("<!doctype html>")
    assert f'<div id="workskin">{render_markup(project)}</div>' in page
    assert render_style(project) in page
    assert "max-width: 100%" in page


def test_preview_page_toggles() -> None:
    page = render_preview_page(default_project(), dark=True, mobile=True)
    assert "background: #1f2937" in page
    assert "max-width: 390px" in page
