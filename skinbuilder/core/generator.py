"""Skin generation entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from ..config import APP_TITLE, ROOT_ID
from .html_builders import jinja_env
from .models import Project
from .variants import variant_spec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedSkin:
    html: str
    css: str


@lru_cache(maxsize=64)
def render_markup(project: Project) -> str:
    """Return the single-line HTML fragment for ``project``.

    Raises ``UnknownVariantError`` for a variant outside the registry.
    """
    spec = variant_spec(project.variant)
    logger.debug("Rendering %s markup for %d message(s)", project.variant, len(project.messages))
    return spec.html(project.settings, project.messages)


@lru_cache(maxsize=64)
def render_style(project: Project) -> str:
    """Return the stylesheet for ``project``; it depends on settings only."""
    return variant_spec(project.variant).css(project.settings)


def render(project: Project) -> RenderedSkin:
    return RenderedSkin(html=render_markup(project), css=render_style(project))


def clear_render_cache() -> None:
    render_markup.cache_clear()
    render_style.cache_clear()


def render_preview_page(project: Project, dark: bool = False, mobile: bool = False) -> str:
    """Wrap the fragment and stylesheet in a standalone page for the preview pane."""
    skin = render(project)
    tpl = jinja_env().get_template("preview.html")
    return tpl.render(
        title=APP_TITLE,
        dark=dark,
        mobile=mobile,
        root_id=ROOT_ID,
        css=skin.css,
        content=skin.html,
    )
