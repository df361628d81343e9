"""Variant registry.

Maps every variant key to its builders and its default rule. Builders read the
shared settings plus one option block, named by ``options_attr``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from . import css_builders, defaults, html_builders
from .errors import UnknownVariantError
from .models import Message, Settings

logger = logging.getLogger(__name__)

HtmlBuilder = Callable[[Settings, object, Sequence[Message]], str]
CssBuilder = Callable[[Settings, object], str]


@dataclass(frozen=True)
class VariantSpec:
    key: str
    title: str
    options_attr: str
    build_html: HtmlBuilder
    build_css: CssBuilder
    adjust_defaults: defaults.DefaultRule

    def html(self, settings: Settings, messages: Sequence[Message]) -> str:
        return self.build_html(settings, settings.options(self.options_attr), messages)

    def css(self, settings: Settings) -> str:
        return self.build_css(settings, settings.options(self.options_attr))


REGISTRY: Dict[str, VariantSpec] = {
    "ios": VariantSpec(
        "ios", "iOS Messages", "chat",
        html_builders.build_ios_html, css_builders.build_ios_css, defaults.ios_defaults,
    ),
    "android": VariantSpec(
        "android", "Android / WhatsApp", "chat",
        html_builders.build_android_html, css_builders.build_android_css, defaults.android_defaults,
    ),
    "note": VariantSpec(
        "note", "Note / Letter", "note",
        html_builders.build_note_html, css_builders.build_note_css, defaults.note_defaults,
    ),
    "twitter": VariantSpec(
        "twitter", "Twitter / X", "twitter",
        html_builders.build_twitter_html, css_builders.build_twitter_css, defaults.twitter_defaults,
    ),
    "google": VariantSpec(
        "google", "Search Engine", "google",
        html_builders.build_google_html, css_builders.build_google_css, defaults.google_defaults,
    ),
    "instagram": VariantSpec(
        "instagram", "Instagram Post", "instagram",
        html_builders.build_instagram_html, css_builders.build_instagram_css, defaults.instagram_defaults,
    ),
    "discord": VariantSpec(
        "discord", "Discord", "discord",
        html_builders.build_discord_html, css_builders.build_discord_css, defaults.discord_defaults,
    ),
}


def variant_spec(key: str) -> VariantSpec:
    try:
        return REGISTRY[key]
    except (KeyError, TypeError):
        raise UnknownVariantError(key) from None


def apply_variant(settings: Settings, new_variant: str, first_message: Optional[Message] = None) -> Settings:
    """Fill the empty fields ``new_variant`` needs; author choices are kept."""
    spec = variant_spec(new_variant)
    updated = spec.adjust_defaults(settings, first_message)
    if updated is not settings:
        logger.debug("Applied %s defaults", new_variant)
    return updated
