from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.core.defaults import INSTAGRAM_DEFAULT_TIMESTAMP, PLATFORM_ACCENTS
from skinbuilder.core.errors import UnknownVariantError
from skinbuilder.core.models import DiscordOptions, Message, Settings, TwitterOptions, VARIANTS
from skinbuilder.core.variants import REGISTRY, apply_variant, variant_spec

JOHN = Message(id="m1", sender="John Doe", content="First post #hello", outgoing=True)


def test_registry_covers_every_variant() -> None:
    assert set(REGISTRY) == set(VARIANTS)
    assert variant_spec("ios").options_attr == variant_spec("android").options_attr == "chat"


def test_unknown_variant_raises() -> None:
    with pytest.raises(UnknownVariantError) as info:
        apply_variant(Settings(), "myspace")
    assert info.value.variant == "myspace"
    with pytest.raises(ValueError):
        variant_spec("myspace")


@pytest.mark.parametrize("variant", VARIANTS)
def test_apply_variant_is_idempotent(variant: str) -> None:
    once = apply_variant(Settings(), variant, JOHN)
    twice = apply_variant(once, variant, JOHN)
    assert twice == once


def test_twitter_handle_derived_from_first_sender() -> None:
    settings = apply_variant(Settings(), "twitter", JOHN)
    assert settings.twitter.handle == "johndoe"
    assert settings.twitter.timestamp == ""


def test_twitter_handle_is_not_overwritten() -> None:
    settings = replace(Settings(), twitter=TwitterOptions(handle="jd_official"))
    assert apply_variant(settings, "twitter", JOHN).twitter.handle == "jd_official"


def test_twitter_without_first_message_leaves_handle_unset() -> None:
    assert apply_variant(Settings(), "twitter").twitter.handle is None


def test_discord_channel_seeded_once() -> None:
    settings = apply_variant(Settings(), "discord", JOHN)
    assert settings.discord.channel_name == "general"
    assert settings.discord.show_header is True
    assert settings.discord.dark_mode is True

    edited = replace(settings, discord=replace(settings.discord, channel_name="memes"))
    again = apply_variant(edited, "discord", JOHN)
    assert again.discord.channel_name == "memes"


def test_discord_explicit_false_survives() -> None:
    settings = replace(Settings(), discord=DiscordOptions(show_header=False, dark_mode=False))
    result = apply_variant(settings, "discord")
    assert result.discord.show_header is False
    assert result.discord.dark_mode is False


def test_google_query_from_first_message() -> None:
    assert apply_variant(Settings(), "google", JOHN).google.query == "First post #hello"
    assert apply_variant(Settings(), "google").google.query == ""


def test_instagram_defaults() -> None:
    settings = apply_variant(Settings(), "instagram", JOHN)
    assert settings.instagram.username == "johndoe"
    assert settings.instagram.caption == "First post #hello"
    assert settings.instagram.timestamp == INSTAGRAM_DEFAULT_TIMESTAMP


def test_platform_accent_replaced_by_next_platform() -> None:
    settings = apply_variant(Settings(), "android")
    assert (settings.sender_color, settings.receiver_color) == PLATFORM_ACCENTS["android"]
    back = apply_variant(settings, "ios")
    assert (back.sender_color, back.receiver_color) == PLATFORM_ACCENTS["ios"]


def test_author_color_survives_switch() -> None:
    settings = replace(Settings(), sender_color="#123456", receiver_color="")
    result = apply_variant(settings, "twitter", JOHN)
    assert result.sender_color == "#123456"
    assert result.receiver_color == PLATFORM_ACCENTS["twitter"][1]


def test_note_keeps_receiver_color() -> None:
    settings = replace(Settings(), receiver_color="#abcdef")
    result = apply_variant(settings, "note")
    assert result.sender_color == "#4a5568"
    assert result.receiver_color == "#abcdef"


def test_unchanged_settings_returned_as_is() -> None:
    settings = apply_variant(Settings(), "instagram", JOHN)
    assert apply_variant(settings, "instagram", JOHN) is settings
