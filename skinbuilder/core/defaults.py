"""Defaults applied when the author switches to another variant.

Each rule is a pure function ``(settings, first_message) -> settings``. A rule
only writes a field that is still empty. Colors count as empty when they are
blank or still hold a platform accent that one of these rules wrote earlier,
so an author's own color always survives a switch while a stale accent from
the previous variant is replaced. Once a rule has run, every field it guards
is filled, so running it again returns the same settings.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable, Dict, Optional, Tuple

from .models import Message, Settings

DefaultRule = Callable[[Settings, Optional[Message]], Settings]

# (sender, receiver) accents; None leaves that color alone.
PLATFORM_ACCENTS: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "ios": ("#1d9bf0", "#ececec"),
    "android": ("#dcf8c6", "#ffffff"),  # WhatsApp green
    "note": ("#4a5568", None),
    "twitter": ("#1DA1F2", "#f5f8fa"),
    "google": ("#4285F4", None),
    "instagram": ("#E1306C", "#FDFDFD"),
}

_KNOWN_ACCENTS = frozenset(
    color.lower() for pair in PLATFORM_ACCENTS.values() for color in pair if color
)

INSTAGRAM_DEFAULT_TIMESTAMP = "2 hours ago"
DISCORD_DEFAULT_CHANNEL = "general"

_WHITESPACE_RE = re.compile(r"\s+")


def is_unset(value: object) -> bool:
    return value is None or value == ""


def handle_from_name(name: str) -> str:
    return _WHITESPACE_RE.sub("", name.lower())


def _color_is_replaceable(color: str) -> bool:
    return is_unset(color) or color.strip().lower() in _KNOWN_ACCENTS


def _with_accents(settings: Settings, variant: str) -> Settings:
    sender, receiver = PLATFORM_ACCENTS[variant]
    changes: Dict[str, str] = {}
    if sender and _color_is_replaceable(settings.sender_color) and settings.sender_color != sender:
        changes["sender_color"] = sender
    if receiver and _color_is_replaceable(settings.receiver_color) and settings.receiver_color != receiver:
        changes["receiver_color"] = receiver
    return replace(settings, **changes) if changes else settings


def ios_defaults(settings: Settings, first_message: Optional[Message] = None) -> Settings:
    return _with_accents(settings, "ios")


def android_defaults(settings: Settings, first_message: Optional[Message] = None) -> Settings:
    return _with_accents(settings, "android")


def note_defaults(settings: Settings, first_message: Optional[Message] = None) -> Settings:
    return _with_accents(settings, "note")


def twitter_defaults(settings: Settings, first_message: Optional[Message] = None) -> Settings:
    settings = _with_accents(settings, "twitter")
    opts = settings.twitter
    changes: Dict[str, object] = {}
    if is_unset(opts.handle) and first_message is not None:
        changes["handle"] = handle_from_name(first_message.sender)
    # Empty string marks "no default date line" rather than "never decided".
    if opts.timestamp is None:
        changes["timestamp"] = ""
    if not changes:
        return settings
    return replace(settings, twitter=replace(opts, **changes))


def google_defaults(settings: Settings, first_message: Optional[Message] = None) -> Settings:
    settings = _with_accents(settings, "google")
    opts = settings.google
    if is_unset(opts.query) and first_message is not None and first_message.content:
        return replace(settings, google=replace(opts, query=first_message.content))
    if opts.query is None:
        return replace(settings, google=replace(opts, query=""))
    return settings


def instagram_defaults(settings: Settings, first_message: Optional[Message] = None) -> Settings:
    settings = _with_accents(settings, "instagram")
    opts = settings.instagram
    changes: Dict[str, object] = {}
    if first_message is not None:
        if is_unset(opts.username):
            changes["username"] = handle_from_name(first_message.sender)
        if is_unset(opts.caption):
            changes["caption"] = first_message.content
    if is_unset(opts.timestamp):
        changes["timestamp"] = INSTAGRAM_DEFAULT_TIMESTAMP
    if not changes:
        return settings
    return replace(settings, instagram=replace(opts, **changes))


def discord_defaults(settings: Settings, first_message: Optional[Message] = None) -> Settings:
    opts = settings.discord
    # Unset toggles read as on; only an explicit False turns them off.
    updated = replace(
        opts,
        channel_name=DISCORD_DEFAULT_CHANNEL if is_unset(opts.channel_name) else opts.channel_name,
        show_header=opts.show_header is not False,
        dark_mode=opts.dark_mode is not False,
    )
    if updated == opts:
        return settings
    return replace(settings, discord=updated)
