"""HTML builders, one per variant.

Each builder is a pure function of the shared settings, the option block its
variant reads and the message list, and returns a single-line HTML fragment.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, List, Optional, Sequence

from jinja2 import DictLoader, Environment, select_autoescape
from markupsafe import Markup

from ..config import WATERMARK_TEXT
from .defaults import handle_from_name
from .models import (
    ChatOptions,
    DiscordOptions,
    GoogleOptions,
    InstagramOptions,
    Message,
    NoteOptions,
    Settings,
    TwitterOptions,
)
from .sanitizer import sanitize
from .templates import TEMPLATES

_HASHTAG_RE = re.compile(r"(^|[^\w&])#(\w+)")
_EMPHASIS_RE = re.compile(r"\*([^*]+)\*")
_BETWEEN_TAGS_RE = re.compile(r">\s*\n\s*<")

IOS_RECEIPTS = {"sending": "Sending…", "sent": "Sent", "delivered": "Delivered", "read": "Read"}
ANDROID_TICKS = {"sending": "&#128339;", "sent": "&#10003;", "delivered": "&#10003;&#10003;", "read": "&#10003;&#10003;"}

GOOGLE_LOGO = (("G", "blue"), ("o", "red"), ("o", "yellow"), ("g", "blue"), ("l", "green"), ("e", "red"))
GOOGLE_LOGO_CLASSES = {"google": "sans", "google-old": "old", "naver": "naver"}

DISCORD_NAME_COLORS = {True: "#ffffff", False: "#060607"}


def highlight_hashtags(fragment: str) -> Markup:
    """Wrap ``#word`` tokens of an already sanitized fragment in a span."""
    return Markup(_HASHTAG_RE.sub(r'\1<span class="hashtag">#\2</span>', str(fragment)))


def emphasis(fragment: str) -> Markup:
    """Turn ``*word*`` in an already sanitized fragment into ``<b>word</b>``."""
    return Markup(_EMPHASIS_RE.sub(r"<b>\1</b>", str(fragment)))


@lru_cache(maxsize=1)
def jinja_env() -> Environment:
    env = Environment(
        loader=DictLoader(TEMPLATES),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["sanitize"] = sanitize
    env.filters["hashtags"] = highlight_hashtags
    env.filters["emphasis"] = emphasis
    return env


def _render(template_name: str, settings: Settings, **context: object) -> str:
    template = jinja_env().get_template(template_name)
    rendered = template.render(
        watermark=settings.watermark,
        watermark_text=WATERMARK_TEXT,
        **context,
    )
    return _BETWEEN_TAGS_RE.sub("><", rendered).strip()


def _text(value: Optional[str]) -> str:
    return value.strip() if value else ""


def _visible(toggle: Optional[bool], content: object) -> bool:
    """An optional block shows when it has content and is not switched off."""
    return toggle is not False and bool(content)


# ---------------------------------------------------------------------------
# ios / android
# ---------------------------------------------------------------------------


def _chat_header(variant: str, options: ChatOptions, messages: Sequence[Message]) -> Optional[Dict[str, str]]:
    contact = _text(options.contact_name)
    if variant == "ios":
        if not options.ios_show_header:
            return None
        if not contact:
            contact = next((m.sender for m in messages if not m.outgoing and m.sender), "")
        return {"prefix": "To:", "name": contact, "status": ""} if contact else None
    if not contact:
        return None
    status = ""
    if options.android_show_status:
        status = _text(options.android_status_text) or "Online"
    return {"prefix": "", "name": contact, "status": status}


def _chat_rows(variant: str, options: ChatOptions, messages: Sequence[Message]) -> List[Dict[str, object]]:
    receipt_index = -1
    if variant == "ios" and options.ios_show_delivered:
        for index, message in enumerate(messages):
            if message.outgoing:
                receipt_index = index

    rows: List[Dict[str, object]] = []
    for index, message in enumerate(messages):
        row: Dict[str, object] = {"message": message, "ticks": None, "tick_state": "", "receipt": ""}
        ticks = ANDROID_TICKS.get(message.status or "")
        if variant == "android" and message.outgoing and ticks and options.android_checkmarks is not False:
            row["ticks"] = Markup(ticks)
            row["tick_state"] = message.status
        if index == receipt_index:
            row["receipt"] = IOS_RECEIPTS.get(message.status or "delivered", "Delivered")
        rows.append(row)
    return rows


def _build_chat_html(variant: str, settings: Settings, options: ChatOptions, messages: Sequence[Message]) -> str:
    typing = None
    if options.show_typing:
        typing = {"name": _text(options.typing_name)}
    return _render(
        "chat.html",
        settings,
        variant=variant,
        header=_chat_header(variant, options, messages),
        rows=_chat_rows(variant, options, messages),
        typing=typing,
    )


def build_ios_html(settings: Settings, options: ChatOptions, messages: Sequence[Message]) -> str:
    return _build_chat_html("ios", settings, options, messages)


def build_android_html(settings: Settings, options: ChatOptions, messages: Sequence[Message]) -> str:
    return _build_chat_html("android", settings, options, messages)


# ---------------------------------------------------------------------------
# note
# ---------------------------------------------------------------------------


def build_note_html(settings: Settings, options: NoteOptions, messages: Sequence[Message]) -> str:
    return _render("note.html", settings, style=options.style or "system", messages=messages)


# ---------------------------------------------------------------------------
# twitter
# ---------------------------------------------------------------------------


def _at(handle: str) -> str:
    return f"@{handle.lstrip('@')}"


def _twitter_metrics(options: TwitterOptions) -> List[Dict[str, str]]:
    metrics = []
    for key, title, icon, count in (
        ("replies", "Replies", "↩", options.replies),
        ("retweets", "Retweets", "🔁", options.retweets),
        ("likes", "Likes", "❤", options.likes),
    ):
        if count or options.show_metrics:
            metrics.append({"key": key, "title": title, "icon": icon, "value": f"{count or 0:,}"})
    return metrics


def _twitter_quote(options: TwitterOptions) -> Optional[Dict[str, object]]:
    if not options.quote_enabled:
        return None
    handle = _text(options.quote_handle)
    return {
        "avatar": _text(options.quote_avatar),
        "name": options.quote_name or "",
        "handle": _at(handle) if handle else "",
        "verified": bool(options.quote_verified),
        "text": options.quote_text or "",
        "image": _text(options.quote_image),
    }


def build_twitter_html(settings: Settings, options: TwitterOptions, messages: Sequence[Message]) -> str:
    override = _text(options.handle)
    date_line = _text(options.timestamp)
    tweets = [
        {
            "message": message,
            "handle": _at(override) if override else _at(handle_from_name(message.sender)),
            "time_line": date_line or _text(message.timestamp),
        }
        for message in messages
    ]
    return _render(
        "twitter.html",
        settings,
        tweets=tweets,
        verified=bool(options.verified),
        metrics=_twitter_metrics(options),
        context_link=_text(options.context_link_text),
        quote=_twitter_quote(options),
    )


# ---------------------------------------------------------------------------
# google
# ---------------------------------------------------------------------------


def _google_stats(options: GoogleOptions) -> str:
    count = _text(options.results_count)
    elapsed = _text(options.results_time)
    parts = [count] if count else []
    if elapsed:
        parts.append(f"({elapsed})")
    return " ".join(parts)


def build_google_html(settings: Settings, options: GoogleOptions, messages: Sequence[Message]) -> str:
    engine = options.engine or "google"
    query = _text(options.query)
    if not query:
        query = (messages[0].content if messages else "") or "search query"
    stats = _google_stats(options)
    did_you_mean = _text(options.did_you_mean)
    return _render(
        "google.html",
        settings,
        engine=engine,
        logo_class=GOOGLE_LOGO_CLASSES.get(engine, "sans"),
        logo_letters=GOOGLE_LOGO,
        query=query,
        suggestions=[line for line in options.suggestions if line.strip()],
        stats=stats if _visible(options.show_stats, stats) else "",
        did_you_mean=did_you_mean if _visible(options.show_did_you_mean, did_you_mean) else "",
    )


# ---------------------------------------------------------------------------
# instagram
# ---------------------------------------------------------------------------


def build_instagram_html(settings: Settings, options: InstagramOptions, messages: Sequence[Message]) -> str:
    first = messages[0] if messages else None
    username = _text(options.username) or (handle_from_name(first.sender) if first else "") or "user"
    caption = options.caption or (first.content if first else "")
    avatar = _text(options.avatar_url) or (_text(first.avatar_url) if first else "")
    image = _text(options.image_url)
    if not image and first is not None and first.attachments:
        image = first.attachments[0].url

    likes = f"{options.likes:,}" if _visible(options.show_likes, options.likes) else None
    comments = f"{options.comments_count:,}" if _visible(options.show_comments, options.comments_count) else None
    return _render(
        "instagram.html",
        settings,
        username=username,
        caption=caption,
        avatar=avatar,
        image=image,
        location=_text(options.location),
        likes=likes,
        comments=comments,
        timestamp=_text(options.timestamp),
    )


# ---------------------------------------------------------------------------
# discord
# ---------------------------------------------------------------------------


def _role_color(message: Message, options: DiscordOptions, dark: bool) -> str:
    role = _text(message.role_color)
    if role and not role.startswith("#"):
        for preset in options.role_presets:
            if preset.name.lower() == role.lower():
                return preset.color
    return role or DISCORD_NAME_COLORS[dark]


def build_discord_html(settings: Settings, options: DiscordOptions, messages: Sequence[Message]) -> str:
    dark = options.dark_mode is not False
    header = None
    if options.show_header is not False:
        header = {
            "server": _text(options.server_name),
            "channel": _text(options.channel_name) or "general",
        }
    lines = [{"message": m, "name_color": _role_color(m, options, dark)} for m in messages]
    return _render("discord.html", settings, dark=dark, header=header, lines=lines)
