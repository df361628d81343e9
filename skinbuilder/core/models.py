"""Data models for the skin builder.

Every model is a frozen dataclass and sequences are tuples, so a Project is an
immutable, hashable value and edits go through ``dataclasses.replace``.

Settings keep one option block per variant family next to the shared fields.
Blocks are always present, which lets an author switch variants back and forth
without losing choices. On disk the settings are a single flat camelCase
object (``twitterHandle``, ``discordDarkMode``, ...); ``to_dict``/``from_dict``
translate between the two shapes.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Literal, Optional, Tuple

VARIANTS: Tuple[str, ...] = ("ios", "android", "note", "twitter", "google", "instagram", "discord")
Variant = Literal["ios", "android", "note", "twitter", "google", "instagram", "discord"]

MESSAGE_STATUSES = ("sending", "sent", "delivered", "read")
NOTE_STYLES = ("system", "document", "letter", "simple")
NOTE_ALIGNMENTS = ("center", "left", "right")
GOOGLE_ENGINES = ("google", "google-old", "naver")
IOS_MODES = ("imessage", "sms")


def new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Coercion helpers for data coming back from JSON
# ---------------------------------------------------------------------------


def _opt_str(val: object) -> Optional[str]:
    if val is None:
        return None
    return val if isinstance(val, str) else str(val)


def _opt_bool(val: object) -> Optional[bool]:
    if val is None:
        return None
    return bool(val)


def _opt_int(val: object) -> Optional[int]:
    if val is None or isinstance(val, bool):
        return None
    try:
        return int(val)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _opt_choice(val: object, choices: Tuple[str, ...]) -> Optional[str]:
    return val if isinstance(val, str) and val in choices else None


def _safe_float(val: object, default: float) -> float:
    try:
        return float(val)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _safe_int(val: object, default: int) -> int:
    try:
        return int(val)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _safe_list(val: object) -> list:
    return val if isinstance(val, list) else []


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Attachment:
    url: str
    alt: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"type": "image", "url": self.url}
        if self.alt:
            payload["alt"] = self.alt
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Attachment":
        return cls(url=str(data.get("url", "")), alt=_opt_str(data.get("alt")))


@dataclass(frozen=True)
class Message:
    """One chat line or post unit. ``outgoing`` marks the author's side."""

    id: str
    sender: str
    content: str
    outgoing: bool = False
    timestamp: Optional[str] = None
    avatar_url: Optional[str] = None
    attachments: Tuple[Attachment, ...] = ()
    role_color: Optional[str] = None
    status: Optional[str] = None  # sending, sent, delivered, read
    reaction: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.attachments, tuple):
            object.__setattr__(self, "attachments", tuple(self.attachments))

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "id": self.id,
            "sender": self.sender,
            "content": self.content,
            "outgoing": self.outgoing,
        }
        optional = {
            "timestamp": self.timestamp,
            "avatarUrl": self.avatar_url,
            "roleColor": self.role_color,
            "status": self.status,
            "reaction": self.reaction,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        if self.attachments:
            payload["attachments"] = [att.to_dict() for att in self.attachments]
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Message":
        attachments = tuple(
            Attachment.from_dict(att)
            for att in _safe_list(data.get("attachments"))
            if isinstance(att, dict) and att.get("url")
        )
        return cls(
            id=str(data.get("id") or new_id()),
            sender=str(data.get("sender", "")),
            content=str(data.get("content", "")),
            outgoing=bool(data.get("outgoing", False)),
            timestamp=_opt_str(data.get("timestamp")),
            avatar_url=_opt_str(data.get("avatarUrl")),
            attachments=attachments,
            role_color=_opt_str(data.get("roleColor")),
            status=_opt_choice(data.get("status"), MESSAGE_STATUSES),
            reaction=_opt_str(data.get("reaction")),
        )


# ---------------------------------------------------------------------------
# Variant option blocks
# ---------------------------------------------------------------------------


def _block_to_flat(block: object) -> Dict[str, object]:
    payload: Dict[str, object] = {}
    for attr, key in block.FLAT_KEYS.items():  # type: ignore[attr-defined]
        value = getattr(block, attr)
        if value is None:
            continue
        if isinstance(value, tuple):
            value = [item.to_dict() if hasattr(item, "to_dict") else item for item in value]
        payload[key] = value
    return payload


@dataclass(frozen=True)
class ChatOptions:
    """Options read by the ios and android chat layouts."""

    FLAT_KEYS: ClassVar[Dict[str, str]] = {
        "ios_mode": "iosMode",
        "contact_name": "chatContactName",
        "show_typing": "chatShowTyping",
        "typing_name": "chatTypingName",
        "ios_show_delivered": "iosShowDelivered",
        "ios_show_header": "iosShowHeader",
        "android_show_status": "androidShowStatus",
        "android_status_text": "androidStatusText",
        "android_checkmarks": "androidCheckmarks",
    }

    ios_mode: Optional[str] = None  # imessage, sms
    contact_name: Optional[str] = None
    show_typing: Optional[bool] = None
    typing_name: Optional[str] = None
    ios_show_delivered: Optional[bool] = None
    ios_show_header: Optional[bool] = None
    android_show_status: Optional[bool] = None
    android_status_text: Optional[str] = None
    android_checkmarks: Optional[bool] = None

    def to_flat(self) -> Dict[str, object]:
        return _block_to_flat(self)

    @classmethod
    def from_flat(cls, data: Dict[str, object]) -> "ChatOptions":
        return cls(
            ios_mode=_opt_choice(data.get("iosMode"), IOS_MODES),
            contact_name=_opt_str(data.get("chatContactName")),
            show_typing=_opt_bool(data.get("chatShowTyping")),
            typing_name=_opt_str(data.get("chatTypingName")),
            ios_show_delivered=_opt_bool(data.get("iosShowDelivered")),
            ios_show_header=_opt_bool(data.get("iosShowHeader")),
            android_show_status=_opt_bool(data.get("androidShowStatus")),
            android_status_text=_opt_str(data.get("androidStatusText")),
            android_checkmarks=_opt_bool(data.get("androidCheckmarks")),
        )


@dataclass(frozen=True)
class NoteOptions:
    FLAT_KEYS: ClassVar[Dict[str, str]] = {"style": "noteStyle", "alignment": "noteAlignment"}

    style: Optional[str] = None  # system, document, letter, simple
    alignment: Optional[str] = None  # center, left, right

    def to_flat(self) -> Dict[str, object]:
        return _block_to_flat(self)

    @classmethod
    def from_flat(cls, data: Dict[str, object]) -> "NoteOptions":
        return cls(
            style=_opt_choice(data.get("noteStyle"), NOTE_STYLES),
            alignment=_opt_choice(data.get("noteAlignment"), NOTE_ALIGNMENTS),
        )


@dataclass(frozen=True)
class TwitterOptions:
    FLAT_KEYS: ClassVar[Dict[str, str]] = {
        "handle": "twitterHandle",
        "verified": "twitterVerified",
        "likes": "twitterLikes",
        "retweets": "twitterRetweets",
        "replies": "twitterReplies",
        "context_link_text": "twitterContextLinkText",
        "show_metrics": "twitterShowMetrics",
        "timestamp": "twitterTimestamp",
        "quote_enabled": "twitterQuoteEnabled",
        "quote_avatar": "twitterQuoteAvatar",
        "quote_name": "twitterQuoteName",
        "quote_handle": "twitterQuoteHandle",
        "quote_verified": "twitterQuoteVerified",
        "quote_text": "twitterQuoteText",
        "quote_image": "twitterQuoteImage",
    }

    handle: Optional[str] = None
    verified: Optional[bool] = None
    likes: Optional[int] = None
    retweets: Optional[int] = None
    replies: Optional[int] = None
    context_link_text: Optional[str] = None
    show_metrics: Optional[bool] = None
    timestamp: Optional[str] = None  # full date line, e.g. "3:09 PM · 5 May 2014"
    quote_enabled: Optional[bool] = None
    quote_avatar: Optional[str] = None
    quote_name: Optional[str] = None
    quote_handle: Optional[str] = None
    quote_verified: Optional[bool] = None
    quote_text: Optional[str] = None
    quote_image: Optional[str] = None

    def to_flat(self) -> Dict[str, object]:
        return _block_to_flat(self)

    @classmethod
    def from_flat(cls, data: Dict[str, object]) -> "TwitterOptions":
        return cls(
            handle=_opt_str(data.get("twitterHandle")),
            verified=_opt_bool(data.get("twitterVerified")),
            likes=_opt_int(data.get("twitterLikes")),
            retweets=_opt_int(data.get("twitterRetweets")),
            replies=_opt_int(data.get("twitterReplies")),
            context_link_text=_opt_str(data.get("twitterContextLinkText")),
            show_metrics=_opt_bool(data.get("twitterShowMetrics")),
            timestamp=_opt_str(data.get("twitterTimestamp")),
            quote_enabled=_opt_bool(data.get("twitterQuoteEnabled")),
            quote_avatar=_opt_str(data.get("twitterQuoteAvatar")),
            quote_name=_opt_str(data.get("twitterQuoteName")),
            quote_handle=_opt_str(data.get("twitterQuoteHandle")),
            quote_verified=_opt_bool(data.get("twitterQuoteVerified")),
            quote_text=_opt_str(data.get("twitterQuoteText")),
            quote_image=_opt_str(data.get("twitterQuoteImage")),
        )


@dataclass(frozen=True)
class GoogleOptions:
    FLAT_KEYS: ClassVar[Dict[str, str]] = {
        "query": "googleQuery",
        "suggestions": "googleSuggestions",
        "show_stats": "googleShowStats",
        "results_count": "googleResultsCount",
        "results_time": "googleResultsTime",
        "show_did_you_mean": "googleShowDidYouMean",
        "did_you_mean": "googleDidYouMean",
        "engine": "googleEngineVariant",
    }

    query: Optional[str] = None
    suggestions: Tuple[str, ...] = ()
    show_stats: Optional[bool] = None
    results_count: Optional[str] = None  # "About 24,040,000,000 results"
    results_time: Optional[str] = None  # "0.56 seconds"
    show_did_you_mean: Optional[bool] = None
    did_you_mean: Optional[str] = None
    engine: Optional[str] = None  # google, google-old, naver

    def __post_init__(self) -> None:
        if not isinstance(self.suggestions, tuple):
            object.__setattr__(self, "suggestions", tuple(self.suggestions))

    def to_flat(self) -> Dict[str, object]:
        return _block_to_flat(self)

    @classmethod
    def from_flat(cls, data: Dict[str, object]) -> "GoogleOptions":
        return cls(
            query=_opt_str(data.get("googleQuery")),
            suggestions=tuple(str(line) for line in _safe_list(data.get("googleSuggestions"))),
            show_stats=_opt_bool(data.get("googleShowStats")),
            results_count=_opt_str(data.get("googleResultsCount")),
            results_time=_opt_str(data.get("googleResultsTime")),
            show_did_you_mean=_opt_bool(data.get("googleShowDidYouMean")),
            did_you_mean=_opt_str(data.get("googleDidYouMean")),
            engine=_opt_choice(data.get("googleEngineVariant"), GOOGLE_ENGINES),
        )


@dataclass(frozen=True)
class InstagramOptions:
    FLAT_KEYS: ClassVar[Dict[str, str]] = {
        "username": "instagramUsername",
        "avatar_url": "instagramAvatarUrl",
        "image_url": "instagramImageUrl",
        "caption": "instagramCaption",
        "location": "instagramLocation",
        "show_likes": "instagramShowLikes",
        "likes": "instagramLikes",
        "show_comments": "instagramShowComments",
        "comments_count": "instagramCommentsCount",
        "timestamp": "instagramTimestamp",
    }

    username: Optional[str] = None
    avatar_url: Optional[str] = None
    image_url: Optional[str] = None
    caption: Optional[str] = None
    location: Optional[str] = None
    show_likes: Optional[bool] = None
    likes: Optional[int] = None
    show_comments: Optional[bool] = None
    comments_count: Optional[int] = None
    timestamp: Optional[str] = None  # "2 hours ago", "May 5"

    def to_flat(self) -> Dict[str, object]:
        return _block_to_flat(self)

    @classmethod
    def from_flat(cls, data: Dict[str, object]) -> "InstagramOptions":
        return cls(
            username=_opt_str(data.get("instagramUsername")),
            avatar_url=_opt_str(data.get("instagramAvatarUrl")),
            image_url=_opt_str(data.get("instagramImageUrl")),
            caption=_opt_str(data.get("instagramCaption")),
            location=_opt_str(data.get("instagramLocation")),
            show_likes=_opt_bool(data.get("instagramShowLikes")),
            likes=_opt_int(data.get("instagramLikes")),
            show_comments=_opt_bool(data.get("instagramShowComments")),
            comments_count=_opt_int(data.get("instagramCommentsCount")),
            timestamp=_opt_str(data.get("instagramTimestamp")),
        )


@dataclass(frozen=True)
class RolePreset:
    name: str
    color: str

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "color": self.color}

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "RolePreset":
        return cls(name=str(data.get("name", "")), color=str(data.get("color", "")))


@dataclass(frozen=True)
class DiscordOptions:
    FLAT_KEYS: ClassVar[Dict[str, str]] = {
        "channel_name": "discordChannelName",
        "server_name": "discordServerName",
        "show_header": "discordShowHeader",
        "dark_mode": "discordDarkMode",
        "role_presets": "discordRolePresets",
    }

    channel_name: Optional[str] = None
    server_name: Optional[str] = None
    show_header: Optional[bool] = None  # None reads as True
    dark_mode: Optional[bool] = None  # None reads as True
    role_presets: Tuple[RolePreset, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.role_presets, tuple):
            object.__setattr__(self, "role_presets", tuple(self.role_presets))

    def to_flat(self) -> Dict[str, object]:
        return _block_to_flat(self)

    @classmethod
    def from_flat(cls, data: Dict[str, object]) -> "DiscordOptions":
        presets = tuple(
            RolePreset.from_dict(item)
            for item in _safe_list(data.get("discordRolePresets"))
            if isinstance(item, dict)
        )
        return cls(
            channel_name=_opt_str(data.get("discordChannelName")),
            server_name=_opt_str(data.get("discordServerName")),
            show_header=_opt_bool(data.get("discordShowHeader")),
            dark_mode=_opt_bool(data.get("discordDarkMode")),
            role_presets=presets,
        )


OPTION_BLOCKS = {
    "chat": ChatOptions,
    "note": NoteOptions,
    "twitter": TwitterOptions,
    "google": GoogleOptions,
    "instagram": InstagramOptions,
    "discord": DiscordOptions,
}


# ---------------------------------------------------------------------------
# Settings & project
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Settings:
    bubble_opacity: float = 0.9
    sender_color: str = "#1d9bf0"
    receiver_color: str = "#ececec"
    font_family: str = "Arial, Helvetica, sans-serif"
    max_width_px: int = 400
    use_dark_neutral: bool = True
    watermark: bool = True
    chat: ChatOptions = field(default_factory=ChatOptions)
    note: NoteOptions = field(default_factory=NoteOptions)
    twitter: TwitterOptions = field(default_factory=TwitterOptions)
    google: GoogleOptions = field(default_factory=GoogleOptions)
    instagram: InstagramOptions = field(default_factory=InstagramOptions)
    discord: DiscordOptions = field(default_factory=DiscordOptions)

    def options(self, block: str) -> object:
        if block not in OPTION_BLOCKS:
            raise KeyError(block)
        return getattr(self, block)

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "bubbleOpacity": self.bubble_opacity,
            "senderColor": self.sender_color,
            "receiverColor": self.receiver_color,
            "fontFamily": self.font_family,
            "maxWidthPx": self.max_width_px,
            "useDarkNeutral": self.use_dark_neutral,
            "watermark": self.watermark,
        }
        for block in OPTION_BLOCKS:
            payload.update(getattr(self, block).to_flat())
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Settings":
        defaults = cls()
        return cls(
            bubble_opacity=_safe_float(data.get("bubbleOpacity"), defaults.bubble_opacity),
            sender_color=str(data.get("senderColor", defaults.sender_color)),
            receiver_color=str(data.get("receiverColor", defaults.receiver_color)),
            font_family=str(data.get("fontFamily", defaults.font_family)),
            max_width_px=_safe_int(data.get("maxWidthPx"), defaults.max_width_px),
            use_dark_neutral=bool(data.get("useDarkNeutral", defaults.use_dark_neutral)),
            watermark=bool(data.get("watermark", defaults.watermark)),
            chat=ChatOptions.from_flat(data),
            note=NoteOptions.from_flat(data),
            twitter=TwitterOptions.from_flat(data),
            google=GoogleOptions.from_flat(data),
            instagram=InstagramOptions.from_flat(data),
            discord=DiscordOptions.from_flat(data),
        )


@dataclass(frozen=True)
class Project:
    id: str
    variant: str = "ios"
    settings: Settings = field(default_factory=Settings)
    messages: Tuple[Message, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))

    @property
    def first_message(self) -> Optional[Message]:
        return self.messages[0] if self.messages else None

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "variant": self.variant,
            "settings": self.settings.to_dict(),
            "messages": [msg.to_dict() for msg in self.messages],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Project":
        variant = data.get("variant", data.get("template", "ios"))
        if variant not in VARIANTS:
            variant = "ios"
        settings_data = data.get("settings")
        messages: List[Message] = [
            Message.from_dict(msg) for msg in _safe_list(data.get("messages")) if isinstance(msg, dict)
        ]
        return cls(
            id=str(data.get("id") or new_id()),
            variant=str(variant),
            settings=Settings.from_dict(settings_data if isinstance(settings_data, dict) else {}),
            messages=tuple(messages),
        )


def default_project() -> Project:
    return Project(
        id=new_id(),
        variant="ios",
        settings=Settings(
            chat=ChatOptions(
                contact_name="",
                show_typing=False,
                typing_name="",
                ios_show_delivered=False,
                ios_show_header=False,
                android_show_status=False,
                android_status_text="Online",
                android_checkmarks=True,
            ),
            note=NoteOptions(style="system", alignment="center"),
            twitter=TwitterOptions(
                handle="",
                verified=False,
                likes=0,
                retweets=0,
                replies=0,
                context_link_text="People are talking about this",
                show_metrics=True,
                timestamp="",
                quote_enabled=False,
                quote_avatar="",
                quote_name="",
                quote_handle="",
                quote_verified=False,
                quote_text="",
                quote_image="",
            ),
            google=GoogleOptions(
                query="",
                suggestions=(),
                show_stats=False,
                results_count="",
                results_time="",
                show_did_you_mean=False,
                did_you_mean="",
                engine="google",
            ),
            instagram=InstagramOptions(
                username="",
                avatar_url="",
                image_url="",
                caption="",
                location="",
                show_likes=False,
                likes=0,
                show_comments=False,
                comments_count=0,
                timestamp="",
            ),
            discord=DiscordOptions(
                channel_name="general",
                server_name="",
                show_header=True,
                dark_mode=True,
                role_presets=(
                    RolePreset("Admin", "#ED4245"),
                    RolePreset("Moderator", "#5865F2"),
                    RolePreset("Member", "#B9BBBE"),
                ),
            ),
        ),
        messages=(
            Message(id=new_id(), sender="You", content="Where are you?", outgoing=True, timestamp="10:15"),
            Message(id=new_id(), sender="Alice", content="On my way.", outgoing=False, timestamp="10:15"),
        ),
    )
