"""CSS builders, one per variant.

Every rule is nested under ``ROOT_SCOPE`` so the stylesheet neither leaks into
nor inherits overrides from the host page. Layouts are fluid up to
``max_width_px`` and hold together down to 280px.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..config import DEFAULT_FONT_FAMILY, ROOT_SCOPE
from .colors import to_rgba
from .models import (
    ChatOptions,
    DiscordOptions,
    GoogleOptions,
    InstagramOptions,
    NoteOptions,
    Settings,
    TwitterOptions,
)

# iOS modes replace the author's colors and opacity outright.
IOS_MODE_PALETTES: Dict[str, Tuple[str, str]] = {
    "imessage": ("#0a84ff", "#e5e5ea"),
    "sms": ("#34c759", "#e5e5ea"),
}

NEUTRAL_DARK = "rgba(255,255,255,0.08)"
NEUTRAL_LIGHT = "transparent"


@dataclass(frozen=True)
class BubbleColors:
    sender: str
    receiver: str
    neutral: str


def bubble_colors(settings: Settings, sender_color: str | None = None,
                  receiver_color: str | None = None, opacity: float | None = None) -> BubbleColors:
    alpha = settings.bubble_opacity if opacity is None else opacity
    return BubbleColors(
        sender=to_rgba(sender_color or settings.sender_color, alpha),
        receiver=to_rgba(receiver_color or settings.receiver_color, alpha),
        neutral=NEUTRAL_DARK if settings.use_dark_neutral else NEUTRAL_LIGHT,
    )


def _font(settings: Settings) -> str:
    return settings.font_family.strip() or DEFAULT_FONT_FAMILY


def _shared_rules(s: str) -> str:
    return f"""{s} .wm{{margin-top:12px;font-size:10px;opacity:0.5;text-align:center;}}
{s} .visually-hidden{{position:absolute;left:-9999px;top:auto;width:1px;height:1px;overflow:hidden;}}"""


def _attachment_rules(s: str) -> str:
    return f"""{s} dd.attach{{margin-top:4px;}}
{s} img.attach-img{{max-width:100%;width:200px;height:auto;border-radius:8px;display:block;}}"""


def _typing_rules(s: str, dot_color: str) -> str:
    return f"""{s} .typing-row{{margin-top:4px;}}
{s} .typing{{display:inline-flex;align-items:center;gap:6px;padding:8px 12px;border-radius:16px;background:rgba(127,127,127,0.18);}}
{s} .typing-name{{font-size:11px;opacity:0.7;}}
{s} .typing-dots{{display:inline-flex;gap:3px;}}
{s} .typing-dots .dot{{width:6px;height:6px;border-radius:50%;background:{dot_color};display:inline-block;animation:workskin-typing 1.2s infinite ease-in-out;}}
{s} .typing-dots .dot:nth-child(2){{animation-delay:0.2s;}}
{s} .typing-dots .dot:nth-child(3){{animation-delay:0.4s;}}
@keyframes workskin-typing{{0%,60%,100%{{opacity:0.3;transform:translateY(0);}}30%{{opacity:1;transform:translateY(-3px);}}}}"""


# ---------------------------------------------------------------------------
# ios / android
# ---------------------------------------------------------------------------


def build_ios_css(settings: Settings, options: ChatOptions) -> str:
    s = ROOT_SCOPE
    palette = IOS_MODE_PALETTES.get(options.ios_mode or "")
    if palette:
        colors = bubble_colors(settings, sender_color=palette[0], receiver_color=palette[1], opacity=1)
    else:
        colors = bubble_colors(settings)
    css = f"""{s} .chat{{width:100%;max-width:{settings.max_width_px}px;margin:0 auto;display:flex;flex-direction:column;font-family:{_font(settings)};box-sizing:border-box;padding:0 6px;}}
{s} .chat-header{{text-align:center;font-size:12px;padding:6px 0 10px 0;margin-bottom:6px;border-bottom:1px solid rgba(127,127,127,0.25);}}
{s} .chat-to{{opacity:0.6;margin-right:4px;}}
{s} .chat-contact{{font-weight:600;}}
{s} .row{{display:flex;gap:8px;margin:6px 0;align-items:flex-end;}}
{s} .row.out{{flex-direction:row-reverse;}}
{s} img.avatar{{width:32px;height:32px;border-radius:50%;object-fit:cover;flex-shrink:0;}}
{s} dl.msg{{margin:0;display:flex;flex-direction:column;max-width:75%;min-width:0;}}
{s} .row.out dl.msg{{align-items:flex-end;}}
{s} dt.sender{{font-size:10px;opacity:0.6;margin:0 4px 2px 4px;}}
{s} dd{{margin:0;}}
{s} dd.bubble{{position:relative;padding:6px 10px;border-radius:16px;line-height:1.3;word-wrap:break-word;overflow-wrap:anywhere;background:{colors.neutral};color:inherit;}}
{s} dd.bubble.out{{background:{colors.sender};color:#fff;border-bottom-right-radius:4px;}}
{s} dd.bubble.out::after{{content:"";position:absolute;right:-5px;bottom:0;width:10px;height:10px;background:{colors.sender};border-bottom-left-radius:16px 14px;}}
{s} dd.bubble.in{{background:{colors.receiver};color:#000;border-bottom-left-radius:4px;}}
{s} dd.bubble.in::after{{content:"";position:absolute;left:-5px;bottom:0;width:10px;height:10px;background:{colors.receiver};border-bottom-right-radius:16px 14px;}}
{s} dd.bubble .time{{display:block;font-size:9px;opacity:0.6;margin-top:4px;}}
{s} dd.bubble .reaction{{position:absolute;top:-10px;right:-6px;font-size:12px;line-height:1;padding:2px 4px;border-radius:10px;background:#fff;box-shadow:0 1px 2px rgba(0,0,0,0.2);}}
{s} dd.bubble.out .reaction{{right:auto;left:-6px;}}
{s} dd.receipt{{font-size:10px;opacity:0.6;margin:2px 4px 0 0;text-align:right;}}
{_attachment_rules(s)}
{_shared_rules(s)}"""
    if options.show_typing:
        css += "\n" + _typing_rules(s, "rgba(127,127,127,0.9)")
    return css


def build_android_css(settings: Settings, options: ChatOptions) -> str:
    s = ROOT_SCOPE
    colors = bubble_colors(settings)
    css = f"""{s} .chat{{width:100%;max-width:{settings.max_width_px}px;margin:0 auto;display:flex;flex-direction:column;font-family:{_font(settings)};background:rgba(230,235,230,0.2);padding:12px;border-radius:8px;box-sizing:border-box;}}
{s} .chat-header{{display:flex;flex-direction:column;padding:4px 8px 10px 8px;margin-bottom:6px;border-bottom:1px solid rgba(0,0,0,0.1);}}
{s} .chat-contact{{font-weight:600;font-size:15px;}}
{s} .chat-status{{font-size:11px;opacity:0.7;}}
{s} .row{{display:flex;gap:8px;margin:8px 0;align-items:flex-start;}}
{s} .row.out{{flex-direction:row-reverse;}}
{s} img.avatar{{width:36px;height:36px;border-radius:50%;object-fit:cover;flex-shrink:0;}}
{s} dl.msg{{margin:0;display:flex;flex-direction:column;max-width:85%;min-width:0;}}
{s} .row.out dl.msg{{align-items:flex-end;}}
{s} dt.sender{{font-size:12px;color:rgba(100,100,100,0.8);margin:0 0 3px 8px;font-weight:600;}}
{s} dd{{margin:0;}}
{s} dd.bubble{{position:relative;padding:8px 12px;border-radius:8px;line-height:1.4;word-wrap:break-word;overflow-wrap:anywhere;background:{colors.neutral};color:inherit;box-shadow:0 1px 2px rgba(0,0,0,0.1);}}
{s} dd.bubble.out{{background:{colors.sender};color:#000;border-radius:8px 8px 2px 8px;}}
{s} dd.bubble.in{{background:{colors.receiver};color:#000;border-radius:8px 8px 8px 2px;}}
{s} dd.bubble .time{{display:inline;font-size:10px;opacity:0.5;margin-left:8px;float:right;}}
{s} dd.bubble .ticks{{font-size:10px;margin-left:4px;float:right;color:#8696a0;}}
{s} dd.bubble .ticks-read{{color:#53bdeb;}}
{s} dd.bubble .reaction{{position:absolute;bottom:-12px;left:8px;font-size:12px;line-height:1;padding:2px 4px;border-radius:10px;background:#fff;box-shadow:0 1px 2px rgba(0,0,0,0.2);}}
{s} dd.bubble.out .reaction{{left:auto;right:8px;}}
{_attachment_rules(s)}
{_shared_rules(s)}"""
    if options.show_typing:
        css += "\n" + _typing_rules(s, "#25d366")
    return css


# ---------------------------------------------------------------------------
# note
# ---------------------------------------------------------------------------

NOTE_ALIGNMENT_RULES = {
    "center": ("center", "center", "center"),
    "left": ("flex-start", "flex-start", "left"),
    "right": ("flex-end", "flex-end", "right"),
}


def _note_style_rules(s: str, style: str, accent: str) -> str:
    if style == "document":
        return f"""{s} .note-document dt.sender{{font-family:"Courier New",Courier,monospace;letter-spacing:2px;text-transform:uppercase;color:#b91c1c;opacity:1;}}
{s} .note-document dd.bubble{{background:#fdfdfb;color:#111;font-family:"Courier New",Courier,monospace;border:1px solid #cfcfcf;border-radius:2px;box-shadow:0 2px 6px rgba(0,0,0,0.15);}}"""
    if style == "letter":
        return f"""{s} .note-letter dt.sender{{font-family:Georgia,"Times New Roman",serif;font-style:italic;opacity:0.8;}}
{s} .note-letter dd.bubble{{background:#fdf6e3;color:#3b2f1e;font-family:Georgia,"Times New Roman",serif;font-style:italic;border:none;border-left:3px solid #d6c7a1;border-radius:4px;}}"""
    if style == "simple":
        return f"""{s} .note-simple dd.bubble{{background:transparent;color:inherit;border:none;padding:4px 0;}}"""
    return f"""{s} .note-system dt.sender{{text-transform:uppercase;letter-spacing:1px;font-weight:700;}}
{s} .note-system dd.bubble{{font-weight:600;border:2px solid {accent};}}"""


def build_note_css(settings: Settings, options: NoteOptions) -> str:
    s = ROOT_SCOPE
    colors = bubble_colors(settings)
    justify, items, text_align = NOTE_ALIGNMENT_RULES.get(options.alignment or "center", NOTE_ALIGNMENT_RULES["center"])
    return f"""{s} .chat{{width:100%;max-width:{settings.max_width_px}px;margin:20px auto;display:flex;flex-direction:column;font-family:{_font(settings)};box-sizing:border-box;}}
{s} .row{{display:flex;justify-content:{justify};margin:12px 0;width:100%;}}
{s} dl.msg{{margin:0;display:flex;flex-direction:column;align-items:{items};max-width:100%;min-width:0;}}
{s} dt.sender{{font-size:11px;opacity:0.5;margin:0 0 4px 0;font-weight:600;}}
{s} dd{{margin:0;max-width:100%;}}
{s} dd.bubble{{background:{colors.sender};color:#fff;padding:10px 16px;border-radius:12px;line-height:1.4;text-align:{text_align};max-width:100%;word-wrap:break-word;word-break:break-word;border:1px solid rgba(255,255,255,0.1);box-sizing:border-box;}}
{s} dd.bubble .time{{display:block;font-size:9px;opacity:0.6;margin-top:6px;}}
{_note_style_rules(s, options.style or "system", settings.sender_color)}
{_attachment_rules(s)}
{_shared_rules(s)}"""


# ---------------------------------------------------------------------------
# twitter
# ---------------------------------------------------------------------------


def build_twitter_css(settings: Settings, options: TwitterOptions) -> str:
    s = ROOT_SCOPE
    accent = settings.sender_color
    return f"""{s} .chat{{width:100%;max-width:{settings.max_width_px}px;font-family:"Helvetica Neue",Helvetica,Arial,sans-serif;margin:auto;box-sizing:border-box;}}
{s} .tweets .tweet{{background:#fff;color:#14171a;border:1px solid #ddd;border-radius:4px;padding:12px;margin:0 0 12px 0;position:relative;overflow:hidden;}}
{s} .tweet img.avatar{{width:48px;height:48px;border-radius:24px;float:left;margin:0 12px 0 0;object-fit:cover;}}
{s} .tweet .head{{display:flex;flex-wrap:wrap;align-items:center;gap:6px;font-size:15px;font-weight:700;line-height:1.2;}}
{s} .tweet .name{{font-weight:700;}}
{s} .tweet .verified{{position:relative;bottom:1px;display:inline-block;font-weight:normal;text-align:center;font-size:10px;line-height:15px;width:15px;height:15px;background-color:{accent};color:#fff;border-radius:50%;}}
{s} .tweet .handle{{color:#697882;font-weight:400;}}
{s} .tweet .bird{{margin-left:auto;color:{accent};}}
{s} .tweet .body{{clear:both;margin-top:8px;font-size:15px;line-height:1.35;word-wrap:break-word;overflow-wrap:anywhere;}}
{s} .tweet .hashtag{{color:{accent};}}
{s} .tweet .tweet-image{{display:block;width:100%;height:auto;border-radius:12px;margin-top:8px;}}
{s} .tweet .time-line{{margin-top:8px;font-size:13px;color:#697882;border-top:1px solid #eee;padding-top:8px;}}
{s} .tweet .metrics{{display:flex;flex-wrap:wrap;gap:16px;margin-top:8px;font-size:13px;color:#697882;border-top:1px solid #eee;padding-top:8px;}}
{s} .tweet .metric{{display:inline-flex;align-items:center;gap:4px;}}
{s} .tweet .metric.likes{{color:#cc2431;}}
{s} .tweet .context{{margin-top:8px;font-size:13px;color:{accent};}}
{s} .tweet .quote{{border:1px solid #ddd;border-radius:.3em;padding:8px;margin-top:8px;}}
{s} .tweet .quote-head{{display:flex;flex-wrap:wrap;align-items:center;gap:6px;font-size:13px;font-weight:600;}}
{s} .tweet .quote-avatar{{width:24px;height:24px;border-radius:12px;object-fit:cover;}}
{s} .tweet .quote-verified{{display:inline-block;font-weight:normal;text-align:center;font-size:9px;line-height:12px;width:12px;height:12px;background-color:{accent};color:#fff;border-radius:50%;}}
{s} .tweet .quote-handle{{color:#697882;font-weight:400;font-size:12px;}}
{s} .tweet .quote-body{{margin-top:6px;font-size:13px;line-height:1.3;}}
{s} .tweet .quote-image{{width:100%;height:auto;border-radius:.3em;margin-top:6px;}}
{_shared_rules(s)}"""


# ---------------------------------------------------------------------------
# google
# ---------------------------------------------------------------------------


def build_google_css(settings: Settings, options: GoogleOptions) -> str:
    s = ROOT_SCOPE
    return f"""{s} .chat{{width:100%;max-width:{settings.max_width_px}px;margin:auto;font-family:Arial,Helvetica,sans-serif;box-sizing:border-box;}}
{s} .logo{{text-align:center;margin:0;font-weight:bold;font-size:32px;font-family:"Lato","Verdana",sans-serif;}}
{s} .logo.old{{font-family:"Cardo","Garamond",serif;font-weight:normal;}}
{s} .logo.naver{{font-family:"Maven Pro",Verdana,sans-serif;}}
{s} .naver-green{{color:#2DB400;}}
{s} .blue{{color:#4285F4;}}
{s} .red{{color:#DB4437;}}
{s} .yellow{{color:#F4B400;}}
{s} .green{{color:#0F9D58;}}
{s} .search-wrap{{margin-top:12px;}}
{s} .search-bar{{margin:0;}}
{s} .search-bar span{{display:block;padding:10px 14px;border:1px solid #aaa;border-radius:24px;font-size:16px;word-wrap:break-word;overflow-wrap:anywhere;}}
{s} .suggest-box{{border:1px solid #aaa;border-top:none;border-radius:0 0 24px 24px;overflow:hidden;margin-top:-8px;padding-top:8px;}}
{s} .suggest-item{{padding:6px 16px;font-size:15px;line-height:1.2;}}
{s} .suggest-item:nth-child(odd){{background:#fafafa;}}
{s} .suggest-item b{{font-weight:600;}}
{s} .search-stats{{margin:4px 0 0 0;color:#999;font-size:12px;padding-top:5px;}}
{s} .search-dym{{margin:4px 0 0 0;font-size:12px;padding-top:5px;}}
{s} .search-dym1{{color:#de5246;}}
{s} .search-dym2{{color:#0645AD;font-weight:600;font-style:italic;}}
{s} .wm{{margin-top:24px;font-size:10px;opacity:0.5;text-align:center;}}"""


# ---------------------------------------------------------------------------
# instagram
# ---------------------------------------------------------------------------


def build_instagram_css(settings: Settings, options: InstagramOptions) -> str:
    s = ROOT_SCOPE
    return f"""{s} .chat{{width:100%;max-width:{settings.max_width_px}px;margin:auto;font-family:"Helvetica Neue",Helvetica,Arial,sans-serif;box-sizing:border-box;}}
{s} .inst{{width:100%;max-width:480px;margin:auto;}}
{s} .instBody{{overflow:hidden;background:#fff;color:#262626;border:1px solid #ddd;border-radius:.3em;position:relative;box-sizing:border-box;}}
{s} .instHead{{display:flex;align-items:center;gap:8px;padding:.6em .7em;}}
{s} .instAvatar{{width:30px;height:30px;object-fit:cover;border:1px solid #ddd;border-radius:50%;}}
{s} .instUser{{color:#343436;font-size:15px;font-weight:bold;}}
{s} .instLocation{{display:block;width:100%;font-size:11px;color:#737373;}}
{s} .instHead .instLocation{{width:auto;margin-left:auto;}}
{s} .instImage{{display:block;width:100%;height:auto;}}
{s} .instText{{font-size:14px;border-top:1px solid #efefef;margin:0 .7em;padding:.4em 0 .2em 0;}}
{s} .instCaption{{margin:.3em 0 0 0;word-wrap:break-word;overflow-wrap:anywhere;}}
{s} .likes{{font-size:14px;}}
{s} .comments-link{{display:block;color:#8e8e8e;font-size:14px;margin:.2em .7em 0 .7em;}}
{s} .instTimestamp{{display:block;color:#8e8e8e;text-transform:uppercase;font-size:11px;margin:.4em .7em .7em .7em;}}
{_shared_rules(s)}"""


# ---------------------------------------------------------------------------
# discord
# ---------------------------------------------------------------------------


def build_discord_css(settings: Settings, options: DiscordOptions) -> str:
    s = ROOT_SCOPE
    dark = options.dark_mode is not False
    bg = "#2B2D31" if dark else "#FFFFFF"
    text = "#DBDEE1" if dark else "#2E3338"
    meta = "#949BA4" if dark else "#5865F2"
    rule = "#1f2124" if dark else "#e3e5e8"
    return f"""{s} .chat.dc-wrap{{width:100%;max-width:{settings.max_width_px}px;margin:auto;font-family:"gg sans","Noto Sans",Arial,Helvetica,sans-serif;background:{bg};padding:12px 0;border-radius:6px;box-sizing:border-box;}}
{s} .dc-header{{font-size:14px;font-weight:600;padding:0 16px 8px 16px;color:{text};border-bottom:1px solid {rule};margin-bottom:8px;}}
{s} .dc-header .dc-server{{margin-right:8px;opacity:0.8;}}
{s} .dc-header .dc-hash{{color:{meta};margin-right:4px;}}
{s} .dc-line{{display:flex;padding:4px 16px;align-items:flex-start;gap:12px;}}
{s} .dc-avatar{{width:40px;height:40px;border-radius:50%;object-fit:cover;flex-shrink:0;}}
{s} .dc-avatar.placeholder{{background:#5865F2;display:inline-block;}}
{s} .dc-msg{{flex:1;min-width:0;}}
{s} .dc-meta{{display:flex;flex-wrap:wrap;align-items:center;gap:8px;line-height:1.2;}}
{s} .dc-name{{font-weight:600;font-size:14px;}}
{s} .dc-time{{font-size:12px;color:{meta};}}
{s} .dc-text{{font-size:14px;color:{text};line-height:1.25;word-wrap:break-word;overflow-wrap:anywhere;margin-top:2px;}}
{s} .dc-msg .attach{{margin-top:4px;}}
{s} img.attach-img{{max-width:100%;width:240px;height:auto;border-radius:8px;display:block;}}
{s} .visually-hidden{{position:absolute;left:-9999px;top:auto;width:1px;height:1px;overflow:hidden;}}
{s} .wm{{margin:8px 16px 0 16px;font-size:10px;opacity:0.5;color:{meta};text-align:right;}}"""
