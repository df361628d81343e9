"""Jinja templates for every variant.

Templates are written one element per line for readability; the builders join
the rendered lines back together, because the paste target turns stray line
breaks into paragraphs. Free text goes through the ``sanitize`` filter; other
values rely on autoescaping.
"""

from __future__ import annotations

MACROS_TEMPLATE = """\
{% macro watermark(enabled, text) -%}
{% if enabled %}
<div class="wm">{{ text }}</div>
{% endif %}
{%- endmacro %}

{% macro attachments(items, wrapper="dd") -%}
{% for att in items %}
<{{ wrapper }} class="attach"><span class="visually-hidden">Image:</span><img src="{{ att.url }}" alt="{{ att.alt or '' }}" class="attach-img" /></{{ wrapper }}>
{% endfor %}
{%- endmacro %}
"""

CHAT_TEMPLATE = """\
{% import "macros.html" as ui %}
<div class="chat chat-{{ variant }}">
{% if header %}
<div class="chat-header">
{% if header.prefix %}<span class="chat-to">{{ header.prefix }}</span>{% endif %}
<span class="chat-contact">{{ header.name | sanitize }}</span>
{% if header.status %}<span class="chat-status">{{ header.status | sanitize }}</span>{% endif %}
</div>
{% endif %}
{% for row in rows %}
{% set m = row.message %}
<div class="row {{ 'out' if m.outgoing else 'in' }}">
{% if m.avatar_url %}<img src="{{ m.avatar_url }}" alt="{{ m.sender }} avatar" class="avatar" />{% endif %}
<dl class="msg">
<dt class="sender">{{ m.sender | sanitize }}</dt>
<dd class="bubble {{ 'out' if m.outgoing else 'in' }}">
{{- m.content | sanitize -}}
{% if m.timestamp %}<span class="time">{{ m.timestamp | sanitize }}</span>{% endif %}
{% if row.ticks %}<span class="ticks ticks-{{ row.tick_state }}">{{ row.ticks }}</span>{% endif %}
{% if m.reaction %}<span class="reaction">{{ m.reaction | sanitize }}</span>{% endif %}
</dd>
{% if row.receipt %}<dd class="receipt">{{ row.receipt }}</dd>{% endif %}
{{ ui.attachments(m.attachments) }}
</dl>
</div>
{% endfor %}
{% if typing %}
<div class="row in typing-row">
<div class="typing">
{% if typing.name %}<span class="typing-name">{{ typing.name | sanitize }}</span>{% endif %}
<span class="typing-dots"><span class="dot"></span><span class="dot"></span><span class="dot"></span></span>
</div>
</div>
{% endif %}
{{ ui.watermark(watermark, watermark_text) }}
</div>
"""

NOTE_TEMPLATE = """\
{% import "macros.html" as ui %}
<div class="chat note note-{{ style }}">
{% for m in messages %}
<div class="row">
<dl class="msg">
<dt class="sender">{{ m.sender | sanitize }}</dt>
<dd class="bubble {{ 'out' if m.outgoing else 'in' }}">
{{- m.content | sanitize -}}
{% if m.timestamp %}<span class="time">{{ m.timestamp | sanitize }}</span>{% endif %}
</dd>
{{ ui.attachments(m.attachments) }}
</dl>
</div>
{% endfor %}
{{ ui.watermark(watermark, watermark_text) }}
</div>
"""

TWITTER_TEMPLATE = """\
{% import "macros.html" as ui %}
<div class="chat tweets">
{% for tweet in tweets %}
{% set m = tweet.message %}
<div class="tweet">
{% if m.avatar_url %}<img src="{{ m.avatar_url }}" alt="{{ m.sender }} avatar" class="avatar" />{% endif %}
<div class="head">
<span class="name">{{ m.sender | sanitize }}</span>
{% if verified %}<span class="verified" aria-label="Verified">&#10004;</span>{% endif %}
<span class="handle">{{ tweet.handle }}</span>
<span class="bird" aria-hidden="true">&#128038;</span>
</div>
<div class="body">
{{- m.content | sanitize | hashtags -}}
{% for att in m.attachments %}<img src="{{ att.url }}" alt="{{ att.alt or '' }}" class="tweet-image" />{% endfor %}
{% if quote %}
<div class="quote">
<div class="quote-head">
{% if quote.avatar %}<img src="{{ quote.avatar }}" alt="Quote avatar" class="quote-avatar" />{% endif %}
<span class="quote-name">{{ quote.name | sanitize }}</span>
{% if quote.verified %}<span class="quote-verified" aria-label="Verified">&#10004;</span>{% endif %}
{% if quote.handle %}<span class="quote-handle">{{ quote.handle }}</span>{% endif %}
</div>
<div class="quote-body">
{{- quote.text | sanitize | hashtags -}}
{% if quote.image %}<img src="{{ quote.image }}" alt="Quote image" class="quote-image" />{% endif %}
</div>
</div>
{% endif %}
</div>
{% if tweet.time_line %}<div class="time-line">{{ tweet.time_line | sanitize }}</div>{% endif %}
{% if metrics %}
<div class="metrics">
{% for metric in metrics %}<span class="metric {{ metric.key }}" title="{{ metric.title }}">{{ metric.icon }} {{ metric.value }}</span>{% endfor %}
</div>
{% endif %}
{% if context_link %}<div class="context">{{ context_link | sanitize }}</div>{% endif %}
</div>
{% endfor %}
{{ ui.watermark(watermark, watermark_text) }}
</div>
"""

GOOGLE_TEMPLATE = """\
{% import "macros.html" as ui %}
<div class="chat search">
<p class="logo {{ logo_class }}">
{% if engine == "naver" %}
<span class="naver-green">NAVER</span>
{% else %}
{% for letter, color in logo_letters %}<span class="{{ color }}">{{ letter }}</span>{% endfor %}
{% endif %}
</p>
<div class="search-wrap">
<p class="search-bar"><span>{{ query | sanitize }}</span></p>
{% if suggestions %}
<div class="suggest-box">
{% for line in suggestions %}<div class="suggest-item">{{ line | sanitize | emphasis }}</div>{% endfor %}
</div>
{% endif %}
{% if stats %}<p class="search-stats">{{ stats | sanitize }}</p>{% endif %}
{% if did_you_mean %}<p class="search-dym"><span class="search-dym1">Did you mean: </span><span class="search-dym2">{{ did_you_mean | sanitize }}</span></p>{% endif %}
</div>
{{ ui.watermark(watermark, watermark_text) }}
</div>
"""

INSTAGRAM_TEMPLATE = """\
{% import "macros.html" as ui %}
<div class="chat">
<div class="inst">
<div class="instBody">
<div class="instHead">
{% if avatar %}<img class="instAvatar" src="{{ avatar }}" alt="{{ username }} avatar" />{% endif %}
<span class="instUser">{{ username | sanitize }}</span>
{% if location %}<span class="instLocation">{{ location | sanitize }}</span>{% endif %}
</div>
{% if image %}<img class="instImage" src="{{ image }}" alt="Post image" />{% endif %}
<div class="instText">
{% if likes is not none %}<span class="likes"><b>{{ likes }}</b> likes</span>{% endif %}
<p class="instCaption"><b>{{ username | sanitize }}</b> {{ caption | sanitize }}</p>
</div>
{% if comments is not none %}<span class="comments-link">View all {{ comments }} comments</span>{% endif %}
{% if timestamp %}<span class="instTimestamp">{{ timestamp | sanitize }}</span>{% endif %}
</div>
</div>
{{ ui.watermark(watermark, watermark_text) }}
</div>
"""

DISCORD_TEMPLATE = """\
{% import "macros.html" as ui %}
<div class="chat dc-wrap {{ 'dc-dark' if dark else 'dc-light' }}">
{% if header %}
<div class="dc-header">
{% if header.server %}<span class="dc-server">{{ header.server | sanitize }}</span>{% endif %}
<span class="dc-hash">#</span><span class="dc-channel">{{ header.channel | sanitize }}</span>
</div>
{% endif %}
{% for line in lines %}
{% set m = line.message %}
<div class="dc-line">
{% if m.avatar_url %}<img class="dc-avatar" src="{{ m.avatar_url }}" alt="{{ m.sender }} avatar" />{% else %}<span class="dc-avatar placeholder"></span>{% endif %}
<div class="dc-msg">
<div class="dc-meta">
<span class="dc-name" style="color:{{ line.name_color }}">{{ m.sender | sanitize }}</span>
{% if m.timestamp %}<span class="dc-time">{{ m.timestamp | sanitize }}</span>{% endif %}
</div>
<div class="dc-text">{{ m.content | sanitize }}</div>
{{ ui.attachments(m.attachments, wrapper="div") }}
</div>
</div>
{% endfor %}
{{ ui.watermark(watermark, watermark_text) }}
</div>
"""

PREVIEW_TEMPLATE = """\
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ title }}</title>
<style>
body { margin: 0; padding: 16px; font-family: Arial, Helvetica, sans-serif; background: {{ '#1f2937' if dark else '#ffffff' }}; color: {{ '#f9fafb' if dark else '#111827' }}; }
#{{ root_id }} { margin: 0 auto; max-width: {{ '390px' if mobile else '100%' }}; }
</style>
<style>
{{ css | safe }}
</style>
</head>
<body>
<div id="{{ root_id }}">{{ content | safe }}</div>
</body>
</html>
"""

TEMPLATES = {
    "macros.html": MACROS_TEMPLATE,
    "chat.html": CHAT_TEMPLATE,
    "note.html": NOTE_TEMPLATE,
    "twitter.html": TWITTER_TEMPLATE,
    "google.html": GOOGLE_TEMPLATE,
    "instagram.html": INSTAGRAM_TEMPLATE,
    "discord.html": DISCORD_TEMPLATE,
    "preview.html": PREVIEW_TEMPLATE,
}
