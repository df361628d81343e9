"""Text sanitizer sitting between author text and emitted markup.

Line breaks become ``<br/>`` and nothing else survives as markup. With
BeautifulSoup available every other tag is unwrapped (its text kept) and
executable/embedding elements are dropped together with their content.
Without it the text is escaped instead, which is coarser (literal angle
brackets show as text) but equally unable to inject a tag.

Only text content is covered. Attribute values such as URLs and colors are
not checked here.
"""

from __future__ import annotations

import html
import logging
import re

from markupsafe import Markup

try:  # pragma: no cover - optional dependency
    from bs4 import BeautifulSoup  # type: ignore
    from bs4.element import PreformattedString  # type: ignore
except Exception:  # pragma: no cover - graceful fallback
    BeautifulSoup = None  # type: ignore
    PreformattedString = None  # type: ignore

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset({"br"})
DROPPED_TAGS = [
    "script",
    "style",
    "iframe",
    "canvas",
    "object",
    "embed",
    "noscript",
    "template",
    "textarea",
    "title",
    "svg",
    "math",
]

_LINE_BREAK_RE = re.compile(r"\r\n|\n")


def has_rich_cleaner() -> bool:
    return BeautifulSoup is not None


def sanitize(raw_text: str | None) -> Markup:
    """Return ``raw_text`` as a markup fragment whose only tag is ``<br/>``."""
    if not raw_text:
        return Markup("")
    if BeautifulSoup is None:
        return Markup(_escape_with_breaks(raw_text))
    return Markup(_clean_with_soup(_LINE_BREAK_RE.sub("<br/>", raw_text)))


def _escape_with_breaks(text: str) -> str:
    escaped = html.escape(text, quote=False)
    return _LINE_BREAK_RE.sub("<br/>", escaped)


def _clean_with_soup(markup: str) -> str:
    soup = BeautifulSoup(markup, "html.parser")

    # Comments, doctypes, CDATA and processing instructions.
    for node in soup.find_all(string=lambda s: isinstance(s, PreformattedString)):
        node.extract()

    for tag in soup.find_all(DROPPED_TAGS):
        logger.debug("Dropping <%s> from author text", tag.name)
        tag.extract()

    for tag in soup.find_all(True):
        if tag.name in ALLOWED_TAGS:
            tag.attrs = {}
        else:
            tag.unwrap()

    return str(soup)
