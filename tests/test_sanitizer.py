from __future__ import annotations

import sys
from pathlib import Path

import pytest
from markupsafe import Markup

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.core import sanitizer
from skinbuilder.core.sanitizer import sanitize


@pytest.fixture
def escape_only(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sanitizer, "BeautifulSoup", None)


def test_script_is_removed() -> None:
    assert sanitizer.has_rich_cleaner()
    result = sanitize("<script>alert(1)</script>")
    assert "<script" not in result.lower()
    assert "alert" not in result


def test_script_is_escaped_without_rich_cleaner(escape_only: None) -> None:
    assert not sanitizer.has_rich_cleaner()
    result = sanitize("<SCRIPT>alert(1)</SCRIPT>")
    assert "<script" not in result.lower()
    assert result == "&lt;SCRIPT&gt;alert(1)&lt;/SCRIPT&gt;"


def test_line_breaks_become_br() -> None:
    assert sanitize("one\ntwo\r\nthree") == "one<br/>two<br/>three"


def test_line_breaks_become_br_without_rich_cleaner(escape_only: None) -> None:
    assert sanitize("a < b\nc") == "a &lt; b<br/>c"


def test_other_tags_are_unwrapped_and_text_kept() -> None:
    result = sanitize('<b>bold</b> & <a href="javascript:x()">link</a>')
    assert result == "bold &amp; link"


def test_br_attributes_are_stripped() -> None:
    assert sanitize('hi<br onclick="steal()">there') == "hi<br/>there"


def test_event_handler_markup_cannot_survive() -> None:
    result = sanitize('<img src=x onerror="alert(1)">caption')
    assert "onerror" not in result
    assert "<img" not in result
    assert "caption" in result


def test_comments_are_dropped() -> None:
    assert sanitize("<!-- hidden -->shown") == "shown"


def test_result_is_markup() -> None:
    assert isinstance(sanitize("plain"), Markup)
    assert sanitize("") == ""
    assert sanitize(None) == ""
