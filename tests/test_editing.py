from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.core import editing
from skinbuilder.core.errors import UnknownVariantError
from skinbuilder.core.models import Message, default_project


def test_switch_variant_applies_defaults_and_keeps_choices() -> None:
    project = default_project()
    tweeted = editing.switch_variant(project, "twitter")
    assert tweeted.variant == "twitter"
    assert tweeted.settings.twitter.handle == "you"
    assert project.variant == "ios"

    back = editing.switch_variant(tweeted, "ios")
    assert back.settings.twitter.handle == "you"
    assert back.messages == project.messages


def test_switch_to_same_variant_is_a_no_op() -> None:
    project = default_project()
    assert editing.switch_variant(project, "ios") is project


def test_switch_to_unknown_variant_raises() -> None:
    with pytest.raises(UnknownVariantError):
        editing.switch_variant(default_project(), "myspace")


def test_update_settings_and_options_return_new_projects() -> None:
    project = default_project()
    updated = editing.update_settings(project, watermark=False, max_width_px=320)
    assert updated.settings.watermark is False
    assert updated.settings.max_width_px == 320
    assert project.settings.watermark is True

    liked = editing.update_options(project, "twitter", likes=5)
    assert liked.settings.twitter.likes == 5
    assert project.settings.twitter.likes == 0


def test_update_options_rejects_unknown_block() -> None:
    with pytest.raises(KeyError):
        editing.update_options(default_project(), "myspace", likes=1)


def test_new_message_alternates_sides() -> None:
    project = default_project()
    message = editing.new_message(project, "next")
    assert message.outgoing is True
    assert message.sender == "You"
    assert message.content == "next"

    reply = editing.new_message(editing.add_message(project, message))
    assert reply.outgoing is False
    assert reply.sender == "Alice"


def test_add_message_appends_or_inserts() -> None:
    project = default_project()
    appended = editing.add_message(project)
    assert len(appended.messages) == 3
    first = Message(id="first", sender="Z", content="top")
    inserted = editing.add_message(project, first, index=0)
    assert inserted.messages[0] is first


def test_update_and_remove_message() -> None:
    project = default_project()
    target = project.messages[1]
    edited = editing.update_message(project, target.id, content="Almost there")
    assert edited.messages[1].content == "Almost there"
    assert edited.messages[1].id == target.id

    removed = editing.remove_message(edited, target.id)
    assert [m.id for m in removed.messages] == [project.messages[0].id]


def test_move_message_clamps() -> None:
    project = default_project()
    first, second = project.messages
    moved = editing.move_message(project, first.id, 1)
    assert moved.messages == (second, first)
    assert editing.move_message(moved, first.id, 5) is moved
    assert editing.move_message(moved, first.id, -10).messages == (first, second)


def test_unknown_message_ids_leave_project_unchanged() -> None:
    project = default_project()
    assert editing.update_message(project, "nope", content="x") is project
    assert editing.remove_message(project, "nope") is project
    assert editing.move_message(project, "nope", 1) is project
