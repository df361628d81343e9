from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.core import editing, storage
from skinbuilder.core.errors import ProjectFormatError
from skinbuilder.core.generator import render_style
from skinbuilder.core.models import Attachment, Project, Settings, default_project


def test_save_and_load_preserve_project(tmp_path: Path) -> None:
    project = editing.switch_variant(default_project(), "twitter")
    project = editing.update_message(
        project,
        project.messages[0].id,
        attachments=(Attachment(url="https://img.example/a.png", alt="a"),),
        status="read",
    )
    path = tmp_path / "nested" / "story.skinproj"
    storage.save_project(path, project)
    assert storage.load_project(path) == project


def test_json_uses_flat_camel_case_settings() -> None:
    project = editing.update_options(default_project(), "twitter", handle="brand")
    data = json.loads(storage.project_to_json(project))
    assert data["variant"] == "ios"
    assert data["settings"]["twitterHandle"] == "brand"
    assert data["settings"]["bubbleOpacity"] == 0.9
    assert data["settings"]["discordRolePresets"][0] == {"name": "Admin", "color": "#ED4245"}
    assert "twitter" not in data["settings"]


def test_legacy_template_key_and_unknown_variant() -> None:
    legacy = storage.project_from_json(json.dumps({"id": "a", "template": "discord", "settings": {}, "messages": []}))
    assert legacy.variant == "discord"
    unknown = storage.project_from_json(json.dumps({"id": "b", "variant": "myspace", "settings": {}, "messages": []}))
    assert unknown.variant == "ios"


def test_values_are_coerced_defensively() -> None:
    text = json.dumps(
        {
            "id": "c",
            "variant": "twitter",
            "settings": {"maxWidthPx": "wide", "bubbleOpacity": "0.5", "twitterLikes": "12", "noteStyle": "fancy"},
            "messages": [{"sender": "A", "content": "x", "status": "lost"}, "junk"],
        }
    )
    project = storage.project_from_json(text)
    assert project.settings.max_width_px == 400
    assert project.settings.bubble_opacity == 0.5
    assert project.settings.twitter.likes == 12
    assert project.settings.note.style is None
    assert len(project.messages) == 1
    assert project.messages[0].status is None
    assert project.messages[0].id


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        json.dumps({"id": "x", "messages": []}),
        json.dumps({"id": "x", "settings": [], "messages": []}),
        json.dumps({"id": "x", "settings": {}, "messages": {}}),
    ],
)
def test_gross_shape_is_validated(text: str) -> None:
    with pytest.raises(ProjectFormatError):
        storage.project_from_json(text)


def test_load_stored_project_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    marker = Project(id="fallback")
    assert storage.load_stored_project(tmp_path / "missing.skinproj", fallback=lambda: marker) is marker

    broken = tmp_path / "broken.skinproj"
    broken.write_text("{", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="skinbuilder"):
        assert storage.load_stored_project(broken, fallback=lambda: marker) is marker
    assert "broken.skinproj" in caplog.text


def test_load_stored_project_reads_valid_file(tmp_path: Path) -> None:
    project = replace(default_project(), variant="note")
    path = tmp_path / "ok.skinproj"
    storage.save_project(path, project)
    assert storage.load_stored_project(path) == project


def test_persist_project_swallows_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    assert storage.persist_project(blocker / "sub" / "p.skinproj", default_project()) is False
    assert storage.persist_project(tmp_path / "p.skinproj", default_project()) is True


def test_stored_project_with_invalid_color_still_renders(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "current.skinproj"
    broken = editing.update_settings(default_project(), sender_color="", receiver_color="#abcdef")
    assert storage.persist_project(path, broken) is True

    with caplog.at_level(logging.WARNING, logger="skinbuilder"):
        restored = storage.load_stored_project(path)
    assert restored.settings.sender_color == Settings().sender_color
    assert restored.settings.receiver_color == "#abcdef"
    assert "sender_color" in caplog.text
    assert "rgba(" in render_style(restored)


def test_repair_colors_keeps_valid_project() -> None:
    project = default_project()
    assert storage.repair_colors(project) is project


def test_save_project_raises_for_unwritable_target(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        storage.save_project(blocker / "p.skinproj", default_project())
