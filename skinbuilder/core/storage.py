import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable

from .colors import is_hex_color
from .errors import ProjectFormatError
from .models import Project, Settings, default_project

logger = logging.getLogger(__name__)

BUBBLE_COLOR_FIELDS = ("sender_color", "receiver_color")


def project_to_json(project: Project) -> str:
    return json.dumps(project.to_dict(), indent=2, ensure_ascii=False)


def project_from_json(text: str) -> Project:
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ProjectFormatError(f"Not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ProjectFormatError("Project must be a JSON object")
    if not isinstance(data.get("settings"), dict):
        raise ProjectFormatError("Project settings must be an object")
    if not isinstance(data.get("messages"), list):
        raise ProjectFormatError("Project messages must be a list")
    return Project.from_dict(data)


def save_project(path: str | Path, project: Project) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(project_to_json(project), encoding="utf-8")


def load_project(path: str | Path) -> Project:
    path = Path(path)
    return project_from_json(path.read_text(encoding="utf-8"))


def repair_colors(project: Project) -> Project:
    """Reset bubble colors that are not ``#rrggbb`` to their defaults."""
    defaults = Settings()
    changes = {}
    for name in BUBBLE_COLOR_FIELDS:
        value = getattr(project.settings, name)
        if not is_hex_color(value):
            logger.warning("Resetting invalid %s %r", name, value)
            changes[name] = getattr(defaults, name)
    if not changes:
        return project
    return replace(project, settings=replace(project.settings, **changes))


def load_stored_project(path: str | Path, fallback: Callable[[], Project] = default_project) -> Project:
    """Load ``path``; a missing, unreadable or malformed file yields ``fallback()``.

    Bubble colors the renderer cannot parse are reset so a bad autosave
    cannot keep the editor from starting.
    """
    path = Path(path)
    if not path.exists():
        return fallback()
    try:
        return repair_colors(load_project(path))
    except (OSError, UnicodeDecodeError, ProjectFormatError) as exc:
        logger.warning("Ignoring stored project %s: %s", path, exc)
        return fallback()


def persist_project(path: str | Path, project: Project) -> bool:
    try:
        save_project(path, project)
    except OSError as exc:
        logger.warning("Could not persist project to %s: %s", path, exc)
        return False
    return True
