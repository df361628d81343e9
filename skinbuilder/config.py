"""Application constants and small configuration helpers."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

APP_TITLE = "Work Skin Builder"

# Every emitted rule is nested under this selector; the paste target (and the
# preview shell) mounts the fragment inside an element with this id.
ROOT_ID = "workskin"
ROOT_SCOPE = f"#{ROOT_ID}"

WATERMARK_TEXT = "(Created with AO3SkinGen)"
PROJECT_SUFFIX = ".skinproj"
DEFAULT_FONT_FAMILY = "Arial, Helvetica, sans-serif"


def app_data_dir() -> Path:
    override = os.getenv("SKINBUILDER_DATA_DIR")
    if override:
        base = Path(override)
    elif sys.platform == "win32":
        base = Path(os.getenv("APPDATA", Path.home())) / "SkinBuilder"
    else:
        base = Path.home() / ".skinbuilder"
    base.mkdir(parents=True, exist_ok=True)
    return base


@dataclass
class UploadConfig:
    """Image hosting settings. Environment variables override defaults."""

    CLOUDINARY_CLOUD_NAME: str = "demo"
    CLOUDINARY_UPLOAD_PRESET: str = "docs_upload_example_us_preset"
    CLOUDINARY_TIMEOUT: int = 30

    def __post_init__(self) -> None:
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is None:
                continue
            if self.__dataclass_fields__[key].type in (int, "int"):
                try:
                    setattr(self, key, int(env_value))
                except ValueError:
                    logger.warning("Ignoring non-integer %s=%r", key, env_value)
            else:
                setattr(self, key, env_value)

    @property
    def upload_url(self) -> str:
        return f"https://api.cloudinary.com/v1_1/{self.CLOUDINARY_CLOUD_NAME}/image/upload"


class SettingsManager:
    """Very small settings helper storing JSON data for the editor shell."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or app_data_dir() / "settings.json"
        self._settings: Dict[str, str] = {}
        self.load()

    def load(self) -> None:
        if self.path.exists():
            try:
                self._settings = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError):
                logger.warning("Unreadable settings file %s, starting fresh", self.path)
                self._settings = {}
        else:
            self._settings = {}

        changed = False
        if self._settings.get("preview_dark", "") == "":
            self._settings["preview_dark"] = "0"
            changed = True
        if self._settings.get("preview_mobile", "") == "":
            self._settings["preview_mobile"] = "1"
            changed = True

        if changed:
            try:
                self.save()
            except OSError:
                logger.warning("Could not write settings file %s", self.path)

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._settings, indent=2), encoding="utf-8")

    def get(self, key: str, default: str = "") -> str:
        return self._settings.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._settings.get(key)
        if value is None:
            return default
        return value == "1"

    def set(self, key: str, value: str) -> None:
        self._settings[key] = value
        self.save()

    def set_bool(self, key: str, value: bool) -> None:
        self.set(key, "1" if value else "0")
