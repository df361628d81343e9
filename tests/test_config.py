from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.config import SettingsManager, UploadConfig, app_data_dir
from skinbuilder.log import setup_logging


def test_upload_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "envcloud")
    monkeypatch.setenv("CLOUDINARY_TIMEOUT", "12")
    config = UploadConfig()
    assert config.CLOUDINARY_CLOUD_NAME == "envcloud"
    assert config.CLOUDINARY_TIMEOUT == 12
    assert config.upload_url == "https://api.cloudinary.com/v1_1/envcloud/image/upload"


def test_upload_config_ignores_bad_integers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLOUDINARY_CLOUD_NAME", raising=False)
    monkeypatch.setenv("CLOUDINARY_TIMEOUT", "soon")
    config = UploadConfig()
    assert config.CLOUDINARY_TIMEOUT == 30
    assert config.CLOUDINARY_CLOUD_NAME == "demo"


def test_app_data_dir_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SKINBUILDER_DATA_DIR", str(tmp_path / "data"))
    assert app_data_dir() == tmp_path / "data"
    assert (tmp_path / "data").is_dir()


def test_settings_manager_defaults_and_persistence(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    settings = SettingsManager(path)
    assert settings.get_bool("preview_mobile") is True
    assert settings.get_bool("preview_dark") is False
    assert path.exists()

    settings.set_bool("preview_dark", True)
    settings.set("last_project", "/tmp/a.skinproj")
    reloaded = SettingsManager(path)
    assert reloaded.get_bool("preview_dark") is True
    assert reloaded.get("last_project") == "/tmp/a.skinproj"


def test_settings_manager_recovers_from_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{oops", encoding="utf-8")
    settings = SettingsManager(path)
    assert settings.get("preview_mobile") == "1"


def test_setup_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = logging.getLogger("skinbuilder")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    monkeypatch.setenv("SKINBUILDER_LOG_LEVEL", "debug")
    try:
        setup_logging()
        setup_logging("ERROR")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)
