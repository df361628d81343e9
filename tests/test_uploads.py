from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest
import requests

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.config import UploadConfig
from skinbuilder.core.errors import UploadError
from skinbuilder.uploads import upload_image, upload_image_file


class _FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200, text: str = "", reason: str = "OK") -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text
        self.reason = reason

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def _fake_post(response: _FakeResponse, seen: List[Dict[str, Any]]):
    def fake(url: str, **kwargs: Any) -> _FakeResponse:
        seen.append({"url": url, **kwargs})
        return response

    return fake


def test_upload_posts_form_and_returns_secure_url(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: List[Dict[str, Any]] = []
    response = _FakeResponse({"secure_url": "https://res.cloudinary.com/demo/a.png"})
    monkeypatch.setattr(requests, "post", _fake_post(response, seen))

    config = UploadConfig(CLOUDINARY_CLOUD_NAME="mycloud", CLOUDINARY_UPLOAD_PRESET="unsigned")
    url = upload_image(b"PNGDATA", "avatar.png", config)

    assert url == "https://res.cloudinary.com/demo/a.png"
    call = seen[0]
    assert call["url"] == "https://api.cloudinary.com/v1_1/mycloud/image/upload"
    assert call["data"] == {"upload_preset": "unsigned"}
    assert call["files"] == {"file": ("avatar.png", b"PNGDATA", "image/png")}
    assert call["timeout"] == config.CLOUDINARY_TIMEOUT


def test_upload_without_secure_url_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(requests, "post", _fake_post(_FakeResponse({"error": "nope"}), []))
    with pytest.raises(UploadError, match="secure_url"):
        upload_image(b"x", "a.png", UploadConfig())


def test_unreadable_response_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(requests, "post", _fake_post(_FakeResponse(ValueError("not json")), []))
    with pytest.raises(UploadError, match="unreadable"):
        upload_image(b"x", "a.png", UploadConfig())


def test_network_errors_become_upload_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def offline(url: str, **kwargs: Any) -> None:
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(requests, "post", offline)
    with pytest.raises(UploadError, match="offline"):
        upload_image(b"x", "a.png", UploadConfig())


def test_http_errors_include_the_response(monkeypatch: pytest.MonkeyPatch) -> None:
    rejected = _FakeResponse(None, status_code=400, text="Upload preset not found", reason="Bad Request")
    monkeypatch.setattr(requests, "post", _fake_post(rejected, []))
    with pytest.raises(UploadError, match="Upload preset not found"):
        upload_image(b"x", "a.png", UploadConfig())


def test_empty_upload_is_rejected() -> None:
    with pytest.raises(UploadError):
        upload_image(b"", "a.png", UploadConfig())


def test_upload_image_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: List[Dict[str, Any]] = []
    monkeypatch.setattr(requests, "post", _fake_post(_FakeResponse({"secure_url": "https://x/y.jpg"}), seen))
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"JPEG")
    assert upload_image_file(path, UploadConfig()) == "https://x/y.jpg"
    assert seen[0]["files"]["file"][:2] == ("photo.jpg", b"JPEG")

    with pytest.raises(UploadError):
        upload_image_file(tmp_path / "missing.jpg", UploadConfig())
