from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, List

import pytest
import requests

pytest.importorskip("PyQt6.QtWebEngineWidgets")

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skinbuilder.ui.main_window import _UploadWorker


class _Response:
    status_code = 200
    text = ""
    reason = "OK"

    def json(self) -> Any:
        return {"secure_url": "https://res.cloudinary.com/demo/avatar.png"}


def _collect(worker: _UploadWorker) -> tuple[List[str], List[str]]:
    done: List[str] = []
    failed: List[str] = []
    worker.finished.connect(done.append)
    worker.errored.connect(failed.append)
    return done, failed


def test_worker_emits_uploaded_url(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(requests, "post", lambda url, **kwargs: _Response())
    path = tmp_path / "avatar.png"
    path.write_bytes(b"PNG")

    worker = _UploadWorker(str(path))
    done, failed = _collect(worker)
    worker.run()

    assert done == ["https://res.cloudinary.com/demo/avatar.png"]
    assert failed == []


def test_worker_reports_failures_instead_of_raising(tmp_path: Path) -> None:
    worker = _UploadWorker(str(tmp_path / "missing.png"))
    done, failed = _collect(worker)
    worker.run()

    assert done == []
    assert len(failed) == 1
    assert "missing.png" in failed[0]
