"""Unsigned image uploads to Cloudinary.

The returned URL is meant for ``avatar_url`` and image fields; the renderer
trusts whatever string ends up there.
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Optional

import requests

from .config import UploadConfig
from .core.errors import UploadError

logger = logging.getLogger(__name__)


def upload_image(data: bytes, filename: str, config: Optional[UploadConfig] = None) -> str:
    """Upload ``data`` and return the hosted ``secure_url``."""
    config = config or UploadConfig()
    if not data:
        raise UploadError(f"{filename}: nothing to upload")
    content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    try:
        response = requests.post(
            config.upload_url,
            data={"upload_preset": config.CLOUDINARY_UPLOAD_PRESET},
            files={"file": (filename, data, content_type)},
            timeout=config.CLOUDINARY_TIMEOUT,
        )
    except requests.RequestException as exc:
        logger.warning("Upload of %s failed: %s", filename, exc)
        raise UploadError(f"Image upload failed: {exc}") from exc

    if response.status_code >= 400:
        detail = response.text
        logger.warning("Upload of %s rejected (%s): %s", filename, response.status_code, detail)
        raise UploadError(f"Image upload failed: {detail or response.reason}")

    try:
        url = response.json().get("secure_url")
    except (ValueError, AttributeError) as exc:
        raise UploadError("Image host returned an unreadable response") from exc
    if not url:
        raise UploadError("Image host response has no secure_url")
    logger.info("Uploaded %s to %s", filename, url)
    return str(url)


def upload_image_file(path: str | Path, config: Optional[UploadConfig] = None) -> str:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise UploadError(f"{path}: {exc}") from exc
    return upload_image(data, path.name, config)
