"""Exceptions raised by the skin builder."""

from __future__ import annotations


class SkinBuilderError(Exception):
    """Base class for skin builder errors."""


class UnknownVariantError(SkinBuilderError, ValueError):
    def __init__(self, variant: object) -> None:
        super().__init__(f"Unknown variant: {variant!r}")
        self.variant = variant


class ProjectFormatError(SkinBuilderError, ValueError):
    """A stored project does not have the expected shape."""


class UploadError(SkinBuilderError):
    """The image host rejected an upload or could not be reached."""
