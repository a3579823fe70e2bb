"""Pydantic schemas for fitmarket API requests and responses."""

from .image import ImageSelectRequest, ImageSelectResponse
from .slug import CanonicalResolveResponse, SlugPreviewResponse, SlugResult

__all__ = [
    "CanonicalResolveResponse",
    "ImageSelectRequest",
    "ImageSelectResponse",
    "SlugPreviewResponse",
    "SlugResult",
]
