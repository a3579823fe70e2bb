"""Schemas for image URL selection."""

from typing import List, Optional

from pydantic import Field

from ..core.enums import ImageKind
from ._strict_base import StrictModel, StrictRequestModel


class ImageSelectRequest(StrictRequestModel):
    """Candidate image URLs in order of preference."""

    urls: List[Optional[str]] = Field(default_factory=list, max_length=20)
    kind: ImageKind = ImageKind.GENERAL


class ImageSelectResponse(StrictModel):
    url: str
    used_fallback: bool
