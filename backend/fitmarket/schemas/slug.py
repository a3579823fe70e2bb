"""Schemas for identifier resolution and canonical URL responses."""

from typing import Any, Dict, Optional

from pydantic import Field

from ..core.enums import EntityType, RedirectReason
from ._strict_base import StrictModel


class SlugResult(StrictModel):
    """A path identifier resolved to exactly one trainer, sport or program."""

    type: EntityType = Field(..., description="Entity namespace the identifier resolved in")
    id: str = Field(..., description="Opaque UUID of the entity")
    slug: str = Field(..., description="Canonical slug (program id when the program has none)")
    data: Dict[str, Any] = Field(default_factory=dict, description="Entity payload")


class CanonicalResolveResponse(StrictModel):
    """Resolution result plus the redirect decision for the requesting page."""

    result: SlugResult
    canonical_url: str = Field(..., description="Preferred public path, e.g. /trainers/ana-costa")
    needs_redirect: bool
    redirect_url: Optional[str] = None
    redirect_reason: Optional[RedirectReason] = None


class SlugPreviewResponse(StrictModel):
    """Slug that would be generated for a piece of text."""

    text: str
    slug: str
    is_valid: bool = Field(..., description="False when the text had no usable characters")
