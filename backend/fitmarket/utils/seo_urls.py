# backend/fitmarket/utils/seo_urls.py
"""
Canonical URL helpers for resolved entities.

A resolved trainer, sport or program has exactly one preferred public URL,
built from its slug. Pages reached any other way (raw UUID, wrong section)
should redirect there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import SEO_FALLBACK_PATH, SEO_PATH_PREFIXES
from ..core.enums import EntityType, RedirectReason
from .slug import is_valid_uuid


@dataclass(frozen=True)
class CanonicalRedirect:
    """Redirect decision for a resolved identifier."""

    canonical_url: str
    needs_redirect: bool
    reason: Optional[RedirectReason] = None

    @property
    def redirect_url(self) -> Optional[str]:
        return self.canonical_url if self.needs_redirect else None


def _entity_type(value: Any) -> Optional[EntityType]:
    try:
        return EntityType(value)
    except ValueError:
        return None


def generate_seo_url(result: Any) -> str:
    """
    Canonical path for a resolved entity.

    ``result`` is anything with ``type`` and ``slug`` attributes (normally a
    SlugResult). A trainer with slug ``ana-costa`` maps to
    ``/trainers/ana-costa``; unknown types map to the site root.
    """
    entity_type = _entity_type(getattr(result, "type", None))
    if entity_type is None:
        return SEO_FALLBACK_PATH
    return f"{SEO_PATH_PREFIXES[entity_type]}/{result.slug}"


def plan_canonical_redirect(
    token: str,
    result: Any,
    requested_type: Optional[EntityType] = None,
) -> CanonicalRedirect:
    """
    Decide whether a page reached via ``token`` should redirect.

    Rules, first match wins:
      1. ``token`` is a UUID and the entity has a different slug.
      2. The page section (``requested_type``) differs from the entity type.
    """
    canonical_url = generate_seo_url(result)
    slug = getattr(result, "slug", None)

    if is_valid_uuid(token) and slug and slug != token:
        return CanonicalRedirect(canonical_url, True, RedirectReason.UUID_TO_SLUG)

    if requested_type is not None and _entity_type(getattr(result, "type", None)) != requested_type:
        return CanonicalRedirect(canonical_url, True, RedirectReason.TYPE_MISMATCH)

    return CanonicalRedirect(canonical_url, False)
