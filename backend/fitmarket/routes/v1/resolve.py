# backend/fitmarket/routes/v1/resolve.py
"""
Identifier resolution routes under /api/v1.

    GET /resolve/{identifier}   → entity + canonical URL + redirect decision
    GET /slugs/preview?text=... → slug that create_slug would produce
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response

from ...api.dependencies.services import get_slug_resolution_service
from ...core.enums import EntityType
from ...core.exceptions import DomainException, IdentifierNotFoundException
from ...schemas.slug import CanonicalResolveResponse, SlugPreviewResponse
from ...services.slug_resolution_service import SlugResolutionService
from ...utils.slug import create_slug, is_valid_slug

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resolve-v1"])


@router.get("/resolve/{identifier}", response_model=CanonicalResolveResponse)
async def resolve_identifier(
    response: Response,
    identifier: str = Path(..., min_length=1, max_length=200),
    expected_type: Optional[EntityType] = Query(
        None, description="Section the page was requested under (trainer, sport, program)"
    ),
    service: SlugResolutionService = Depends(get_slug_resolution_service),
) -> CanonicalResolveResponse:
    """Resolve a path segment to a trainer, sport or program. Cached 5min."""
    try:
        resolution = await asyncio.to_thread(
            service.resolve_canonical, identifier, expected_type
        )
        if resolution is None:
            raise IdentifierNotFoundException(
                identifier, expected_type.value if expected_type else None
            )
    except DomainException as exc:
        raise exc.to_http_exception() from exc

    response.headers["Cache-Control"] = "public, max-age=300"
    redirect = resolution.redirect
    return CanonicalResolveResponse(
        result=resolution.result,
        canonical_url=redirect.canonical_url,
        needs_redirect=redirect.needs_redirect,
        redirect_url=redirect.redirect_url,
        redirect_reason=redirect.reason,
    )


@router.get("/slugs/preview", response_model=SlugPreviewResponse)
async def preview_slug(
    text: str = Query(..., max_length=500),
) -> SlugPreviewResponse:
    """Slug a profile or program title would get."""
    slug = create_slug(text)
    return SlugPreviewResponse(text=text, slug=slug, is_valid=is_valid_slug(slug))
