# backend/fitmarket/routes/v1/images.py
"""
Image URL selection route.

    POST /images/select → first usable candidate URL, or a placeholder
"""

import logging

from fastapi import APIRouter

from ...monitoring.prometheus_metrics import prometheus_metrics
from ...schemas.image import ImageSelectRequest, ImageSelectResponse
from ...utils.image_fallback import select_best_image_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["images-v1"])


@router.post("/images/select", response_model=ImageSelectResponse)
async def select_image(payload: ImageSelectRequest) -> ImageSelectResponse:
    """Skip missing and expired signed URLs; fall back to a static placeholder."""
    url = select_best_image_url(payload.urls, payload.kind)
    used_fallback = url not in payload.urls
    if used_fallback:
        logger.info(
            "No usable %s image among %d candidates; using placeholder",
            payload.kind.value,
            len(payload.urls),
        )
        prometheus_metrics.record_image_fallback(payload.kind.value)
    return ImageSelectResponse(url=url, used_fallback=used_fallback)
