# backend/fitmarket/utils/image_fallback.py
"""
Image URL selection with expiry-aware fallback.

Profile and program images are often signed object-storage URLs whose
``token`` query parameter is a JWT with an ``exp`` claim. Once that claim
passes, the URL is dead, so callers pick the first candidate that is still
usable and fall back to a static placeholder otherwise.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, List, Optional
from urllib.parse import parse_qs, urlparse

import jwt

from ..core.config import settings
from ..core.constants import FALLBACK_IMAGE_URLS
from ..core.enums import ImageKind
from .token_utils import parse_epoch_claim

logger = logging.getLogger(__name__)


def is_storage_url(url: Optional[str], marker: Optional[str] = None) -> bool:
    """True if ``url`` points at signed object storage."""
    if not url:
        return False
    return (marker or settings.storage_url_marker) in url


def is_url_expired(url: Optional[str], now: Optional[float] = None) -> bool:
    """
    Check whether a signed storage URL has expired.

    Non-storage URLs and storage URLs without a ``token`` never expire.
    A token that cannot be decoded is treated as expired.

    Args:
        url: Candidate image URL.
        now: Current epoch seconds (defaults to ``time.time()``).
    """
    if not is_storage_url(url):
        return False

    token = parse_qs(urlparse(url).query).get("token", [None])[0]
    if not token:
        return False

    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as exc:
        logger.debug("Undecodable storage token treated as expired: %s", exc)
        return True

    exp = parse_epoch_claim(payload, "exp")
    if not exp:
        return False
    current = int(now if now is not None else time.time())
    return exp < current


def get_fallback_image_urls(kind: ImageKind | str = ImageKind.GENERAL) -> List[str]:
    """Placeholder images for ``kind``; unknown kinds get the general set."""
    try:
        image_kind = ImageKind(kind)
    except ValueError:
        image_kind = ImageKind.GENERAL
    return list(FALLBACK_IMAGE_URLS[image_kind])


def select_best_image_url(
    urls: Iterable[Optional[str]],
    kind: ImageKind | str = ImageKind.GENERAL,
    now: Optional[float] = None,
) -> str:
    """
    Pick the first present, non-expired URL from ``urls``.

    Falls back to the first placeholder for ``kind`` when every candidate
    is empty or expired.
    """
    for url in urls:
        if url and not is_url_expired(url, now=now):
            return url
    return get_fallback_image_urls(kind)[0]
