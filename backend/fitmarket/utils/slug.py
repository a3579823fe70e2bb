# backend/fitmarket/utils/slug.py
"""
Slug and identifier helpers.

Public URLs address trainers, sports and programs either by an opaque
UUID or by a short slug. Everything here is pure: no I/O, no exceptions
for bad input (a malformed token is simply "not a UUID" / "not a slug").
"""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import SLUG_MAX_LENGTH

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

# Older trainer slugs were suffixed with the first 8 hex digits of the id.
LEGACY_SUFFIX_PATTERN = re.compile(r"-[0-9a-f]{8}$")

# Letters outside a-z are dropped, not transliterated (é, ã, ç vanish).
_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s_-]")
_SEPARATOR_RUNS = re.compile(r"[\s_-]+")


def is_valid_uuid(token: object) -> bool:
    """Check if ``token`` is a canonical textual UUID (versions 1-5, RFC variant)."""
    if not isinstance(token, str):
        return False
    return UUID_PATTERN.fullmatch(token) is not None


def is_valid_slug(token: object) -> bool:
    """Check if ``token`` is a well-formed slug of at most SLUG_MAX_LENGTH characters."""
    if not isinstance(token, str) or len(token) > SLUG_MAX_LENGTH:
        return False
    return SLUG_PATTERN.fullmatch(token) is not None


def create_slug(text: str) -> str:
    """
    Normalize arbitrary text into a URL-safe slug.

    Steps: lower-case, trim, drop everything outside ``[a-z0-9\\s_-]``,
    collapse whitespace/underscore/hyphen runs into one hyphen, strip edge
    hyphens, cap at SLUG_MAX_LENGTH characters.

    Examples:
        >>> create_slug("Ana Costa - Personal Trainer")
        'ana-costa-personal-trainer'
        >>> create_slug("João Silva! #1")
        'joo-silva-1'

    Returns:
        A valid slug, or ``""`` when the text has no usable characters.
    """
    slug = _DISALLOWED_CHARS.sub("", text.lower().strip())
    slug = _SEPARATOR_RUNS.sub("-", slug).strip("-")
    # Truncation can expose a hyphen at the cut point.
    return slug[:SLUG_MAX_LENGTH].rstrip("-")


def strip_legacy_suffix(slug: str) -> Optional[str]:
    """
    Remove an old-style ``-xxxxxxxx`` hex suffix from a trainer slug.

    Returns:
        The slug without the suffix, or None if there was no suffix to strip.
    """
    if not LEGACY_SUFFIX_PATTERN.search(slug):
        return None
    stripped = LEGACY_SUFFIX_PATTERN.sub("", slug)
    return stripped or None
