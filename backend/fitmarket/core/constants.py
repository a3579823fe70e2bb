"""Application-wide constants for the fitmarket platform."""

from __future__ import annotations

from .enums import EntityType, ImageKind, ProgramStatus

BRAND_NAME = "fitmarket"

# API metadata
API_TITLE = f"{BRAND_NAME} API"
API_DESCRIPTION = "Public identifier resolution for trainers, sports and programs"
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

# Slug constraints
SLUG_MAX_LENGTH = 50

# Public page prefixes per entity namespace
SEO_PATH_PREFIXES: dict[EntityType, str] = {
    EntityType.TRAINER: "/trainers",
    EntityType.SPORT: "/sports",
    EntityType.PROGRAM: "/programs",
}
SEO_FALLBACK_PATH = "/"

# Programs in these states are publicly reachable
PUBLIC_PROGRAM_STATUSES: tuple[str, ...] = (
    ProgramStatus.ACTIVE.value,
    ProgramStatus.PUBLISHED.value,
)

# Signed storage URLs carry this marker in their host/path
DEFAULT_STORAGE_URL_MARKER = "supabase.co/storage"

# Placeholder images used when every candidate URL is missing or expired
FALLBACK_IMAGE_URLS: dict[ImageKind, list[str]] = {
    ImageKind.COVER: [
        "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=800&h=600&fit=crop&auto=format&q=80",
        "https://images.unsplash.com/photo-1606889803107-66dd7d7c9bfb?w=800&h=600&fit=crop&auto=format&q=80",
        "https://images.unsplash.com/photo-1534438327276-14e5300c3a48?w=800&h=600&fit=crop&auto=format&q=80",
    ],
    ImageKind.AVATAR: [
        "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face&auto=format&q=80",
        "https://images.unsplash.com/photo-1535713875002-d1d0cf377fde?w=150&h=150&fit=crop&crop=face&auto=format&q=80",
    ],
    ImageKind.GENERAL: [
        "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=800&h=600&fit=crop&auto=format&q=80",
        "https://images.unsplash.com/photo-1606889803107-66dd7d7c9bfb?w=800&h=600&fit=crop&auto=format&q=80",
    ],
}
