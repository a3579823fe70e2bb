# backend/fitmarket/core/enums.py
"""
Core enums for the fitmarket platform.

String-valued so they serialize directly into JSON responses and compare
equal to the raw values stored in the database.
"""

from enum import Enum


class EntityType(str, Enum):
    """
    Entity namespaces a public path segment can resolve to.

    Declaration order is the slug resolution priority.
    """

    TRAINER = "trainer"
    SPORT = "sport"
    PROGRAM = "program"


class ProfileRole(str, Enum):
    """Roles stored on user profiles."""

    TRAINER = "trainer"
    CLIENT = "client"
    ADMIN = "admin"


class ProgramStatus(str, Enum):
    """Lifecycle status of a training program."""

    DRAFT = "draft"
    ACTIVE = "active"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ResolutionStatus(str, Enum):
    """Outcome of a single resolver or orchestrator call."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"


class RedirectReason(str, Enum):
    """Why a resolved identifier should be redirected to its canonical URL."""

    UUID_TO_SLUG = "uuid_to_slug"
    TYPE_MISMATCH = "type_mismatch"
    LEGACY_SLUG = "legacy_slug"


class ImageKind(str, Enum):
    """Placeholder image families."""

    COVER = "cover"
    AVATAR = "avatar"
    GENERAL = "general"
