# backend/fitmarket/repositories/user_profile_repository.py
"""
Repository for user profile data access.

Public trainer lookups only ever match active profiles with the trainer
role; client and admin profiles are never exposed through a slug.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Query, Session

from ..core.enums import ProfileRole
from ..models.user_profile import UserProfile
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class UserProfileRepository(BaseRepository[UserProfile]):
    """Repository for UserProfile queries."""

    def __init__(self, db: Session) -> None:
        super().__init__(db, UserProfile)

    def _public_trainers(self) -> Query:
        return self._build_query().filter(
            UserProfile.role == ProfileRole.TRAINER.value,
            UserProfile.is_active.is_(True),
        )

    def get_active_trainer_by_slug(self, slug: str) -> Optional[UserProfile]:
        """Look up an active trainer by URL slug (e.g., "ana-costa")."""
        return self._first(
            self._public_trainers().filter(UserProfile.slug == slug),
            "get trainer by slug",
        )

    def get_active_trainer_by_id(self, profile_id: str) -> Optional[UserProfile]:
        """Look up an active trainer by profile UUID."""
        return self._first(
            self._public_trainers().filter(UserProfile.id == profile_id),
            "get trainer by id",
        )

