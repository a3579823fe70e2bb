# backend/fitmarket/repositories/sport_repository.py
"""Repository for sport lookups."""

import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.sport import Sport
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class SportRepository(BaseRepository[Sport]):
    """Repository for Sport queries."""

    def __init__(self, db: Session) -> None:
        super().__init__(db, Sport)

    def resolve_slug(self, slug: str) -> Optional[Sport]:
        """Resolve a path slug to an active sport.

        Matching ignores case and surrounding whitespace, so ``"CrossFit"``
        and ``"crossfit"`` land on the same sport.

        Args:
            slug: URL segment to resolve (e.g., "crossfit").

        Returns:
            The active sport, or None.
        """
        normalized = (slug or "").strip().lower()
        return self._first(
            self._build_query().filter(
                func.lower(Sport.slug) == normalized,
                Sport.is_active.is_(True),
            ),
            "resolve sport slug",
        )

