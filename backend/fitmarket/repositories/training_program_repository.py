# backend/fitmarket/repositories/training_program_repository.py
"""
Repository for training program data access.

Only programs whose status is public (active or published) are returned
by the lookups here; drafts and archived programs behave as missing.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Query, Session

from ..core.constants import PUBLIC_PROGRAM_STATUSES
from ..models.training_program import TrainingProgram
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class TrainingProgramRepository(BaseRepository[TrainingProgram]):
    """Repository for TrainingProgram queries."""

    def __init__(self, db: Session) -> None:
        super().__init__(db, TrainingProgram)

    def _public_programs(self) -> Query:
        return self._build_query().filter(TrainingProgram.status.in_(PUBLIC_PROGRAM_STATUSES))

    def get_public_by_slug(self, slug: str) -> Optional[TrainingProgram]:
        """Look up a public program by URL slug."""
        return self._first(
            self._public_programs().filter(TrainingProgram.slug == slug),
            "get program by slug",
        )

    def get_public_by_id(self, program_id: str) -> Optional[TrainingProgram]:
        """Look up a public program by UUID."""
        return self._first(
            self._public_programs().filter(TrainingProgram.id == program_id),
            "get program by id",
        )
