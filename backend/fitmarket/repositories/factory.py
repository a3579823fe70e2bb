# backend/fitmarket/repositories/factory.py
"""
Repository Factory for the fitmarket platform.

Provides centralized creation of repository instances,
ensuring consistent initialization and dependency injection.
"""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

# Avoid circular imports
if TYPE_CHECKING:
    from .sport_repository import SportRepository
    from .training_program_repository import TrainingProgramRepository
    from .user_profile_repository import UserProfileRepository


class RepositoryFactory:
    """
    Factory class for creating repository instances.

    Centralizes repository creation to ensure consistent initialization
    and makes it easy to swap implementations if needed.
    """

    @staticmethod
    def create_user_profile_repository(db: Session) -> "UserProfileRepository":
        """Create repository for trainer/client profile lookups."""
        from .user_profile_repository import UserProfileRepository

        return UserProfileRepository(db)

    @staticmethod
    def create_sport_repository(db: Session) -> "SportRepository":
        """Create repository for sport lookups."""
        from .sport_repository import SportRepository

        return SportRepository(db)

    @staticmethod
    def create_training_program_repository(db: Session) -> "TrainingProgramRepository":
        """Create repository for public program lookups."""
        from .training_program_repository import TrainingProgramRepository

        return TrainingProgramRepository(db)
