"""
Repository layer for the fitmarket platform.

Repositories own every query against the database; services only talk to
repositories, which wrap SQLAlchemy failures in RepositoryException.
"""

from .base_repository import BaseRepository
from .factory import RepositoryFactory
from .sport_repository import SportRepository
from .training_program_repository import TrainingProgramRepository
from .user_profile_repository import UserProfileRepository

__all__ = [
    "BaseRepository",
    "RepositoryFactory",
    "SportRepository",
    "TrainingProgramRepository",
    "UserProfileRepository",
]
