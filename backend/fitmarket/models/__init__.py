"""
Database models for the fitmarket platform.

- UserProfile: trainer, client and admin profiles
- Sport: sports/modalities used for browsing
- TrainingProgram: programs authored by trainers
"""

from .sport import Sport
from .training_program import TrainingProgram
from .user_profile import UserProfile

__all__ = [
    "Sport",
    "TrainingProgram",
    "UserProfile",
]
