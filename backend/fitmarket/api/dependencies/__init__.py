"""FastAPI dependency providers."""

from .database import get_db
from .services import get_slug_resolution_service

__all__ = [
    "get_db",
    "get_slug_resolution_service",
]
