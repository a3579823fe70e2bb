# backend/fitmarket/api/dependencies/services.py
"""
Service layer dependencies for dependency injection.

This module provides factory functions that create service instances
with their required dependencies properly injected. Services are built
per request around the request's database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from ...services.slug_resolution_service import SlugResolutionService
from .database import get_db


def get_slug_resolution_service(db: Session = Depends(get_db)) -> SlugResolutionService:
    """Get identifier resolution service bound to the request session."""
    return SlugResolutionService.from_session(db)
