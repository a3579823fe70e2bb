# backend/fitmarket/models/user_profile.py
"""
User profile model for the fitmarket platform.

A single table holds trainer, client and admin profiles; the ``role``
column tells them apart. Trainer profiles are publicly addressable by
``slug`` under ``/trainers/{slug}``.
"""

from __future__ import annotations

from typing import Any, Dict
import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text, func

from ..core.enums import ProfileRole
from ..database import Base


class UserProfile(Base):
    """
    Model representing a marketplace profile.

    Attributes:
        id: UUID primary key (string form)
        user_id: UUID of the owning auth account
        name: Display name (e.g., "Ana Costa")
        slug: URL-friendly identifier, unique among profiles (e.g., "ana-costa")
        role: trainer, client or admin
        is_active: Inactive profiles never resolve publicly
        avatar_url: Optional avatar image URL (may be a signed storage URL)
        cover_image_url: Optional cover image URL
        profile_data: Free-form profile payload (bio, specialties, ...)
    """

    __tablename__ = "user_profiles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    slug = Column(String(50), nullable=True, unique=True, index=True)
    role = Column(String(20), nullable=False, default=ProfileRole.CLIENT.value, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    avatar_url = Column(Text, nullable=True)
    cover_image_url = Column(Text, nullable=True)
    profile_data = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<UserProfile {self.name} ({self.role}, {self.slug})>"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "slug": self.slug,
            "role": self.role,
            "is_active": self.is_active,
            "avatar_url": self.avatar_url,
            "cover_image_url": self.cover_image_url,
            "profile_data": self.profile_data or {},
        }
