# backend/fitmarket/models/sport.py
from __future__ import annotations

from typing import Any, Dict
import uuid

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from ..database import Base


class Sport(Base):
    """
    Model representing a sport or training modality.

    Sports group trainers and programs for browsing, and each one is
    reachable under ``/sports/{slug}``.
    """

    __tablename__ = "sports"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    slug = Column(String(50), nullable=False, unique=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<Sport {self.name} ({self.slug})>"

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "slug": self.slug}
