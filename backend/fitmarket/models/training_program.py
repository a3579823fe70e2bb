# backend/fitmarket/models/training_program.py
"""
Training program model.

Programs are authored by trainers and sold to clients. Only programs in a
public status (active or published) are reachable under
``/programs/{slug}``; older programs may have no slug at all.
"""

from __future__ import annotations

from typing import Any, Dict
import uuid

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Numeric, String, Text, func
from sqlalchemy.orm import relationship

from ..core.constants import PUBLIC_PROGRAM_STATUSES
from ..core.enums import ProgramStatus
from ..database import Base


class TrainingProgram(Base):
    """
    Model representing a trainer's program.

    Attributes:
        id: UUID primary key (string form)
        trainer_id: FK to user_profiles
        title: Display title
        slug: Optional URL-friendly identifier, unique among programs
        status: draft, active, published or archived
        base_price: Optional list price
        cover_image_url: Optional cover image URL
        program_data: Free-form program payload (modules, descriptions, ...)

    Relationships:
        trainer: The UserProfile that owns this program
    """

    __tablename__ = "training_programs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    trainer_id = Column(
        String(36),
        ForeignKey("user_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    slug = Column(String(50), nullable=True, unique=True, index=True)
    status = Column(String(20), nullable=False, default=ProgramStatus.DRAFT.value, index=True)
    base_price = Column(Numeric(10, 2), nullable=True)
    cover_image_url = Column(Text, nullable=True)
    program_data = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    trainer = relationship("UserProfile")

    def __repr__(self) -> str:
        return f"<TrainingProgram {self.title} ({self.status})>"

    @property
    def is_public(self) -> bool:
        return self.status in PUBLIC_PROGRAM_STATUSES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "trainer_id": self.trainer_id,
            "title": self.title,
            "slug": self.slug,
            "status": self.status,
            "base_price": float(self.base_price) if self.base_price is not None else None,
            "cover_image_url": self.cover_image_url,
            "program_data": self.program_data or {},
        }
