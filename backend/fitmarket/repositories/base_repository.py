# backend/fitmarket/repositories/base_repository.py
"""
Base Repository Pattern for the fitmarket platform.

Provides the foundation for all repository classes with:
- Type safety with generics
- Primary-key lookup shared by every model
- Uniform wrapping of SQLAlchemy failures in RepositoryException

Services never see SQLAlchemy errors directly; anything that goes wrong
below this layer surfaces as RepositoryException.
"""

import logging
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from ..core.exceptions import RepositoryException

# Type variable for generic model support
T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Concrete base repository implementation with common data access patterns.

    Attributes:
        db: SQLAlchemy session
        model: SQLAlchemy model class
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize repository with database session and model.

        Args:
            db: SQLAlchemy session (owned by the request)
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""
        return self._first(
            self._build_query().filter(self.model.id == id),
            f"retrieve {self.model.__name__}",
        )

    # Protected helper methods for use by subclasses

    def _build_query(self) -> Query:
        """Get base query for the model."""
        return self.db.query(self.model)

    def _first(self, query: Query, description: str) -> Optional[T]:
        """Execute a single-row query with error handling."""
        try:
            return query.first()
        except SQLAlchemyError as e:
            self.logger.error(f"Query error ({description}): {str(e)}")
            raise RepositoryException(f"Failed to {description}: {str(e)}")
