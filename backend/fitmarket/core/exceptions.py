# backend/fitmarket/core/exceptions.py
"""
Domain-specific exceptions for the fitmarket platform.

Services raise these; routes turn them into HTTP errors with
``to_http_exception()``. The HTTP error body is always
``{"message", "code", "details"}``.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=self.status_code,
            detail={"message": self.message, "code": self.code, "details": self.details},
        )


class ValidationException(DomainException):
    """Raised when business validation fails."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundException(DomainException):
    """Raised when a requested resource is not found."""

    status_code = status.HTTP_404_NOT_FOUND


class ServiceException(DomainException):
    """Raised when a service operation fails."""

    def __init__(
        self,
        message: str = "",
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or "An error occurred processing your request", code, details)


class IdentifierNotFoundException(NotFoundException):
    """Raised when a path identifier resolves to no trainer, sport or program."""

    def __init__(self, identifier: str, expected_type: Optional[str] = None):
        details: Dict[str, Any] = {"identifier": identifier}
        if expected_type:
            details["expected_type"] = expected_type
        super().__init__(
            message=f"No trainer, sport or program found for '{identifier}'",
            code="IDENTIFIER_NOT_FOUND",
            details=details,
        )


class RepositoryException(Exception):
    """
    Raised by repositories when a query fails.

    Wraps the underlying SQLAlchemy error message; resolvers treat it as an
    upstream failure.
    """
