# backend/fitmarket/routes/v1/__init__.py
"""
API v1 Routes

Versioned API endpoints under /api/v1.
"""

from . import images, resolve

__all__ = [
    "images",
    "resolve",
]
