"""API routes module for citation-service.

This module exports all API routers for registration in main.py.
"""

from citation_service.api.routes.citations import router as citations_router
from citation_service.api.routes.health import router as health_router


__all__ = [
    "citations_router",
    "health_router",
]
