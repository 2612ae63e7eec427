"""Core module - Configuration, logging, and exceptions.

Exports:
    - Settings, get_settings: Pydantic Settings configuration
    - configure_logging, get_logger: Structured logging (structlog)
    - Exception classes: CitationError, CitationFieldsError, UnsupportedStyleError
"""

from citation_service.core.config import Settings, get_settings
from citation_service.core.exceptions import (
    CitationError,
    CitationFieldsError,
    UnsupportedStyleError,
)
from citation_service.core.logging import configure_logging, get_logger


__all__ = [
    # Exceptions
    "CitationError",
    "CitationFieldsError",
    # Configuration
    "Settings",
    "UnsupportedStyleError",
    # Logging
    "configure_logging",
    "get_logger",
    "get_settings",
]
