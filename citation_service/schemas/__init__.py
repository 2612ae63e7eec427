"""Pydantic schemas and value types for citation requests and results."""

from citation_service.schemas.citations import (
    CitationFields,
    CitationResult,
    CitationValidationError,
    SourceType,
    Style,
    ValidationErrorKind,
    parse_source_type,
    parse_style,
    resolve_style,
)


__all__ = [
    "CitationFields",
    "CitationResult",
    "CitationValidationError",
    "SourceType",
    "Style",
    "ValidationErrorKind",
    "parse_source_type",
    "parse_style",
    "resolve_style",
]
