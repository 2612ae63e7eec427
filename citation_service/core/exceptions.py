"""Custom exceptions for citation-service.

All exceptions are namespaced under CitationError so callers can catch any
service error with a single except clause.

The formatting engine itself does not raise for bad field input: it reports
failures through CitationResult. These exceptions are used at the edges
(name parsing, CitationResult.unwrap, the HTTP layer).
"""


class CitationError(Exception):
    """Base exception for all citation-service errors."""

    def __init__(self, message: str) -> None:
        """Initialize citation error.

        Args:
            message: Error description
        """
        super().__init__(message)


class CitationFieldsError(CitationError):
    """Raised when a citation cannot be built from the supplied fields.

    Distinct from pydantic's ValidationError, which covers malformed
    request payloads rather than blank or unparsable field values.
    """

    def __init__(
        self,
        message: str,
        kind: str,
        fields: list[str] | None = None,
    ) -> None:
        """Initialize fields error.

        Args:
            message: Error description
            kind: Failure kind, e.g. "missing_required_field"
            fields: Names of the offending fields
        """
        self.kind = kind
        self.fields = fields or []
        super().__init__(message)


class UnsupportedStyleError(CitationError):
    """Raised when a style or source type name is not recognized."""

    def __init__(self, value: str, kind: str = "style") -> None:
        """Initialize unsupported style error.

        Args:
            value: The unrecognized name
            kind: What was being parsed ("style" or "source_type")
        """
        self.value = value
        self.kind = kind
        super().__init__(f"Unsupported {kind} '{value}'")


__all__ = [
    "CitationError",
    "CitationFieldsError",
    "UnsupportedStyleError",
]
