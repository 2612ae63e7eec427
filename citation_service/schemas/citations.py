"""Citation schemas for citation-service.

Models (Style, SourceType and ValidationErrorKind live in schemas.enums):
- CitationFields: Raw field values supplied by the caller
- CitationValidationError: Typed validation failure
- CitationResult: Success-or-failure outcome of a build

Field values are opaque text. The only normalization is whitespace
stripping at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from pydantic import BaseModel, ConfigDict, Field

from citation_service.core.exceptions import CitationFieldsError, UnsupportedStyleError
from citation_service.schemas.enums import (
    SourceType,
    Style,
    ValidationErrorKind,
    resolve_style,
)


# =============================================================================
# Name parsing
# =============================================================================

def parse_style(value: Style | str) -> Style:
    """Resolve a style name (case-insensitive) to a Style.

    Raises:
        UnsupportedStyleError: If the name is not a known style
    """
    style = resolve_style(value)
    if style is None:
        raise UnsupportedStyleError(str(value), kind="style")
    return style


def parse_source_type(value: SourceType | str) -> SourceType:
    """Resolve a source type name (case-insensitive) to a SourceType.

    Raises:
        UnsupportedStyleError: If the name is not a known source type
    """
    if isinstance(value, SourceType):
        return value
    try:
        return SourceType(str(value).strip().lower())
    except ValueError as e:
        raise UnsupportedStyleError(str(value), kind="source_type") from e


# =============================================================================
# CitationFields
# =============================================================================

class CitationFields(BaseModel):
    """Raw citation field values.

    Which fields are required depends on the SourceType:
    - book: author, title, publisher, year
    - website: title, site_name, url, access_date (author optional)

    Attributes:
        author: Comma-separated author names
        title: Title of the book or web page
        publisher: Publisher name (books)
        site_name: Website name (websites)
        year: Publication year (books)
        url: Page URL (websites)
        access_date: ISO access date, YYYY-MM-DD (websites)

    Example:
        >>> fields = CitationFields(author="Smith, Jones", title="T", publisher="P", year="2020")
        >>> fields.author
        'Smith, Jones'
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
        frozen=True,
    )

    author: str = Field(default="", description="Comma-separated author names")
    title: str = Field(default="", description="Title of the source")
    publisher: str = Field(default="", description="Publisher name")
    site_name: str = Field(default="", alias="siteName", description="Website name")
    year: str = Field(default="", description="Publication year")
    url: str = Field(default="", description="Source URL")
    access_date: str = Field(
        default="",
        alias="accessDate",
        description="Access date in YYYY-MM-DD format",
    )


# =============================================================================
# Results
# =============================================================================

@dataclass(frozen=True, slots=True)
class CitationValidationError:
    """Why a citation could not be built.

    Attributes:
        kind: Failure kind
        fields: Offending field names, in required-field order
    """

    kind: ValidationErrorKind
    fields: tuple[str, ...]

    @property
    def message(self) -> str:
        """Human-readable description for display."""
        names = ", ".join(self.fields)
        if self.kind is ValidationErrorKind.UNPARSABLE_DATE:
            return f"Could not parse date field(s): {names}"
        return f"Please fill in all required fields: {names}"


@dataclass(frozen=True, slots=True)
class CitationResult:
    """Outcome of a citation build: exactly one of citation or error is set."""

    citation: str | None = None
    error: CitationValidationError | None = None

    def __post_init__(self) -> None:
        if (self.citation is None) == (self.error is None):
            raise ValueError("CitationResult needs exactly one of citation or error")

    @classmethod
    def success(cls, citation: str) -> CitationResult:
        return cls(citation=citation)

    @classmethod
    def failure(
        cls,
        kind: ValidationErrorKind,
        fields: list[str] | tuple[str, ...],
    ) -> CitationResult:
        return cls(error=CitationValidationError(kind=kind, fields=tuple(fields)))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the citation, or raise if the build failed.

        Raises:
            CitationFieldsError: Carrying the error kind and field names
        """
        if self.error is not None:
            raise CitationFieldsError(
                self.error.message,
                kind=self.error.kind.value,
                fields=list(self.error.fields),
            )
        return cast(str, self.citation)


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
