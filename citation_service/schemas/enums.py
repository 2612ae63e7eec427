"""Enumeration types for citation-service.

Kept free of package imports so configuration can type fields with them.
"""

from __future__ import annotations

from enum import Enum


class Style(str, Enum):
    """Supported citation styles."""

    APA = "apa"
    MLA = "mla"
    CHICAGO = "chicago"

    @property
    def label(self) -> str:
        """Display tag for the style, e.g. "APA" or "Chicago"."""
        return _STYLE_LABELS[self]


_STYLE_LABELS: dict[Style, str] = {
    Style.APA: "APA",
    Style.MLA: "MLA",
    Style.CHICAGO: "Chicago",
}


class SourceType(str, Enum):
    """Source types that determine required fields and template."""

    BOOK = "book"
    WEBSITE = "website"


class ValidationErrorKind(str, Enum):
    """Enumerable failure kinds reported by the citation builder."""

    MISSING_REQUIRED_FIELD = "missing_required_field"
    UNPARSABLE_DATE = "unparsable_date"


def resolve_style(style: Style | str) -> Style | None:
    """Map a style or style name (case-insensitive) to a Style, or None if unrecognized."""
    if isinstance(style, Style):
        return style
    try:
        return Style(str(style).strip().lower())
    except ValueError:
        return None
