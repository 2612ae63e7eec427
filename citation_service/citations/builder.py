"""Citation builder.

Combines validated fields, the source type, and the author/date formatter
output into the final citation string.

Templates (<i>...</i> marks italics):
- Book APA:        Authors (Year). <i>Title</i>. Publisher.
- Book MLA:        Authors. <i>Title</i>, Publisher, Year.
- Book Chicago:    Authors. Year. <i>Title</i>. Publisher.
- Website APA:     [Authors. ](n.d.). Title. <i>Site</i>. Retrieved Date, from URL
- Website MLA:     [Authors. ]"Title." <i>Site</i>, n.d., URL. Accessed Date.
- Website Chicago: [Authors. ]"Title." Site. URL (accessed Date).

The engine never raises for blank or unparsable fields; it returns a
CitationResult describing the failure instead.
"""

from __future__ import annotations

from itertools import product
from typing import Any

from citation_service.citations.author_formatter import format_authors
from citation_service.citations.date_formatter import format_date
from citation_service.schemas.citations import (
    CitationFields,
    CitationResult,
    SourceType,
    Style,
    ValidationErrorKind,
    parse_source_type,
    parse_style,
)


# =============================================================================
# Module Constants
# =============================================================================

_BOOK_APA_TEMPLATE = "{authors} ({year}). <i>{title}</i>. {publisher}."
_BOOK_MLA_TEMPLATE = "{authors}. <i>{title}</i>, {publisher}, {year}."
_BOOK_CHICAGO_TEMPLATE = "{authors}. {year}. <i>{title}</i>. {publisher}."

_WEBSITE_APA_TEMPLATE = (
    "{author_prefix}(n.d.). {title}. <i>{site_name}</i>. Retrieved {access_date}, from {url}"
)
_WEBSITE_MLA_TEMPLATE = (
    '{author_prefix}"{title}." <i>{site_name}</i>, n.d., {url}. Accessed {access_date}.'
)
_WEBSITE_CHICAGO_TEMPLATE = (
    '{author_prefix}"{title}." {site_name}. {url} (accessed {access_date}).'
)

CITATION_TEMPLATES: dict[tuple[SourceType, Style], str] = {
    (SourceType.BOOK, Style.APA): _BOOK_APA_TEMPLATE,
    (SourceType.BOOK, Style.MLA): _BOOK_MLA_TEMPLATE,
    (SourceType.BOOK, Style.CHICAGO): _BOOK_CHICAGO_TEMPLATE,
    (SourceType.WEBSITE, Style.APA): _WEBSITE_APA_TEMPLATE,
    (SourceType.WEBSITE, Style.MLA): _WEBSITE_MLA_TEMPLATE,
    (SourceType.WEBSITE, Style.CHICAGO): _WEBSITE_CHICAGO_TEMPLATE,
}

REQUIRED_FIELDS: dict[SourceType, tuple[str, ...]] = {
    SourceType.BOOK: ("author", "title", "publisher", "year"),
    SourceType.WEBSITE: ("title", "site_name", "url", "access_date"),
}

_missing_templates = [
    key for key in product(SourceType, Style) if key not in CITATION_TEMPLATES
]
if _missing_templates:
    raise RuntimeError(f"No citation template for {_missing_templates}")


# =============================================================================
# Helpers
# =============================================================================

def _coerce_fields(fields: CitationFields | dict[str, Any]) -> CitationFields:
    if isinstance(fields, CitationFields):
        return fields
    return CitationFields.model_validate(fields)


def missing_fields(source_type: SourceType, fields: CitationFields) -> list[str]:
    """Names of required fields that are blank after trimming, in required order."""
    return [
        name for name in REQUIRED_FIELDS[source_type]
        if not getattr(fields, name).strip()
    ]


# =============================================================================
# Build
# =============================================================================

def build_citation(
    source_type: SourceType | str,
    style: Style | str,
    fields: CitationFields | dict[str, Any],
    *,
    reject_unparsable_dates: bool = True,
) -> CitationResult:
    """Build a formatted citation.

    Args:
        source_type: Book or website
        style: APA, MLA or Chicago
        fields: Raw field values (model or mapping)
        reject_unparsable_dates: When True, a website access date that is not
            a valid YYYY-MM-DD date fails the build. When False, the access
            date clause is emitted empty.

    Returns:
        CitationResult holding either the citation or the validation error

    Raises:
        UnsupportedStyleError: If source_type or style is an unknown name

    Example:
        >>> build_citation(
        ...     SourceType.BOOK, Style.APA,
        ...     {"author": "Smith, Jones", "title": "T", "publisher": "P", "year": "2020"},
        ... ).citation
        'Smith & Jones (2020). <i>T</i>. P.'
    """
    source_type = parse_source_type(source_type)
    style = parse_style(style)
    fields = _coerce_fields(fields)

    missing = missing_fields(source_type, fields)
    if missing:
        return CitationResult.failure(ValidationErrorKind.MISSING_REQUIRED_FIELD, missing)

    template = CITATION_TEMPLATES[(source_type, style)]
    authors = format_authors(fields.author.strip(), style)

    if source_type is SourceType.BOOK:
        citation = template.format(
            authors=authors,
            title=fields.title.strip(),
            publisher=fields.publisher.strip(),
            year=fields.year.strip(),
        )
        return CitationResult.success(citation)

    access_date = format_date(fields.access_date, style)
    if not access_date and reject_unparsable_dates:
        return CitationResult.failure(ValidationErrorKind.UNPARSABLE_DATE, ["access_date"])

    citation = template.format(
        author_prefix=f"{authors}. " if fields.author.strip() else "",
        title=fields.title.strip(),
        site_name=fields.site_name.strip(),
        url=fields.url.strip(),
        access_date=access_date,
    )
    return CitationResult.success(citation)


class CitationBuilder:
    """Builds citations under a fixed date-handling policy.

    Example:
        >>> builder = CitationBuilder(reject_unparsable_dates=False)
        >>> builder.build("website", "mla", {
        ...     "title": "T", "site_name": "S", "url": "http://x", "access_date": "nope",
        ... }).citation
        '"T." <i>S</i>, n.d., http://x. Accessed .'
    """

    def __init__(self, reject_unparsable_dates: bool = True) -> None:
        self.reject_unparsable_dates = reject_unparsable_dates

    def build(
        self,
        source_type: SourceType | str,
        style: Style | str,
        fields: CitationFields | dict[str, Any],
    ) -> CitationResult:
        return build_citation(
            source_type,
            style,
            fields,
            reject_unparsable_dates=self.reject_unparsable_dates,
        )

    def build_all_styles(
        self,
        source_type: SourceType | str,
        fields: CitationFields | dict[str, Any],
    ) -> dict[Style, CitationResult]:
        """Build the citation once per style, keyed by style."""
        return {style: self.build(source_type, style, fields) for style in Style}


__all__ = [
    "CITATION_TEMPLATES",
    "REQUIRED_FIELDS",
    "CitationBuilder",
    "build_citation",
    "missing_fields",
]
