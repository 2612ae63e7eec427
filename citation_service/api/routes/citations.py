"""Citation API routes.

Service Endpoints:
- POST /v1/citations - Build a citation in one style
- POST /v1/citations/preview - Build a citation in every style
- POST /v1/citations/authors - Format an author list
- POST /v1/citations/dates - Format an access date
- GET /v1/citations/styles - List styles and source types

The caller owns the current style and source type and sends them with
every request; the service keeps no selection state.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from citation_service.citations import (
    REQUIRED_FIELDS,
    CitationBuilder,
    format_authors,
    format_date,
    to_plain_text,
)
from citation_service.core.config import Settings, get_settings
from citation_service.core.logging import get_logger
from citation_service.schemas.citations import (
    CitationFields,
    SourceType,
    Style,
    parse_source_type,
    parse_style,
)


logger = get_logger(__name__)


# =============================================================================
# Router Configuration
# =============================================================================

router = APIRouter(
    prefix="/v1/citations",
    tags=["Citations"],
)

SettingsDep = Annotated[Settings, Depends(get_settings)]


# =============================================================================
# Request/Response Models
# =============================================================================

class CitationRequest(BaseModel):
    """Request model for building a citation.

    Attributes:
        source_type: "book" or "website"
        style: "apa", "mla" or "chicago"; defaults to the configured style
        fields: Raw citation field values
    """

    source_type: str = Field(..., description="Source type: book or website")
    style: str | None = Field(
        default=None,
        description="Citation style: apa, mla or chicago",
    )
    fields: CitationFields = Field(
        default_factory=CitationFields,
        description="Raw citation field values",
    )


class PreviewRequest(BaseModel):
    """Request model for rendering a citation in every style."""

    source_type: str = Field(..., description="Source type: book or website")
    fields: CitationFields = Field(
        default_factory=CitationFields,
        description="Raw citation field values",
    )


class CitationResponse(BaseModel):
    """A formatted citation.

    Attributes:
        citation: Citation with <i>...</i> emphasis markup
        plain_text: Citation without markup, if enabled
        style: Style used
        label: Display label, e.g. "APA Citation"
        source_type: Source type used
    """

    citation: str = Field(..., description="Formatted citation with emphasis markup")
    plain_text: str | None = Field(
        default=None,
        description="Formatted citation without markup",
    )
    style: Style = Field(..., description="Style used")
    label: str = Field(..., description="Display label")
    source_type: SourceType = Field(..., description="Source type used")


class PreviewResponse(BaseModel):
    """Citations for every style, keyed by style value."""

    source_type: SourceType
    citations: dict[str, CitationResponse] = Field(default_factory=dict)


class FormatRequest(BaseModel):
    """Request model for author and date formatting."""

    raw: str = Field(default="", description="Unformatted input")
    style: str = Field(..., description="Citation style: apa, mla or chicago")


class FormatResponse(BaseModel):
    """Formatted author phrase or date."""

    formatted: str
    style: Style


class StyleInfo(BaseModel):
    value: Style
    label: str


class SourceTypeInfo(BaseModel):
    value: SourceType
    required_fields: list[str]


class StylesResponse(BaseModel):
    """Supported styles and source types."""

    styles: list[StyleInfo]
    source_types: list[SourceTypeInfo]


# =============================================================================
# Helpers
# =============================================================================

def _to_response(
    citation: str,
    style: Style,
    source_type: SourceType,
    settings: Settings,
) -> CitationResponse:
    return CitationResponse(
        citation=citation,
        plain_text=to_plain_text(citation) if settings.include_plain_text else None,
        style=style,
        label=f"{style.label.upper()} Citation",
        source_type=source_type,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@router.post(
    "",
    response_model=CitationResponse,
    summary="Build citation",
    description="Formats the supplied fields as a citation in the requested style.",
)
async def create_citation(
    request: CitationRequest,
    settings: SettingsDep,
) -> CitationResponse:
    """Build a single citation.

    Raises:
        CitationFieldsError: Required fields blank or access date unparsable
        UnsupportedStyleError: Unknown style or source type name
    """
    source_type = parse_source_type(request.source_type)
    style = parse_style(request.style or settings.default_style)

    builder = CitationBuilder(reject_unparsable_dates=settings.reject_unparsable_dates)
    result = builder.build(source_type, style, request.fields)

    if not result.ok:
        logger.debug(
            "Citation build failed",
            source_type=source_type.value,
            style=style.value,
            kind=result.error.kind.value,
            fields=list(result.error.fields),
        )

    citation = result.unwrap()
    logger.debug("Citation built", source_type=source_type.value, style=style.value)
    return _to_response(citation, style, source_type, settings)


@router.post(
    "/preview",
    response_model=PreviewResponse,
    summary="Preview citation in all styles",
    description="Formats the supplied fields once per supported style.",
)
async def preview_citation(
    request: PreviewRequest,
    settings: SettingsDep,
) -> PreviewResponse:
    """Build the citation in every style."""
    source_type = parse_source_type(request.source_type)
    builder = CitationBuilder(reject_unparsable_dates=settings.reject_unparsable_dates)

    citations = {}
    for style, result in builder.build_all_styles(source_type, request.fields).items():
        citations[style.value] = _to_response(result.unwrap(), style, source_type, settings)

    return PreviewResponse(source_type=source_type, citations=citations)


@router.post(
    "/authors",
    response_model=FormatResponse,
    summary="Format authors",
)
async def format_author_list(request: FormatRequest) -> FormatResponse:
    """Join a comma-separated author list for a style."""
    style = parse_style(request.style)
    return FormatResponse(formatted=format_authors(request.raw.strip(), style), style=style)


@router.post(
    "/dates",
    response_model=FormatResponse,
    summary="Format date",
)
async def format_access_date(request: FormatRequest) -> FormatResponse:
    """Format a YYYY-MM-DD date for a style; unparsable input gives ""."""
    style = parse_style(request.style)
    return FormatResponse(formatted=format_date(request.raw, style), style=style)


@router.get(
    "/styles",
    response_model=StylesResponse,
    summary="List styles",
)
async def list_styles() -> StylesResponse:
    """List supported styles and each source type's required fields."""
    return StylesResponse(
        styles=[StyleInfo(value=style, label=style.label) for style in Style],
        source_types=[
            SourceTypeInfo(value=source_type, required_fields=list(REQUIRED_FIELDS[source_type]))
            for source_type in SourceType
        ],
    )


__all__ = [
    "CitationRequest",
    "CitationResponse",
    "FormatRequest",
    "FormatResponse",
    "PreviewRequest",
    "PreviewResponse",
    "StylesResponse",
    "router",
]
