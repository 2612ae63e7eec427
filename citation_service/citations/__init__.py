"""Citation formatting engine.

This package turns structured field input into APA, MLA or Chicago
citations for books and websites:
- format_authors for author-list joining and "et al." truncation
- format_date for per-style access dates
- build_citation / CitationBuilder for validation and templating
- to_plain_text / to_markdown for alternate renderings

Every function here is pure: identical inputs give identical outputs.
"""

from citation_service.citations.author_formatter import format_authors, split_authors
from citation_service.citations.builder import (
    CITATION_TEMPLATES,
    REQUIRED_FIELDS,
    CitationBuilder,
    build_citation,
)
from citation_service.citations.date_formatter import format_calendar_date, format_date
from citation_service.citations.rendering import to_markdown, to_plain_text


__all__ = [
    "CITATION_TEMPLATES",
    "REQUIRED_FIELDS",
    "CitationBuilder",
    "build_citation",
    "format_authors",
    "format_calendar_date",
    "format_date",
    "split_authors",
    "to_markdown",
    "to_plain_text",
]
