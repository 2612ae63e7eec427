"""Author-list formatting.

Turns a raw comma-separated author string into a style-correct phrase:

- APA: "A, B & C", "et al." after 20 authors
- MLA: "A and B", "et al." after 2 authors
- Chicago: "A, B, and C", "et al." after 10 authors

Segments are trimmed but never dropped, so "Smith,,Jones" keeps an empty
middle token.
"""

from __future__ import annotations

from dataclasses import dataclass

from citation_service.schemas.citations import Style, resolve_style


_ET_AL = " et al."
_FALLBACK_SEPARATOR = ", "


@dataclass(frozen=True, slots=True)
class AuthorJoinRule:
    """How a style joins a multi-author list.

    Attributes:
        max_listed: Largest list written out in full; longer lists collapse to "et al."
        separator: Joins every name except the last
        final_separator: Joins the last name to the rest
    """

    max_listed: int
    separator: str
    final_separator: str

    def join(self, authors: list[str]) -> str:
        if len(authors) > self.max_listed:
            return authors[0] + _ET_AL
        return self.separator.join(authors[:-1]) + self.final_separator + authors[-1]


AUTHOR_RULES: dict[Style, AuthorJoinRule] = {
    Style.APA: AuthorJoinRule(max_listed=20, separator=", ", final_separator=" & "),
    Style.MLA: AuthorJoinRule(max_listed=2, separator=" and ", final_separator=" and "),
    Style.CHICAGO: AuthorJoinRule(max_listed=10, separator=", ", final_separator=", and "),
}


def split_authors(raw: str) -> list[str]:
    """Split a comma-separated author string into trimmed names.

    Order and duplicates are preserved. An empty string yields an empty list.
    """
    if not raw:
        return []
    return [name.strip() for name in raw.split(",")]


def format_authors(raw: str, style: Style | str) -> str:
    """Format a raw author string for the given style.

    Args:
        raw: Comma-separated author names
        style: Citation style; unknown names fall back to a plain ", " join

    Returns:
        The joined author phrase, or "" for an empty input

    Example:
        >>> format_authors("Smith, Jones", Style.APA)
        'Smith & Jones'
    """
    authors = split_authors(raw)

    if not authors:
        return ""
    if len(authors) == 1:
        return authors[0]

    resolved = resolve_style(style)
    if resolved is None:
        return _FALLBACK_SEPARATOR.join(authors)
    return AUTHOR_RULES[resolved].join(authors)


__all__ = [
    "AUTHOR_RULES",
    "AuthorJoinRule",
    "format_authors",
    "split_authors",
]
