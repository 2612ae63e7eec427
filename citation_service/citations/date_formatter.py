"""Access-date formatting.

- APA: "March 5, 2023"
- MLA: "5 Mar. 2023" (AP-style abbreviations; May, June and July are written out)
- Chicago: "March 5, 2023"
- Unknown style: "2023-03-05"

An input that is not a valid YYYY-MM-DD calendar date formats to "".
"""

from __future__ import annotations

import re
from datetime import date

from citation_service.schemas.citations import Style, resolve_style


MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan.", "Feb.", "Mar.", "Apr.", "May", "June",
    "July", "Aug.", "Sept.", "Oct.", "Nov.", "Dec.",
)

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

_DATE_TEMPLATES: dict[Style, str] = {
    Style.APA: "{month} {day}, {year}",
    Style.MLA: "{day} {month_abbrev} {year}",
    Style.CHICAGO: "{month} {day}, {year}",
}


def month_name(month: int, abbreviated: bool = False) -> str:
    """Return the name of a 1-based month number."""
    names = MONTH_ABBREVIATIONS if abbreviated else MONTH_NAMES
    return names[month - 1]


def parse_date(raw: str) -> date | None:
    """Parse a YYYY-MM-DD string, returning None when it is not a real date."""
    if not raw:
        return None
    text = raw.strip()
    # fromisoformat also takes basic and week forms such as 20230305 or 2023-W10-7
    if not _ISO_DATE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def format_calendar_date(value: date, style: Style | str) -> str:
    """Format a calendar date for the given style."""
    resolved = resolve_style(style)
    if resolved is None:
        return value.isoformat()

    return _DATE_TEMPLATES[resolved].format(
        month=month_name(value.month),
        month_abbrev=month_name(value.month, abbreviated=True),
        day=value.day,
        year=value.year,
    )


def format_date(raw: str, style: Style | str) -> str:
    """Format an ISO date string for the given style.

    Args:
        raw: Date in YYYY-MM-DD form
        style: Citation style

    Returns:
        The formatted date, or "" if raw is not a valid date

    Example:
        >>> format_date("2023-03-05", Style.MLA)
        '5 Mar. 2023'
    """
    parsed = parse_date(raw)
    if parsed is None:
        return ""
    return format_calendar_date(parsed, style)


__all__ = [
    "MONTH_ABBREVIATIONS",
    "MONTH_NAMES",
    "format_calendar_date",
    "format_date",
    "month_name",
    "parse_date",
]
