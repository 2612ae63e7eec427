"""Alternate renderings of a formatted citation.

Citations carry <i>...</i> emphasis markup. These helpers produce the text a
reader copies (no markup) or a Markdown equivalent.
"""

from __future__ import annotations

import re


_ITALIC_PATTERN = re.compile(r"<i>(.*?)</i>", re.DOTALL)


def to_plain_text(citation: str) -> str:
    """Strip italic markup, keeping the enclosed text.

    Example:
        >>> to_plain_text("Smith (2020). <i>T</i>. P.")
        'Smith (2020). T. P.'
    """
    return _ITALIC_PATTERN.sub(r"\1", citation)


def to_markdown(citation: str) -> str:
    """Convert italic markup to Markdown emphasis."""
    return _ITALIC_PATTERN.sub(r"*\1*", citation)


__all__ = [
    "to_markdown",
    "to_plain_text",
]
