"""Splits text into plain and keyword-matching segments."""

import re
from collections.abc import Sequence

from .models import TextSegment


def highlight(text: str | None, keywords: Sequence[str]) -> list[TextSegment]:
    """
    Partitions text into an ordered list of plain and highlighted segments.

    Keywords are matched literally and case-insensitively. Matches never
    overlap; at each position the earliest keyword in the list wins.
    Matched segments keep the casing of the original text.
    """
    if not text:
        return []

    terms = [k for k in keywords if k]
    if not terms:
        return [TextSegment(text=text)]

    pattern = re.compile("|".join(re.escape(t) for t in terms), re.IGNORECASE)

    segments: list[TextSegment] = []
    last_index = 0
    for match in pattern.finditer(text):
        start, end = match.span()
        if start > last_index:
            segments.append(TextSegment(text=text[last_index:start]))
        segments.append(TextSegment(text=match.group(0), highlighted=True))
        last_index = end

    if last_index < len(text):
        segments.append(TextSegment(text=text[last_index:]))

    return segments
