"""Split text around case-insensitive occurrences of the query.

The query is always matched literally; rendering code decides how matched
segments look and is responsible for escaping every segment it emits.
"""
from __future__ import annotations
import re
from typing import List, Optional

from .models import Segment


def highlight(text: Optional[str], query: Optional[str]) -> List[Segment]:
    """Return ``text`` as a list of matched/unmatched segments.

    Example:
        >>> highlight("Black Labrador", "lab")
        [Segment(matched=False, text='Black '), Segment(matched=True, text='Lab'), Segment(matched=False, text='rador')]
    """
    if not text:
        return []
    if not query:
        return [Segment(False, text)]

    pattern = re.compile(re.escape(query), re.IGNORECASE)
    segments: List[Segment] = []
    pos = 0
    for m in pattern.finditer(text):
        if m.start() > pos:
            segments.append(Segment(False, text[pos:m.start()]))
        segments.append(Segment(True, m.group(0)))
        pos = m.end()
    if pos < len(text):
        segments.append(Segment(False, text[pos:]))
    return segments


__all__ = ["highlight"]
