"""Aggregate raw search records into ranked suggestion groups."""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from .models import RawResult, SuggestionGroup

MAX_GROUPS = 5


def normalize_description(text: Optional[str]) -> str:
    """Grouping key: surrounding whitespace removed, case folded."""
    if not text:
        return ""
    return text.strip().casefold()


def group_results(raw_results: Iterable[RawResult], max_groups: int = MAX_GROUPS) -> List[SuggestionGroup]:
    """Group records by normalized description and rank the groups.

    The first record of a group supplies its display text and example id.
    Groups are ordered by size, largest first; equal sizes keep the order in
    which their first record appeared. Only the top ``max_groups`` are kept,
    the rest are dropped.

    Args:
        raw_results: Records in server order
        max_groups: Maximum number of groups returned

    Returns:
        Ranked groups, at most ``max_groups`` long
    """
    groups: Dict[str, SuggestionGroup] = {}
    for record in raw_results:
        key = normalize_description(record.description)
        if not key:
            continue
        group = groups.get(key)
        if group is None:
            group = SuggestionGroup(
                normalized_key=key,
                display_description=record.description,  # type: ignore[arg-type]
                example_id=record.id,
            )
            groups[key] = group
        group.members.append(record)

    # sorted() is stable and dicts keep first-seen order
    ranked = sorted(groups.values(), key=lambda g: g.count, reverse=True)
    return ranked[:max(0, max_groups)]


__all__ = ["group_results", "normalize_description", "MAX_GROUPS"]
