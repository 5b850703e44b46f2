"""Data carried through the suggestion pipeline."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence


def _text_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class RawResult:
    """One listing record as returned by the registry search.

    Attributes:
        id: Listing identifier (int or str, passed through untouched)
        description: Free-text description, None when absent
        kind: Animal kind, e.g. "cat"
        district: Where the animal was found
        data: The complete record, including fields not modelled here
    """

    id: Any
    description: Optional[str] = None
    kind: Optional[str] = None
    district: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> RawResult:
        return cls(
            id=record.get("id"),
            description=_text_or_none(record.get("description")),
            kind=_text_or_none(record.get("kind")),
            district=_text_or_none(record.get("district")),
            data=dict(record),
        )


@dataclass
class SuggestionGroup:
    """Listings sharing one normalized description.

    ``count`` is derived from ``members`` so it can never drift from it.
    """

    normalized_key: str
    display_description: str
    example_id: Any
    members: List[RawResult] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def is_single(self) -> bool:
        return self.count == 1

    def examples(self, limit: int = 2) -> List[RawResult]:
        """First members, in the order the search returned them."""
        return self.members[:limit]

    def hidden_count(self, limit: int = 2) -> int:
        """Members not covered by ``examples(limit)``."""
        return max(0, self.count - limit)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.display_description,
            "count": self.count,
            "example_id": self.example_id,
            "member_ids": [m.id for m in self.members],
        }


class Segment(NamedTuple):
    """Piece of highlighted text."""

    matched: bool
    text: str


def total_listings(groups: Sequence[SuggestionGroup]) -> int:
    return sum(g.count for g in groups)


__all__ = ["RawResult", "SuggestionGroup", "Segment", "total_listings"]
