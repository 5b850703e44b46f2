"""Navigation targets produced by the suggestion widget."""
from __future__ import annotations
from typing import Any, Protocol


class Navigator(Protocol):
    """Receiver of the two navigation requests the quick search can make."""

    def navigate_to_detail(self, pet_id: Any) -> None:
        ...

    def navigate_to_filtered_list(self, description: str) -> None:
        ...


__all__ = ["Navigator"]
