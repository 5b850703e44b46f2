"""Web front-end link builder.

The front-end uses hash routing, so every target lives behind ``/#/``.
"""
from __future__ import annotations
from typing import Any
from urllib.parse import quote


class WebLinks:
    """Builds navigation URLs for the browser front-end.

    Example:
        >>> links = WebLinks("https://pets.example")
        >>> links.filtered_list_url("black cat")
        'https://pets.example/#/search?description=black%20cat'
    """

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def detail_url(self, pet_id: Any) -> str:
        return f"{self.base_url}/#/pet/{quote(str(pet_id), safe='')}"

    def filtered_list_url(self, description: str) -> str:
        return f"{self.base_url}/#/search?description={quote(description, safe='')}"


__all__ = ["WebLinks"]
