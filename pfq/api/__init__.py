"""Remote pet registry API access."""
from .client import PetRegistryClient
from .errors import SearchError, NetworkFailure, HttpError, ParseFailure
from .links import WebLinks

__all__ = [
    "PetRegistryClient",
    "SearchError",
    "NetworkFailure",
    "HttpError",
    "ParseFailure",
    "WebLinks",
]
