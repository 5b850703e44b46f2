"""Typed configuration dataclasses for petfinder-quicksearch.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any


@dataclass
class ApiConfig:
    """Remote registry API configuration."""
    base_url: str = "https://pets.сделай.site/api"
    timeout: float = 10.0  # seconds per request
    retries: int = 3  # attempts for listing reads (never for suggestions)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class WebConfig:
    """Browser front-end used as navigation target."""
    base_url: str = "https://pets.сделай.site"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SuggestConfig:
    """Quick-search suggestion behaviour."""
    debounce_ms: int = 1000
    min_query_length: int = 5
    max_groups: int = 5
    max_examples: int = 2  # member examples rendered per group

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    api: ApiConfig = field(default_factory=ApiConfig)
    web: WebConfig = field(default_factory=WebConfig)
    suggest: SuggestConfig = field(default_factory=SuggestConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "api": self.api.to_dict(),
            "web": self.web.to_dict(),
            "suggest": self.suggest.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            api=ApiConfig(**data.get("api", {})),
            web=WebConfig(**data.get("web", {})),
            suggest=SuggestConfig(**data.get("suggest", {})),
        )


__all__ = ["AppConfig", "ApiConfig", "WebConfig", "SuggestConfig"]
