from __future__ import annotations
import os
import json
import logging
from typing import Any, Dict
from pathlib import Path
import copy

logger = logging.getLogger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "api": {
        "base_url": "https://pets.сделай.site/api",
        "timeout": 10.0,
        "retries": 3,
    },
    "web": {
        "base_url": "https://pets.сделай.site",
    },
    "suggest": {
        "debounce_ms": 1000,
        "min_query_length": 5,  # search only when len(query) > 4
        "max_groups": 5,
        "max_examples": 2,
    },
}

ENV_PREFIX = "PFQ__"


def deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Merge dict b into a (shallow copies) returning new dict.
    Nested dicts are merged recursively; other values override.
    """
    result = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)  # type: ignore[arg-type]
        else:
            result[k] = v
    return result


def _load_dotenv(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, val = line.split('=', 1)
        key = key.strip()
        val = val.strip()
        # Strip inline comments starting with # unless inside quotes
        if '#' in val:
            in_single = False
            in_double = False
            result_chars = []
            for ch in val:
                if ch == "'" and not in_double:
                    in_single = not in_single
                elif ch == '"' and not in_single:
                    in_double = not in_double
                if ch == '#' and not in_single and not in_double:
                    break
                result_chars.append(ch)
            val = ''.join(result_chars).rstrip()
        if len(val) >= 2 and val[0] == val[-1] and val[0] in ('"', "'"):
            val = val[1:-1]
        if key:
            values[key] = val
    return values


def load_config(overrides: Dict[str, Any] | None = None, configure_logging: bool = True) -> Dict[str, Any]:
    """Load configuration merging defaults <- .env <- environment <- overrides.

    During test runs (detected via PYTEST_CURRENT_TEST) .env loading is skipped
    unless PFQ_ENABLE_DOTENV=1 is set to allow deterministic defaults.

    Args:
        overrides: Dict of values to deep-merge last (primarily for tests).
        configure_logging: Apply ``log_level`` to the root logger.

    Returns:
        dict: Configuration dictionary (for typed access use load_typed_config()).
    """
    dotenv_values: Dict[str, str] = {}
    if os.environ.get('PFQ_ENABLE_DOTENV') or not os.environ.get('PYTEST_CURRENT_TEST'):
        dotenv_values = _load_dotenv(Path('.env'))
    cfg: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    # Real environment wins over .env
    combined = {**{k: v for k, v in dotenv_values.items() if k.startswith(ENV_PREFIX)},
                **{k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}}
    for raw_key, value in combined.items():
        path_parts = raw_key[len(ENV_PREFIX):].split("__")
        cursor: Dict[str, Any] = cfg
        for part in path_parts[:-1]:
            cursor = cursor.setdefault(part.lower(), {})  # type: ignore[assignment]
        cursor[path_parts[-1].lower()] = coerce_scalar(value)
    if overrides:
        cfg = deep_merge(cfg, overrides)

    if configure_logging:
        _configure_logging(cfg.get('log_level', 'INFO'))

    return cfg


def load_typed_config(overrides: Dict[str, Any] | None = None, configure_logging: bool = True):
    """Load configuration as typed AppConfig object.

    Args:
        overrides: Dictionary of override values
        configure_logging: Apply ``log_level`` to the root logger.

    Returns:
        AppConfig: Typed configuration object with .to_dict() for dict conversion
    """
    from .config_types import AppConfig
    dict_config = load_config(overrides, configure_logging=configure_logging)
    return AppConfig.from_dict(dict_config)


def _configure_logging(level_str: str, fmt: str = '%(message)s') -> None:
    """Configure Python logging based on configured level."""
    level = logging.getLevelName(str(level_str).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=fmt,
        force=True  # Reconfigure even if already configured
    )


def coerce_scalar(value: str) -> Any:
    txt = value.strip()
    # JSON object or array
    if (txt.startswith('[') and txt.endswith(']')) or (txt.startswith('{') and txt.endswith('}')):
        try:
            return json.loads(txt)
        except ValueError:
            pass  # fall through to scalar heuristics
    lower = txt.lower()
    if lower in {"true", "yes"}:
        return True
    if lower in {"false", "no"}:
        return False
    if txt.isdigit() or (txt.startswith("-") and txt[1:].isdigit()):
        return int(txt)
    try:
        return float(txt)
    except ValueError:
        return txt


__all__ = ["load_config", "deep_merge", "load_typed_config", "coerce_scalar"]
