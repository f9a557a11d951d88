from __future__ import annotations
import os
import json
import logging
from typing import Any, Dict
from pathlib import Path
import copy

from .config_types import AppConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "SPOTCAT__"

_DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "api": {
        "base_url": "https://api.spotify.com/v1/",
        "token": None,
        "timeout": 30.0,
        "market_fallback": "US",
    },
    "errors": {
        "error_key": "error",
        "status_key": "status",
        "message_key": "message",
    },
}

# Settings read verbatim from the environment; market codes such as "NO"
# and opaque tokens must never be coerced to bool/number.
_TEXT_KEYS = {
    ("log_level",),
    ("api", "base_url"),
    ("api", "token"),
    ("api", "market_fallback"),
    ("errors", "error_key"),
    ("errors", "status_key"),
    ("errors", "message_key"),
}


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
        # Strip inline comments unless inside quotes
        if '#' in val:
            in_single = False
            in_double = False
            kept = []
            for ch in val:
                if ch == "'" and not in_double:
                    in_single = not in_single
                elif ch == '"' and not in_single:
                    in_double = not in_double
                if ch == '#' and not in_single and not in_double:
                    break
                kept.append(ch)
            val = ''.join(kept).rstrip()
        if len(val) >= 2 and val[0] == val[-1] and val[0] in ('"', "'"):
            val = val[1:-1]
        if key:
            values[key] = val
    return values


def load_config(overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Load configuration merging defaults <- .env <- environment <- overrides.

    Environment keys use the ``SPOTCAT__`` prefix with ``__`` separating
    nesting levels, e.g. ``SPOTCAT__API__TOKEN``. During test runs (detected
    via PYTEST_CURRENT_TEST) .env loading is skipped unless
    SPOTCAT_ENABLE_DOTENV=1 is set.

    Args:
        overrides: Dict of values to deep-merge last (primarily for tests).

    Returns:
        dict: Configuration dictionary (for typed access use load_typed_config()).
    """
    dotenv_values: Dict[str, str] = {}
    if os.environ.get('SPOTCAT_ENABLE_DOTENV') or not os.environ.get('PYTEST_CURRENT_TEST'):
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
        key_path = tuple(p.lower() for p in path_parts)
        cursor[key_path[-1]] = value.strip() if key_path in _TEXT_KEYS else coerce_scalar(value)
    if overrides:
        cfg = deep_merge(cfg, overrides)

    _configure_logging(cfg.get('log_level', 'INFO'))
    return cfg


def load_typed_config(overrides: Dict[str, Any] | None = None) -> AppConfig:
    """Load configuration as typed AppConfig object."""
    return AppConfig.from_dict(load_config(overrides))


def client_from_config(cfg: AppConfig, session=None):
    """Build a :class:`~spotcat.client.Client` from typed configuration.

    An empty ``market_fallback`` disables the market substitution.
    """
    from .client import Client
    from .errors import ErrorEnvelope
    from .options import MarketPolicy

    api = cfg.api
    return Client(
        session,
        token=api.token or None,
        base_url=api.base_url,
        market_policy=MarketPolicy(fallback=api.market_fallback or None),
        error_envelope=ErrorEnvelope(**cfg.errors.to_dict()),
        timeout=api.timeout,
    )


def _configure_logging(level_str: str) -> None:
    """Configure Python logging based on configured level."""
    level_str = str(level_str).upper()
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL,
    }
    level = level_map.get(level_str, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(message)s',
        force=True
    )


def coerce_scalar(value: str) -> Any:
    txt = value.strip()
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
    if lower in {"none", "null"}:
        return None
    if txt.isdigit() or (txt.startswith("-") and txt[1:].isdigit()):
        return int(txt)
    try:
        return float(txt)
    except ValueError:
        return txt


__all__ = ["load_config", "deep_merge", "load_typed_config", "client_from_config", "coerce_scalar"]
