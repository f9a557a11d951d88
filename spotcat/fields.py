"""Field accessors used by the JSON decoders.

Each accessor either returns a value of the expected type or raises
:class:`~spotcat.errors.DecodeError` naming the offending key.
"""
from __future__ import annotations
from typing import Any, Callable, List, Mapping, Tuple, TypeVar

from .errors import DecodeError

T = TypeVar("T")


def _type_name(tp: Any) -> str:
    if isinstance(tp, tuple):
        return " or ".join(t.__name__ for t in tp)
    return tp.__name__


def _check(key: str, value: Any, tp: Any) -> Any:
    # bool is an int subclass; a JSON true/false is never a count
    if tp is int and isinstance(value, bool):
        raise DecodeError(f"field '{key}': expected int, got bool")
    if not isinstance(value, tp):
        raise DecodeError(f"field '{key}': expected {_type_name(tp)}, got {type(value).__name__}")
    return value


def as_object(value: Any, what: str = "body") -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{what}: expected JSON object, got {type(value).__name__}")
    return value


def required(data: Mapping[str, Any], key: str, tp: Any) -> Any:
    """Value at ``key``; must be present, non-null and of type ``tp``."""
    if key not in data or data[key] is None:
        raise DecodeError(f"missing required field '{key}'")
    return _check(key, data[key], tp)


def optional(data: Mapping[str, Any], key: str, tp: Any, default: Any = None) -> Any:
    """Value at ``key`` or ``default`` when absent or null."""
    value = data.get(key)
    if value is None:
        return default
    return _check(key, value, tp)


def optional_list(data: Mapping[str, Any], key: str, decode: Callable[[Any], T]) -> Tuple[T, ...]:
    """Decode each element of an optional JSON array, keeping order."""
    raw = optional(data, key, list, [])
    return tuple(decode(item) for item in raw)


def string_list(data: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    raw: List[Any] = optional(data, key, list, [])
    return tuple(_check(key, item, str) for item in raw)


def optional_object(data: Mapping[str, Any], key: str, decode: Callable[[Any], T]) -> T | None:
    value = optional(data, key, dict)
    return decode(value) if value is not None else None


__all__ = [
    "as_object",
    "required",
    "optional",
    "optional_list",
    "string_list",
    "optional_object",
]
