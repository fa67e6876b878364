"""JSON conversion helpers.

``get_json`` renders values the way ``JSON.stringify`` does: compact, no
whitespace between tokens, non-ASCII kept as-is. ``from_json`` rebuilds an
instance of a given class from a JSON object without running its
``__init__``, so the result carries the class's methods and the parsed data.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objtasks.config import ObjtasksConfig
from objtasks.errors import SerializationError

__all__ = ["get_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMPACT_SEPARATORS = (",", ":")


def _encode_object(obj: Any) -> Any:
    """Fallback encoder for values the json module does not know."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return {
            key: value
            for key, value in vars(obj).items()
            if not key.startswith("_") and not callable(value)
        }
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, config: ObjtasksConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Raises:
        SerializationError: *obj* holds a value with no JSON form.
    """
    cfg = config or ObjtasksConfig()
    separators = _COMPACT_SEPARATORS if cfg.json_indent is None else None
    try:
        return json.dumps(
            obj,
            default=_encode_object,
            ensure_ascii=False,
            indent=cfg.json_indent,
            separators=separators,
            sort_keys=cfg.json_sort_keys,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialize value: {exc}", cause=exc) from exc


def from_json(cls: type[T], text: str) -> T:
    """Return an instance of *cls* populated from the JSON object in *text*.

    The instance is created with ``cls.__new__`` and every key of the parsed
    object becomes an attribute.

    Raises:
        SerializationError: *text* is not valid JSON, is not a JSON object,
            or a key cannot be assigned on *cls*.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    instance = cls.__new__(cls)
    for key, value in data.items():
        try:
            # object.__setattr__ also fills frozen dataclasses
            object.__setattr__(instance, key, value)
        except AttributeError as exc:
            raise SerializationError(
                f"Cannot set attribute {key!r} on {cls.__name__}", cause=exc
            ) from exc
    logger.debug("Restored %s with keys %s", cls.__name__, list(data))
    return instance
