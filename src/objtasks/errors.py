"""Error hierarchy for objtasks."""
from __future__ import annotations

from typing import Any

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class ObjtasksError(Exception):
    """Base error for all objtasks errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(ObjtasksError):
    """A selector part was added in a way CSS does not allow."""


class DuplicateError(SelectorError):
    """Element, id or pseudo-element was added a second time."""

    def __init__(self, message: str = DUPLICATE_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class OrderError(SelectorError):
    """A selector part was added after a part that must follow it."""

    def __init__(self, message: str = ORDER_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class SerializationError(ObjtasksError):
    """A value could not be converted to or from JSON."""
