"""objtasks: rectangle value object, JSON helpers and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objtasks.config import ObjtasksConfig
from objtasks.errors import (
    DuplicateError,
    ObjtasksError,
    OrderError,
    SelectorError,
    SerializationError,
)
from objtasks.model import Rectangle
from objtasks.selector import (
    COMBINATORS,
    CssSelectorBuilder,
    SelectorBuilder,
    SelectorKind,
    css_selector_builder,
)
from objtasks.serialization import from_json, get_json

__all__ = [
    "__version__",
    # config
    "ObjtasksConfig",
    # errors
    "ObjtasksError",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "SerializationError",
    # model
    "Rectangle",
    # serialization
    "get_json",
    "from_json",
    # selector
    "SelectorBuilder",
    "SelectorKind",
    "COMBINATORS",
    "CssSelectorBuilder",
    "css_selector_builder",
]
