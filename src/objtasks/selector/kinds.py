"""Selector kinds and the order they must appear in."""

from __future__ import annotations

from enum import StrEnum


class SelectorKind(StrEnum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def position(self) -> int:
        """Index of this kind in :data:`SELECTOR_ORDER`."""
        return SELECTOR_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        """True for kinds allowed at most once per selector."""
        return self in _SINGLETON_KINDS


# element#id.class[attr]:pseudoClass::pseudoElement
SELECTOR_ORDER: tuple[SelectorKind, ...] = tuple(SelectorKind)

_SINGLETON_KINDS = frozenset({
    SelectorKind.ELEMENT,
    SelectorKind.ID,
    SelectorKind.PSEUDO_ELEMENT,
})

# Relational tokens accepted between two selectors.
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")
