"""Fluent builder for CSS selector strings.

A compound selector is built from up to six kinds of parts which must
appear in this order::

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              can be several occurrences

Two selectors are joined with a combinator (``' '``, ``'+'``, ``'~'`` or
``'>'``) through :meth:`SelectorBuilder.combine`.
"""

from __future__ import annotations

import logging

from objtasks.errors import DuplicateError, OrderError
from objtasks.selector.kinds import SelectorKind
from objtasks.selector.model import SelectorParts

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments and renders them with :meth:`stringify`.

    Every ``with_*`` method returns the builder itself so calls can be
    chained. The short names (``element``, ``id``, ``class_``, ``attr``,
    ``pseudo_class``, ``pseudo_element``) are aliases for the same methods.

    Raises:
        DuplicateError: element, id or pseudo-element added twice.
        OrderError: a part added after a part that must follow it.
    """

    def __init__(self) -> None:
        self.parts = SelectorParts()
        self.combination: list[str] | None = None
        # Position of the last kind added. No part may go before it, so a
        # repeatable kind cannot come back later (".a[b].c" is rejected).
        self._last_position = -1

    # --- compound selector parts ----------------------------------------------

    def with_element(self, value: str) -> SelectorBuilder:
        return self._add(SelectorKind.ELEMENT, value)

    def with_id(self, value: str) -> SelectorBuilder:
        return self._add(SelectorKind.ID, f"#{value}")

    def with_class(self, value: str) -> SelectorBuilder:
        return self._add(SelectorKind.CLASS, f".{value}")

    def with_attr(self, value: str) -> SelectorBuilder:
        return self._add(SelectorKind.ATTRIBUTE, f"[{value}]")

    def with_pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(SelectorKind.PSEUDO_CLASS, f":{value}")

    def with_pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(SelectorKind.PSEUDO_ELEMENT, f"::{value}")

    element = with_element
    id = with_id
    class_ = with_class
    attr = with_attr
    pseudo_class = with_pseudo_class
    pseudo_element = with_pseudo_element

    def _add(self, kind: SelectorKind, fragment: str) -> SelectorBuilder:
        if kind.is_singleton and self.parts.has(kind):
            logger.debug("Rejected duplicate %s fragment %r", kind, fragment)
            raise DuplicateError()
        if kind.position < self._last_position:
            logger.debug("Rejected out-of-order %s fragment %r", kind, fragment)
            raise OrderError()
        self.parts.add(kind, fragment)
        self._last_position = kind.position
        return self

    # --- combination ----------------------------------------------------------

    def combine(
        self, sel1: SelectorBuilder, combinator: str, sel2: SelectorBuilder
    ) -> SelectorBuilder:
        """Join *sel1* and *sel2* with *combinator* and store the result.

        Each side is rendered through :meth:`fragments`, so either side may
        itself be a combination. Calling this again on the same builder
        appends to the stored combination.
        """
        joined = [*sel1.fragments(), f" {combinator} ", *sel2.fragments()]
        if self.combination is None:
            self.combination = joined
        else:
            self.combination.extend(joined)
        logger.debug("Combined selectors with %r", combinator)
        return self

    # --- rendering ------------------------------------------------------------

    def fragments(self) -> list[str]:
        """Return the fragments :meth:`stringify` concatenates."""
        if self.combination is not None:
            return list(self.combination)
        return self.parts.fragments()

    def stringify(self) -> str:
        return "".join(self.fragments())

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
