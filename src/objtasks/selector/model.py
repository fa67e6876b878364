"""Selector parts record: one slot per selector kind."""

from __future__ import annotations

from dataclasses import dataclass, field

from objtasks.selector.kinds import SelectorKind


@dataclass
class SelectorParts:
    """Rendered fragments of a single compound selector.

    Singleton kinds hold one fragment or ``None``; repeatable kinds hold
    fragments in insertion order.
    """

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None

    def has(self, kind: SelectorKind) -> bool:
        """Return True if at least one fragment of *kind* is present."""
        return bool(self.get(kind))

    def get(self, kind: SelectorKind) -> list[str]:
        """Return the fragments stored for *kind*."""
        if kind is SelectorKind.ELEMENT:
            return [self.element] if self.element is not None else []
        if kind is SelectorKind.ID:
            return [self.id] if self.id is not None else []
        if kind is SelectorKind.CLASS:
            return list(self.classes)
        if kind is SelectorKind.ATTRIBUTE:
            return list(self.attributes)
        if kind is SelectorKind.PSEUDO_CLASS:
            return list(self.pseudo_classes)
        if kind is SelectorKind.PSEUDO_ELEMENT:
            return [self.pseudo_element] if self.pseudo_element is not None else []
        raise ValueError(f"Unknown selector kind: {kind!r}")

    def add(self, kind: SelectorKind, fragment: str) -> None:
        """Store *fragment* under *kind*, replacing a singleton slot."""
        if kind is SelectorKind.ELEMENT:
            self.element = fragment
        elif kind is SelectorKind.ID:
            self.id = fragment
        elif kind is SelectorKind.CLASS:
            self.classes.append(fragment)
        elif kind is SelectorKind.ATTRIBUTE:
            self.attributes.append(fragment)
        elif kind is SelectorKind.PSEUDO_CLASS:
            self.pseudo_classes.append(fragment)
        elif kind is SelectorKind.PSEUDO_ELEMENT:
            self.pseudo_element = fragment
        else:
            raise ValueError(f"Unknown selector kind: {kind!r}")

    def fragments(self) -> list[str]:
        """Return all fragments in selector order."""
        result: list[str] = []
        for kind in SelectorKind:
            result.extend(self.get(kind))
        return result
