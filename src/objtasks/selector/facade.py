"""Entry points that start a new :class:`SelectorBuilder` per call."""

from __future__ import annotations

from objtasks.selector.builder import SelectorBuilder

__all__ = ["CssSelectorBuilder", "css_selector_builder", "combine"]


class CssSelectorBuilder:
    """Factory facade: each method returns a fresh builder with one part set.

    Example:
        >>> b = css_selector_builder
        >>> b.id("main").class_("container").class_("editable").stringify()
        '#main.container.editable'
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_class(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().with_pseudo_element(value)

    def combine(
        self, sel1: SelectorBuilder, combinator: str, sel2: SelectorBuilder
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(sel1, combinator, sel2)


css_selector_builder = CssSelectorBuilder()

combine = css_selector_builder.combine
