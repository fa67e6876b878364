from objtasks.selector.builder import SelectorBuilder
from objtasks.selector.facade import CssSelectorBuilder, combine, css_selector_builder
from objtasks.selector.kinds import COMBINATORS, SELECTOR_ORDER, SelectorKind
from objtasks.selector.model import SelectorParts

__all__ = [
    "SelectorBuilder",
    "SelectorParts",
    "SelectorKind",
    "SELECTOR_ORDER",
    "COMBINATORS",
    "CssSelectorBuilder",
    "css_selector_builder",
    "combine",
]
