from objectkit.selector.builder import SelectorBuilder
from objectkit.selector.combinator import COMBINATORS, Combinator, Renderable, combine
from objectkit.selector.facade import SelectorFacade, css_selector_builder
from objectkit.selector.parser import parse_selector

__all__ = [
    "COMBINATORS",
    "Combinator",
    "Renderable",
    "SelectorBuilder",
    "SelectorFacade",
    "combine",
    "css_selector_builder",
    "parse_selector",
]
