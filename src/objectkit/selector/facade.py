"""Facade entry points: each call starts a fresh SelectorBuilder."""

from __future__ import annotations

from objectkit.selector.builder import SelectorBuilder
from objectkit.selector.combinator import Combinator, Renderable, combine as _combine

__all__ = [
    "SelectorFacade",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


class SelectorFacade:
    """Namespace of builder entry points.

    Example::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").render()
        # => '#main.container.editable'
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(self, left: Renderable, symbol: str, right: Renderable) -> Combinator:
        return _combine(left, symbol, right)


css_selector_builder = SelectorFacade()

element = css_selector_builder.element
id = css_selector_builder.id  # noqa: A001
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
