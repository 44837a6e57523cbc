"""SelectorBuilder: accumulates selector fragments and renders them.

A compound selector has the shape::

    element#id.class[attr]:pseudo-class::pseudo-element

Class and pseudo-class may occur several times; element, id and
pseudo-element at most once. Every mutator returns the builder so calls
chain, and raises as soon as a fragment arrives out of order.
"""

from __future__ import annotations

import logging

from objectkit.errors import DuplicateFragment, OrderViolation

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Mutable accumulator for one compound selector.

    An empty string leaves its single-value slot unset: it is neither
    rendered nor counted by the duplicate and order checks.
    """

    def __init__(self) -> None:
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attr: str | None = None
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None

    # --- mutators -----------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        if self._element:
            raise DuplicateFragment("element")
        if self._id:
            raise OrderViolation("element")
        self._element = value
        logger.debug("selector element=%s", value)
        return self

    def id(self, value: str) -> SelectorBuilder:
        if self._id:
            raise DuplicateFragment("id")
        if self._classes or self._pseudo_element:
            raise OrderViolation("id")
        self._id = value
        logger.debug("selector id=%s", value)
        return self

    def class_(self, value: str) -> SelectorBuilder:
        if self._attr:
            raise OrderViolation("class")
        self._classes.append(value)
        logger.debug("selector class=%s", value)
        return self

    def attr(self, value: str) -> SelectorBuilder:
        # Single slot: a second call overwrites the first.
        if self._pseudo_classes:
            raise OrderViolation("attribute")
        self._attr = value
        logger.debug("selector attribute=%s", value)
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        if self._pseudo_element:
            raise OrderViolation("pseudo-class")
        self._pseudo_classes.append(value)
        logger.debug("selector pseudo-class=%s", value)
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        if self._pseudo_element:
            raise DuplicateFragment("pseudo-element")
        self._pseudo_element = value
        logger.debug("selector pseudo-element=%s", value)
        return self

    # --- rendering ----------------------------------------------------------

    def render(self) -> str:
        """Return the selector string.

        The attribute is rendered before the classes even though the
        mutators accept classes first.
        """
        parts: list[str] = []
        if self._element:
            parts.append(self._element)
        if self._id:
            parts.append(f"#{self._id}")
        if self._attr:
            parts.append(f"[{self._attr}]")
        parts.extend(f".{cls}" for cls in self._classes)
        parts.extend(f":{pc}" for pc in self._pseudo_classes)
        if self._pseudo_element:
            parts.append(f"::{self._pseudo_element}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"
