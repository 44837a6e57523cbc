"""Combinator: joins two renderable selectors with a combinator symbol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from objectkit.errors import InvalidCombinator

__all__ = ["COMBINATORS", "Combinator", "Renderable", "combine"]

# descendant, adjacent sibling, general sibling, child
COMBINATORS = (" ", "+", "~", ">")


class Renderable(Protocol):
    """Anything that renders to a selector string."""

    def render(self) -> str: ...


@dataclass(frozen=True)
class Combinator:
    """Composite of two renderables and a combinator symbol."""

    left: Renderable
    symbol: str
    right: Renderable

    def __post_init__(self) -> None:
        if self.symbol not in COMBINATORS:
            raise InvalidCombinator(self.symbol)

    def render(self) -> str:
        # The descendant symbol is itself a space, so it renders as three.
        return f"{self.left.render()} {self.symbol} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()


def combine(left: Renderable, symbol: str, right: Renderable) -> Combinator:
    return Combinator(left=left, symbol=symbol, right=right)
