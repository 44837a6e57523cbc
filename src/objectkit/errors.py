"""Error hierarchy for the selector builder."""
from __future__ import annotations

ONLY_ONE_TIME = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
INCORRECT_ORDER = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all objectkit selector errors."""

    def __init__(self, message: str, *, fragment: str | None = None) -> None:
        super().__init__(message)
        self.fragment = fragment


class DuplicateFragment(SelectorError):
    """A single-occurrence fragment (element, id, pseudo-element) was set twice."""

    def __init__(self, fragment: str) -> None:
        super().__init__(ONLY_ONE_TIME, fragment=fragment)


class OrderViolation(SelectorError):
    """A fragment was added after a fragment of a later category."""

    def __init__(self, fragment: str) -> None:
        super().__init__(INCORRECT_ORDER, fragment=fragment)


class InvalidCombinator(SelectorError):
    """Combinator symbol is not one of ' ', '+', '~', '>'."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid combinator: {symbol!r}", fragment="combinator")
        self.symbol = symbol


class SelectorSyntaxError(SelectorError):
    """Raised when selector text cannot be tokenized."""

    def __init__(self, message: str, column: int | None = None) -> None:
        self.column = column
        super().__init__(message)
