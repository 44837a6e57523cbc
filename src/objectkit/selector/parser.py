"""Hand-written parser that reads selector text back into builders.

Syntax example:
    div#main.container + table#data ~ tr:nth-of-type(even)   td

Fragments are replayed through SelectorBuilder in source order, so text
that breaks the ordering or uniqueness rules raises the same errors as
the chained API.
"""

from __future__ import annotations

import logging
import re

from objectkit.errors import SelectorSyntaxError
from objectkit.selector.builder import SelectorBuilder
from objectkit.selector.combinator import Renderable, combine

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

# One token per match; the group name tells which kind was read.
# Pseudo-class and pseudo-element arguments are scanned by _scan_arguments.
_TOKEN_RE = re.compile(
    r"""
    (?P<combinator>\s*[>+~]\s*)                          # child / sibling
  | (?P<descendant>\s+)                                  # descendant
  | (?P<pseudo_element>::[-\w]+)
  | (?P<pseudo_class>:[-\w]+)
  | (?P<id>\#[-\w]+)
  | (?P<class_>\.[-\w]+)
  | (?P<attr>\[(?:"[^"]*"|'[^']*'|[^\]"'])+\])
  | (?P<element>\*|[A-Za-z][-\w]*)
    """,
    re.VERBOSE,
)


def _scan_arguments(source: str, start: int, offset: int) -> int:
    """Return the index just past the balanced ``(...)`` starting at *start*.

    Parentheses inside quoted strings do not count.
    """
    depth = 0
    quote: str | None = None
    for pos in range(start, len(source)):
        char = source[pos]
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return pos + 1
    column = start + offset
    raise SelectorSyntaxError(f"Unbalanced '(' at column {column}", column=column)


def _fragment_value(kind: str, token: str) -> str:
    if kind == "element":
        return token
    if kind == "pseudo_element":
        return token[2:]
    if kind == "attr":
        return token[1:-1]
    return token[1:]


def parse_selector(text: str) -> Renderable:
    """Parse selector text into a SelectorBuilder or a Combinator tree.

    Compounds are folded left to right, so ``a > b + c`` becomes
    ``combine(combine(a, '>', b), '+', c)``.
    """
    source = text.strip()
    offset = len(text) - len(text.lstrip())
    if not source:
        raise SelectorSyntaxError("Empty selector", column=offset)

    result: Renderable | None = None
    current: SelectorBuilder | None = None
    symbol: str | None = None
    compounds = 0
    pos = 0

    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            column = pos + offset
            raise SelectorSyntaxError(
                f"Unexpected {source[pos]!r} at column {column}", column=column
            )
        kind = match.lastgroup or ""
        end = match.end()
        if kind in ("pseudo_class", "pseudo_element") and source.startswith("(", end):
            end = _scan_arguments(source, end, offset)
        token = source[pos:end]

        if kind in ("combinator", "descendant"):
            if current is None:
                column = pos + offset
                raise SelectorSyntaxError(
                    f"Combinator without a selector before it at column {column}",
                    column=column,
                )
            result = current if result is None else combine(result, symbol or " ", current)
            compounds += 1
            current = None
            symbol = token.strip() or " "
        else:
            if current is None:
                current = SelectorBuilder()
            getattr(current, kind)(_fragment_value(kind, token))
        pos = end

    if current is None:
        raise SelectorSyntaxError(
            "Selector ends with a combinator", column=len(source) + offset
        )
    result = current if result is None else combine(result, symbol or " ", current)
    compounds += 1
    logger.debug("parsed selector %r into %d compound(s)", source, compounds)
    return result
