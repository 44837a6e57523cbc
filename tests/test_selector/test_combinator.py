"""Tests for Combinator and combine()."""

import pytest

from objectkit.errors import InvalidCombinator
from objectkit.selector import COMBINATORS, Combinator, css_selector_builder as builder


class TestCombine:
    def test_adjacent_sibling(self):
        result = builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).render()
        assert result == "div#main + table#data"

    def test_child(self):
        result = builder.combine(builder.element("ul"), ">", builder.element("li")).render()
        assert result == "ul > li"

    def test_general_sibling(self):
        result = builder.combine(builder.id("a"), "~", builder.class_("b")).render()
        assert result == "#a ~ .b"

    def test_descendant_renders_three_spaces(self):
        result = builder.combine(builder.element("div"), " ", builder.element("p")).render()
        assert result == "div   p"

    def test_nested(self):
        result = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        ).render()
        assert result == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_left_nested(self):
        inner = builder.combine(builder.element("a"), ">", builder.element("b"))
        outer = builder.combine(inner, "+", builder.element("c"))
        assert outer.render() == "a > b + c"

    def test_render_is_idempotent(self):
        c = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert c.render() == c.render()


class TestCombinatorModel:
    def test_all_symbols_accepted(self):
        for symbol in COMBINATORS:
            Combinator(builder.element("a"), symbol, builder.element("b"))

    def test_invalid_symbol(self):
        with pytest.raises(InvalidCombinator) as exc_info:
            builder.combine(builder.element("a"), "|", builder.element("b"))
        assert exc_info.value.symbol == "|"

    def test_is_frozen(self):
        c = builder.combine(builder.element("a"), ">", builder.element("b"))
        with pytest.raises(AttributeError):
            c.symbol = "+"  # type: ignore[misc]

    def test_str_matches_render(self):
        c = builder.combine(builder.element("a"), "~", builder.element("b"))
        assert str(c) == "a ~ b"
