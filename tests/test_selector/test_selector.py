"""Tests for the selector tokenizer and serializer."""

import pytest

from localscope.errors import SelectorError
from localscope.selector import (
    Attribute,
    ClassName,
    Element,
    IdName,
    NestedPseudoClass,
    Operator,
    PseudoClass,
    PseudoElement,
    Selector,
    Spacing,
    Universal,
    parse,
    stringify,
)


# ---------------------------------------------------------------------------
# Node structure
# ---------------------------------------------------------------------------


class TestSimpleSelectors:
    def test_class(self):
        sel = parse(".foo")
        assert sel.nodes == [Selector(nodes=[ClassName("foo")])]

    def test_id(self):
        sel = parse("#main")
        assert sel.nodes[0].nodes == [IdName("main")]

    def test_compound(self):
        sel = parse("div.foo#bar")
        assert sel.nodes[0].nodes == [Element("div"), ClassName("foo"), IdName("bar")]

    def test_universal_and_attribute(self):
        sel = parse('*[type="radio"]')
        assert sel.nodes[0].nodes == [Universal(), Attribute('type="radio"')]

    def test_escaped_class_name(self):
        sel = parse(r".sm\:block")
        assert sel.nodes[0].nodes == [ClassName(r"sm\:block")]

    def test_empty_class_name_raises(self):
        with pytest.raises(SelectorError):
            parse(". foo")


class TestCombinators:
    def test_descendant_is_spacing(self):
        sel = parse(".a  .b")
        assert sel.nodes[0].nodes == [ClassName("a"), Spacing("  "), ClassName("b")]

    def test_child_operator_keeps_whitespace(self):
        sel = parse(".a > .b")
        assert sel.nodes[0].nodes == [
            ClassName("a"),
            Operator(">", " ", " "),
            ClassName("b"),
        ]

    def test_operator_without_whitespace(self):
        sel = parse(".a+.b")
        assert sel.nodes[0].nodes[1] == Operator("+", "", "")

    def test_comma_whitespace_on_selector(self):
        sel = parse(" .a , .b ")
        assert sel.nodes[0] == Selector(nodes=[ClassName("a")], before=" ", after=" ")
        assert sel.nodes[1] == Selector(nodes=[ClassName("b")], before=" ", after=" ")


class TestPseudo:
    def test_bare_pseudo_class(self):
        assert parse("a:hover").nodes[0].nodes == [Element("a"), PseudoClass("hover")]

    def test_pseudo_element(self):
        assert parse(".a::before").nodes[0].nodes[1] == PseudoElement("before")

    def test_raw_argument_kept(self):
        node = parse("li:nth-child(2n + 1)").nodes[0].nodes[1]
        assert node == PseudoClass("nth-child", "2n + 1")

    def test_import_argument_kept(self):
        node = parse(':import("~/lol.css")').nodes[0].nodes[0]
        assert node == PseudoClass("import", '"~/lol.css"')

    def test_nested_selector_argument(self):
        node = parse(":not(.a, .b)").nodes[0].nodes[0]
        assert isinstance(node, NestedPseudoClass)
        assert node.name == "not"
        assert [n.nodes for n in node.nodes] == [[ClassName("a")], [ClassName("b")]]

    def test_marker_argument_whitespace(self):
        node = parse(":local( .a )").nodes[0].nodes[0]
        assert node == NestedPseudoClass(
            "local", [Selector(nodes=[ClassName("a")], before=" ", after=" ")]
        )

    def test_bare_markers_are_pseudo_classes(self):
        nodes = parse(":global .a").nodes[0].nodes
        assert nodes == [PseudoClass("global"), Spacing(" "), ClassName("a")]

    def test_unclosed_nested_raises(self):
        with pytest.raises(SelectorError):
            parse(":not(.a")

    def test_unbalanced_paren_raises(self):
        with pytest.raises(SelectorError):
            parse(".a)")


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    [
        ".foo",
        ".foo, .bar",
        " .foo ,.bar ",
        ".a > .b ~ .c + .d .e",
        'input[type="radio"]:checked + label::after',
        ":not(.a, .b):is(.c)",
        ":local( .a ).b :global(.c .d)",
        "li:nth-child(2n+1)",
        ".a /* note */ .b",
        "& > .child",
        r"#\31 23",
    ],
)
def test_round_trip(text):
    assert stringify(parse(text)) == text
