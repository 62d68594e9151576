"""Tests for the stylesheet parser and serializer."""

import pytest

from localscope.errors import ParseError
from localscope.stylesheet import (
    AtRule,
    Declaration,
    Root,
    Rule,
    parse_stylesheet,
    stringify,
)


# ---------------------------------------------------------------------------
# Node structure
# ---------------------------------------------------------------------------


class TestRules:
    def test_single_rule(self):
        root = parse_stylesheet(".foo { color: red; }")
        assert len(root.nodes) == 1
        rule = root.nodes[0]
        assert isinstance(rule, Rule)
        assert rule.selector == ".foo"
        assert rule.between == " "

    def test_declaration(self):
        rule = parse_stylesheet(".foo { color : red ; }").nodes[0]
        decl = rule.nodes[0]
        assert isinstance(decl, Declaration)
        assert decl.prop == "color"
        assert decl.value == "red"
        assert decl.between == " : "
        assert decl.trailing == " "
        assert decl.semicolon is True

    def test_last_declaration_without_semicolon(self):
        decl = parse_stylesheet("a{color:red}").nodes[0].nodes[0]
        assert decl.value == "red"
        assert decl.semicolon is False

    def test_selector_list_is_raw(self):
        rule = parse_stylesheet(":global .a, .b > .c {}").nodes[0]
        assert rule.selector == ":global .a, .b > .c"

    def test_nested_rule(self):
        outer = parse_stylesheet(".a { .b {} }").nodes[0]
        assert isinstance(outer.nodes[0], Rule)
        assert outer.nodes[0].selector == ".b"

    def test_source_position(self):
        root = parse_stylesheet("\n\n  .foo {}")
        assert root.nodes[0].source.line == 3
        assert root.nodes[0].source.column == 3

    def test_value_with_semicolon_in_url(self):
        decl = parse_stylesheet(".a { background: url(data:image/png;base64,AAA); }").nodes[0].nodes[0]
        assert decl.value == "url(data:image/png;base64,AAA)"


class TestAtRules:
    def test_block_at_rule(self):
        at = parse_stylesheet("@media only screen { .foo {} }").nodes[0]
        assert isinstance(at, AtRule)
        assert at.name == "media"
        assert at.params == "only screen"
        assert isinstance(at.nodes[0], Rule)

    def test_statement_at_rule(self):
        at = parse_stylesheet('@charset "utf-8";').nodes[0]
        assert at.name == "charset"
        assert at.params == '"utf-8"'
        assert at.nodes is None
        assert at.semicolon is True

    def test_keyframes(self):
        at = parse_stylesheet("@keyframes spin { from {} to {} }").nodes[0]
        assert at.name == "keyframes"
        assert [r.selector for r in at.nodes] == ["from", "to"]

    def test_at_rule_without_params(self):
        at = parse_stylesheet("@font-face { font-family: x; }").nodes[0]
        assert at.params == ""
        assert at.nodes[0].prop == "font-family"


class TestEmptyStylesheet:
    def test_empty_string(self):
        root = parse_stylesheet("")
        assert root.nodes == []

    def test_whitespace_only(self):
        root = parse_stylesheet("   \n\t  ")
        assert root.nodes == []
        assert root.after == "   \n\t  "


class TestErrors:
    def test_unclosed_block(self):
        with pytest.raises(ParseError):
            parse_stylesheet(".a {")

    def test_stray_closing_brace(self):
        with pytest.raises(ParseError) as info:
            parse_stylesheet(".a {}\n}")
        assert info.value.line == 2


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "source",
    [
        ".foobar {}",
        ".foo, .baz {}\n",
        "/* header */\n.a {\n  color: red;\n  margin : 0 ;\n}\n",
        ".a { color: red; /* trailing */ }",
        "a{color:red}b{color:blue;;}",
        "@media only screen { .foo {} }",
        "@keyframes foo { from {} to {} }",
        '@charset "utf-8";\n@import url("a.css") screen;',
        ':import("~/lol.css") { foo: __foo; }',
        ":export { foo: __foo; }",
        ".a {\n  .b { color: red }\n}",
        ".a { content: \"{;}\"; }",
    ],
)
def test_round_trip(source):
    assert stringify(parse_stylesheet(source)) == source


class TestBuiltNodes:
    def test_new_rule_formatting(self):
        rule = Rule(selector=":export")
        rule.append(Declaration(prop="foo", value="_x__foo"))
        assert stringify(rule) == ":export {\n  foo: _x__foo;\n}"

    def test_prepend_moves_first_node_down(self):
        root = parse_stylesheet(".a {}")
        root.prepend(Rule(selector=":export"))
        assert stringify(root) == ":export {\n}\n.a {}"

    def test_prepend_to_empty_root(self):
        root = Root()
        root.prepend(Rule(selector=".a", after=""))
        assert stringify(root) == ".a {}"
