"""Lark Transformer that converts a stylesheet parse tree into Root/Rule/AtRule nodes."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from localscope.errors import ParseError
from localscope.stylesheet.model import AtRule, Declaration, Node, Root, Rule, SourceSpan

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@dataclass
class _Block:
    """Intermediate result of a ``{ ... }`` body."""

    nodes: list[Node]
    after: str
    start: int
    end: int


def _span(token: Token, end: int) -> SourceSpan:
    return SourceSpan(
        line=token.line, column=token.column, start=token.start_pos, end=end
    )


def _split_trailing(text: str) -> tuple[str, str]:
    """Split raw prelude text into (content, trailing whitespace)."""
    content = text.rstrip()
    return content, text[len(content) :]


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into stylesheet nodes with raw whitespace.

    Whitespace and comments are ignored by the lexer, so the text between
    two sibling nodes is recovered from the source by offset and stored as
    the later node's ``before``.
    """

    def __init__(self, source: str) -> None:
        super().__init__()
        self._source = source

    def _attach(self, items: list[object], start: int, end: int) -> tuple[list[Node], str]:
        # Stray semicolons stay as SEMICOLON tokens; their text ends up in
        # the raws of the following node.
        nodes = [item for item in items if not isinstance(item, Token)]
        cursor = start
        for node in nodes:
            assert node.source is not None
            node.before = self._source[cursor : node.source.start]
            cursor = node.source.end
        return nodes, self._source[cursor:end]

    def declaration(self, items: list[Token]) -> Declaration:
        prelude = items[0]
        semicolon = items[1] if len(items) > 1 else None
        body, trailing = _split_trailing(str(prelude))
        prop, sep, rest = body.partition(":")
        if sep:
            name = prop.rstrip()
            value = rest.lstrip()
            between = prop[len(name) :] + sep + rest[: len(rest) - len(value)]
        else:
            name, between, value = body, "", ""
        end = semicolon.end_pos if semicolon is not None else prelude.end_pos
        return Declaration(
            prop=name,
            value=value,
            between=between,
            trailing=trailing,
            semicolon=semicolon is not None,
            source=_span(prelude, end),
        )

    def block(self, items: list[object]) -> _Block:
        lbrace, *children, rbrace = items
        assert isinstance(lbrace, Token) and isinstance(rbrace, Token)
        nodes, after = self._attach(children, lbrace.end_pos, rbrace.start_pos)
        return _Block(nodes, after, lbrace.start_pos, rbrace.end_pos)

    def rule(self, items: list[object]) -> Rule:
        prelude, block = items
        assert isinstance(prelude, Token) and isinstance(block, _Block)
        selector, between = _split_trailing(str(prelude))
        between += self._source[prelude.end_pos : block.start]
        return Rule(
            selector=selector,
            nodes=block.nodes,
            between=between,
            after=block.after,
            source=_span(prelude, block.end),
        )

    def at_rule(self, items: list[object]) -> AtRule:
        keyword = items[0]
        assert isinstance(keyword, Token)
        params_token: Token | None = None
        block: _Block | None = None
        semicolon: Token | None = None
        for item in items[1:]:
            if isinstance(item, _Block):
                block = item
            elif isinstance(item, Token) and item.type == "SEMICOLON":
                semicolon = item
            elif isinstance(item, Token):
                params_token = item

        params, between, after_name = "", "", ""
        cursor = keyword.end_pos
        if params_token is not None:
            after_name = self._source[keyword.end_pos : params_token.start_pos]
            params, between = _split_trailing(str(params_token))
            cursor = params_token.end_pos

        if block is not None:
            tail, end = block.start, block.end
        elif semicolon is not None:
            tail, end = semicolon.start_pos, semicolon.end_pos
        else:
            tail = end = cursor
        between += self._source[cursor:tail]

        return AtRule(
            name=str(keyword)[1:],
            params=params,
            nodes=block.nodes if block is not None else None,
            after_name=after_name,
            between=between,
            after=block.after if block is not None else "",
            semicolon=semicolon is not None,
            source=_span(keyword, end),
        )

    def start(self, items: list[object]) -> Root:
        nodes, after = self._attach(items, 0, len(self._source))
        return Root(nodes=nodes, after=after)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_stylesheet(source: str) -> Root:
    """Parse stylesheet source text into a Root node.

    ``stringify(parse_stylesheet(source)) == source`` for any source the
    grammar accepts.
    """
    try:
        tree = _parser().parse(source)
    except Exception as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return StylesheetTransformer(source).transform(tree)
