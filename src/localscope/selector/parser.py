# Selector tokenizer for localscope
# Turns one selector string into a Selectors tree without losing any text

from __future__ import annotations

from localscope.errors import SelectorError
from localscope.selector.model import (
    NESTED_PSEUDO_CLASSES,
    Attribute,
    ClassName,
    Element,
    IdName,
    NestedPseudoClass,
    Operator,
    Other,
    PseudoClass,
    PseudoElement,
    Selector,
    SelectorNode,
    Selectors,
    Spacing,
    Universal,
)

__all__ = ["parse", "SelectorParser"]

_WHITESPACE = " \t\n\r\f"
_COMBINATORS = ">+~"
_HEX_DIGITS = "0123456789abcdefABCDEF"


class SelectorParser:
    """Recursive-descent tokenizer producing selector nodes."""

    __slots__ = ("length", "pos", "selector")

    selector: str
    pos: int
    length: int

    def __init__(self, selector: str) -> None:
        self.selector = selector
        self.pos = 0
        self.length = len(selector)

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < self.length:
            return self.selector[pos]
        return ""

    def _read_whitespace(self) -> str:
        start = self.pos
        while self.pos < self.length and self.selector[self.pos] in _WHITESPACE:
            self.pos += 1
        return self.selector[start : self.pos]

    def _is_name_char(self, ch: str) -> bool:
        # CSS identifier character: letter, digit, hyphen, underscore, or non-ASCII
        return ch.isalnum() or ch == "_" or ch == "-" or ord(ch) > 127

    def _read_name(self) -> str:
        start = self.pos
        while self.pos < self.length:
            ch = self.selector[self.pos]
            if ch == "\\":
                self._skip_escape()
            elif self._is_name_char(ch):
                self.pos += 1
            else:
                break
        return self.selector[start : self.pos]

    def _skip_escape(self) -> None:
        # Backslash, then either up to six hex digits (plus one optional
        # whitespace character) or any single character.
        self.pos += 1
        if self.pos >= self.length:
            raise SelectorError(f"Unterminated escape in selector: {self.selector!r}")
        if self.selector[self.pos] in _HEX_DIGITS:
            digits = 0
            while digits < 6 and self._peek() and self._peek() in _HEX_DIGITS:
                self.pos += 1
                digits += 1
            if self._peek() and self._peek() in _WHITESPACE:
                self.pos += 1
        else:
            self.pos += 1

    def _skip_string(self, quote: str) -> None:
        self.pos += 1
        while self.pos < self.length:
            ch = self.selector[self.pos]
            if ch == "\\":
                self.pos += 2
                continue
            self.pos += 1
            if ch == quote:
                return
        raise SelectorError(f"Unterminated string in selector: {self.selector!r}")

    def _read_until(self, closing: str) -> str:
        """Read raw text up to the unbalanced *closing* character, quotes aware."""
        start = self.pos
        depth = 0
        while self.pos < self.length:
            ch = self.selector[self.pos]
            if ch in "\"'":
                self._skip_string(ch)
                continue
            if ch == "\\":
                self.pos += 2
                continue
            if ch in "([":
                depth += 1
            elif ch in ")]":
                if depth == 0 and ch == closing:
                    content = self.selector[start : self.pos]
                    self.pos += 1
                    return content
                depth -= 1
            self.pos += 1
        raise SelectorError(f"Expected {closing} in selector: {self.selector!r}")

    def parse(self) -> Selectors:
        result = Selectors(nodes=self._parse_selector_list())
        if self.pos < self.length:
            raise SelectorError(
                f"Unexpected {self._peek()!r} at position {self.pos} in selector: {self.selector!r}"
            )
        return result

    def _parse_selector_list(self) -> list[Selector]:
        selectors = [self._parse_selector()]
        while self._peek() == ",":
            self.pos += 1
            selectors.append(self._parse_selector())
        return selectors

    def _parse_selector(self) -> Selector:
        before = self._read_whitespace()
        after = ""
        nodes: list[SelectorNode] = []

        while self.pos < self.length:
            ch = self.selector[self.pos]

            if ch in ",)":
                break

            if ch in _WHITESPACE:
                whitespace = self._read_whitespace()
                nxt = self._peek()
                if nxt and nxt in _COMBINATORS:
                    self.pos += 1
                    nodes.append(Operator(nxt, whitespace, self._read_whitespace()))
                elif nxt == "" or nxt in ",)":
                    after = whitespace
                else:
                    nodes.append(Spacing(whitespace))
                continue

            if ch in _COMBINATORS:
                self.pos += 1
                nodes.append(Operator(ch, "", self._read_whitespace()))
                continue

            nodes.append(self._parse_simple(ch))

        return Selector(nodes=nodes, before=before, after=after)

    def _parse_simple(self, ch: str) -> SelectorNode:
        if ch == ".":
            self.pos += 1
            name = self._read_name()
            if not name:
                raise SelectorError(f"Expected identifier after . at position {self.pos}")
            return ClassName(name)

        if ch == "#":
            self.pos += 1
            name = self._read_name()
            if not name:
                raise SelectorError(f"Expected identifier after # at position {self.pos}")
            return IdName(name)

        if ch == "*":
            self.pos += 1
            return Universal()

        if ch == "[":
            self.pos += 1
            return Attribute(self._read_until("]"))

        if ch == ":":
            return self._parse_pseudo()

        if ch == "/" and self._peek(1) == "*":
            end = self.selector.find("*/", self.pos + 2)
            if end == -1:
                raise SelectorError(f"Unterminated comment in selector: {self.selector!r}")
            start, self.pos = self.pos, end + 2
            return Other(self.selector[start : self.pos])

        if self._is_name_char(ch) or ch == "\\":
            return Element(self._read_name())

        self.pos += 1
        return Other(ch)

    def _parse_pseudo(self) -> SelectorNode:
        self.pos += 1
        if self._peek() == ":":
            self.pos += 1
            name = self._read_name()
            if not name:
                raise SelectorError(f"Expected pseudo-element name at position {self.pos}")
            return PseudoElement(name)

        name = self._read_name()
        if not name:
            raise SelectorError(f"Expected pseudo-class name after : at position {self.pos}")
        if self._peek() != "(":
            return PseudoClass(name)

        self.pos += 1
        if name.lower() not in NESTED_PSEUDO_CLASSES:
            return PseudoClass(name, self._read_until(")"))

        arguments = self._parse_selector_list()
        if self._peek() != ")":
            raise SelectorError(f"Expected ) at position {self.pos} in selector: {self.selector!r}")
        self.pos += 1
        return NestedPseudoClass(name, arguments)


def parse(selector: str) -> Selectors:
    """Parse a selector string (possibly comma-separated) into a Selectors tree."""
    return SelectorParser(selector).parse()
