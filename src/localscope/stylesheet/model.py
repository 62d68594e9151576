"""Stylesheet model: Root, Rule, AtRule and Declaration dataclasses.

Every node keeps the raw text around it (``before``, ``between``,
``after``...) so that an unmodified tree serializes back to exactly the
source it was parsed from.  Defaults are the formatting used for nodes
created programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class SourceSpan:
    """Where a node came from: 1-based line/column plus character offsets."""

    line: int
    column: int
    start: int
    end: int


@dataclass
class Declaration:
    """A ``prop: value;`` pair."""

    prop: str
    value: str
    before: str = "\n  "
    between: str = ": "
    trailing: str = ""
    semicolon: bool = True
    source: SourceSpan | None = None


@dataclass
class Rule:
    """A qualified rule: ``selector { ... }``."""

    selector: str
    nodes: list[Node] = field(default_factory=list)
    before: str = "\n"
    between: str = " "
    after: str = "\n"
    source: SourceSpan | None = None

    def append(self, node: Node) -> None:
        self.nodes.append(node)

    def remove(self, node: Node) -> None:
        self.nodes = [n for n in self.nodes if n is not node]


@dataclass
class AtRule:
    """An at-rule; ``nodes`` is None for statement at-rules such as ``@import``."""

    name: str
    params: str = ""
    nodes: list[Node] | None = None
    before: str = "\n"
    after_name: str = " "
    between: str = ""
    after: str = ""
    semicolon: bool = False
    source: SourceSpan | None = None


@dataclass
class Root:
    """A parsed stylesheet."""

    nodes: list[Node] = field(default_factory=list)
    after: str = ""

    def prepend(self, node: Node) -> None:
        if self.nodes:
            first = self.nodes[0]
            node.before = first.before
            if "\n" not in first.before:
                first.before = "\n" + first.before
        else:
            node.before = ""
        self.nodes.insert(0, node)


Node = Union[Rule, AtRule, Declaration]
