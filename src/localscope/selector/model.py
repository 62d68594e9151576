"""Selector node model: one dataclass per selector construct.

The tree mirrors the layout of a selector string so that it can be
serialized back byte-for-byte:

    .foo > :not(.bar), #baz

    Selectors
      Selector  [ClassName(foo), Operator(>), NestedPseudoClass(not, ...)]
      Selector  [IdName(baz)]   before=" "

Whitespace around commas is kept on the owning ``Selector`` (``before`` /
``after``), whitespace around ``>``, ``+`` and ``~`` on the ``Operator``,
and every other run of whitespace is a ``Spacing`` node (the descendant
combinator).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Spacing:
    """Whitespace between two compound selectors."""

    value: str


@dataclass(frozen=True)
class Operator:
    """An explicit combinator: ``>``, ``+`` or ``~``."""

    operator: str
    before: str = ""
    after: str = ""


@dataclass(frozen=True)
class ClassName:
    """A class selector (``.name``); ``name`` is kept exactly as written."""

    name: str


@dataclass(frozen=True)
class IdName:
    """An id selector (``#name``)."""

    name: str


@dataclass(frozen=True)
class Element:
    name: str


@dataclass(frozen=True)
class Universal:
    pass


@dataclass(frozen=True)
class Attribute:
    """An attribute selector; ``content`` is the raw text between brackets."""

    content: str


@dataclass(frozen=True)
class PseudoElement:
    name: str


@dataclass(frozen=True)
class PseudoClass:
    """A pseudo-class, optionally with a raw (non-selector) argument.

    ``:hover`` has ``content=None``; ``:nth-child(2n+1)`` keeps ``2n+1``
    verbatim in ``content``.
    """

    name: str
    content: str | None = None


@dataclass(frozen=True)
class Other:
    """Any other raw text (nesting ``&``, comments, stray characters)."""

    value: str


@dataclass(frozen=True)
class Selector:
    """One comma-separated alternative: an ordered sequence of nodes."""

    nodes: list[SelectorNode] = field(default_factory=list)
    before: str = ""
    after: str = ""


@dataclass(frozen=True)
class NestedPseudoClass:
    """A functional pseudo-class whose argument is a selector list.

    ``:not(.a, .b)`` has two ``Selector`` alternatives in ``nodes``; the
    ``:local(...)`` and ``:global(...)`` markers carry exactly one.
    """

    name: str
    nodes: list[Selector] = field(default_factory=list)


@dataclass(frozen=True)
class Selectors:
    """A full selector list as found in a rule prelude."""

    nodes: list[Selector] = field(default_factory=list)


SelectorNode = Union[
    Spacing,
    Operator,
    ClassName,
    IdName,
    Element,
    Universal,
    Attribute,
    PseudoElement,
    PseudoClass,
    NestedPseudoClass,
    Other,
]

# Functional pseudo-classes whose argument is itself a selector list.
NESTED_PSEUDO_CLASSES = frozenset({
    "local",
    "global",
    "not",
    "is",
    "where",
    "has",
    "matches",
    "any",
    "-moz-any",
    "-webkit-any",
    "host",
    "host-context",
    "slotted",
})

SCOPE_MARKERS = frozenset({"local", "global"})


def is_marker(node: object) -> bool:
    """True for a bare ``:local`` / ``:global`` pseudo-class."""
    return (
        isinstance(node, PseudoClass)
        and node.content is None
        and node.name in SCOPE_MARKERS
    )


def is_spacing(node: object) -> bool:
    """True for nodes that separate compound selectors."""
    return isinstance(node, (Spacing, Operator))
