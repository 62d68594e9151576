"""Serialize selector nodes back to selector text."""

from __future__ import annotations

from localscope.selector.model import (
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
    Selectors,
    Spacing,
    Universal,
)

__all__ = ["stringify"]


def stringify(node: object) -> str:
    """Return the selector text for *node* (a Selectors tree or any node in it)."""
    if isinstance(node, Selectors):
        return ",".join(stringify(n) for n in node.nodes)
    if isinstance(node, Selector):
        return node.before + "".join(stringify(n) for n in node.nodes) + node.after
    if isinstance(node, Spacing):
        return node.value
    if isinstance(node, Operator):
        return node.before + node.operator + node.after
    if isinstance(node, ClassName):
        return "." + node.name
    if isinstance(node, IdName):
        return "#" + node.name
    if isinstance(node, Element):
        return node.name
    if isinstance(node, Universal):
        return "*"
    if isinstance(node, Attribute):
        return "[" + node.content + "]"
    if isinstance(node, PseudoElement):
        return "::" + node.name
    if isinstance(node, PseudoClass):
        if node.content is None:
            return ":" + node.name
        return f":{node.name}({node.content})"
    if isinstance(node, NestedPseudoClass):
        return f":{node.name}(" + ",".join(stringify(n) for n in node.nodes) + ")"
    if isinstance(node, Other):
        return node.value
    raise TypeError(f"Cannot stringify selector node {node!r}")
