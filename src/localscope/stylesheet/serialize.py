"""Serialize stylesheet nodes back to text using their raw whitespace."""

from __future__ import annotations

from localscope.stylesheet.model import AtRule, Declaration, Node, Root, Rule

__all__ = ["stringify"]


def _body(nodes: list[Node]) -> str:
    return "".join(node.before + stringify(node) for node in nodes)


def stringify(node: Root | Node) -> str:
    """Return the text of *node*, excluding its own ``before`` raw."""
    if isinstance(node, Root):
        return _body(node.nodes) + node.after
    if isinstance(node, Rule):
        return f"{node.selector}{node.between}{{{_body(node.nodes)}{node.after}}}"
    if isinstance(node, AtRule):
        text = f"@{node.name}{node.after_name}{node.params}{node.between}"
        if node.nodes is not None:
            return f"{text}{{{_body(node.nodes)}{node.after}}}"
        return text + (";" if node.semicolon else "")
    if isinstance(node, Declaration):
        text = f"{node.prop}{node.between}{node.value}{node.trailing}"
        return text + (";" if node.semicolon else "")
    raise TypeError(f"Cannot stringify stylesheet node {node!r}")
