"""Export composer: build the ICSS ``:export`` table after a full walk."""

from __future__ import annotations

import logging

from localscope.events.bus import MessageBus
from localscope.events.types import ComposedEdge
from localscope.scope.registry import AliasRegistry
from localscope.stylesheet.model import Declaration, Root, Rule

logger = logging.getLogger(__name__)

EXPORT_SELECTOR = ":export"


def collect_exports(root: Root) -> tuple[dict[str, str], Rule | None]:
    """Read every top-level ``:export`` block.

    Returns the declared table (first declaration of a name wins) and the
    first export rule, if any.
    """
    table: dict[str, str] = {}
    first: Rule | None = None
    for node in root.nodes:
        if not isinstance(node, Rule) or node.selector.strip() != EXPORT_SELECTOR:
            continue
        if first is None:
            first = node
        for declaration in node.nodes:
            if isinstance(declaration, Declaration):
                table.setdefault(declaration.prop, declaration.value)
    return table, first


def _dedupe(tokens: list[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for token in tokens:
        if token not in seen:
            seen.add(token)
            result.append(token)
    return result


class ExportComposer:
    """Resolve composition chains and merge them into the export block.

    Given ``doo composes bar`` and ``bar composes foo``, the value exported
    for ``doo`` is ``alias(doo) alias(bar) alias(foo)``.  A cycle stops at
    the identifier already being resolved and contributes its alias only.
    """

    def __init__(
        self,
        registry: AliasRegistry,
        bus: MessageBus,
        edges: list[ComposedEdge] | None = None,
    ) -> None:
        self.registry = registry
        self.bus = bus
        # Edges harvested by this pass; published only once composing succeeds.
        self.pending = list(edges or [])
        self._edges: dict[str, list[ComposedEdge]] = {}
        for edge in [*bus.of_type(ComposedEdge), *self.pending]:
            self._edges.setdefault(edge.name, []).append(edge)

    def resolve(self, name: str) -> list[str]:
        """Ordered, de-duplicated token list exported for local *name*."""
        return _dedupe(self._expand(name, frozenset()))

    def _expand(self, name: str, visiting: frozenset[str]) -> list[str]:
        tokens = [self.registry.get(name) or name]
        visiting = visiting | {name}
        for edge in self._edges.get(name, []):
            alias = None if edge.opaque else self.registry.get(edge.value)
            if alias is None:
                tokens.append(edge.value)
            elif edge.value in visiting:
                tokens.append(alias)
            else:
                tokens.extend(self._expand(edge.value, visiting))
        return tokens

    def compose(self, root: Root) -> dict[str, str]:
        """Build the export table, write it into *root* and publish bindings."""
        table, block = collect_exports(root)
        added: dict[str, str] = {}
        for name, _ in self.registry.items():
            if name in table:
                continue
            value = " ".join(self.resolve(name))
            table[name] = added[name] = value

        if added:
            self._emit(root, block, added)
        self.bus.extend(self.pending)
        self.bus.extend(list(self.registry.bindings()))
        return table

    def _emit(self, root: Root, block: Rule | None, added: dict[str, str]) -> None:
        if block is None:
            block = Rule(selector=EXPORT_SELECTOR)
            root.prepend(block)
            before = "\n  "
        else:
            existing = [n for n in block.nodes if isinstance(n, Declaration)]
            before = existing[-1].before if existing else "\n  "
            if existing and not existing[-1].semicolon:
                last = existing[-1]
                last.semicolon = True
                block.after = last.trailing + block.after
                last.trailing = ""
        for name, value in added.items():
            block.append(Declaration(prop=name, value=value, before=before))
        logger.debug("exported %d name(s)", len(added))
