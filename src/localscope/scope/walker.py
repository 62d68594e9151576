"""Rule walker: localize the selector of every rule in a stylesheet."""

from __future__ import annotations

import logging
import re

from localscope.config import ScopeConfig
from localscope.errors import LocalizeError, ScopeError, SelectorError
from localscope.events.types import ComposedEdge
from localscope.scope.context import Mode
from localscope.scope.localize import localize_selectors
from localscope.scope.registry import AliasRegistry
from localscope.selector import ClassName, NestedPseudoClass, Selectors
from localscope.selector import parse as parse_selector
from localscope.selector import stringify as stringify_selector
from localscope.stylesheet.model import AtRule, Declaration, Node, Root, Rule, SourceSpan

logger = logging.getLogger(__name__)

COMPOSES_PROPS = frozenset({"composes", "compose-with"})

# composes: a b from global | composes: a from "./file.css"
_COMPOSES_FROM_RE = re.compile(r"^(?P<names>.+?)\s+from\s+(?P<source>global|\"[^\"]*\"|'[^']*')$", re.S)


def _error(message: str, source: SourceSpan | None) -> ScopeError:
    if source is None:
        return ScopeError(message)
    return ScopeError(message, line=source.line, column=source.column)


def is_icss_rule(rule: Rule) -> bool:
    """True for ``:export`` and ``:import(...)`` rules, which are never rewritten."""
    selector = rule.selector.strip()
    return selector == ":export" or selector.startswith(":import(")


def single_local_class(selectors: Selectors) -> str | None:
    """Name of the class when *selectors* is exactly ``:local(.name)``."""
    if len(selectors.nodes) != 1 or len(selectors.nodes[0].nodes) != 1:
        return None
    node = selectors.nodes[0].nodes[0]
    if not isinstance(node, NestedPseudoClass) or node.name != "local":
        return None
    inner = node.nodes[0].nodes if len(node.nodes) == 1 else []
    if len(inner) == 1 and isinstance(inner[0], ClassName):
        return inner[0].name
    return None


class RuleWalker:
    """Walks rules in source order, rewriting selectors through the engine.

    Composition edges harvested from ``composes:`` are collected in
    :attr:`edges` and left for the caller to publish once the walk succeeds.

    Rules under ``@keyframes`` (any vendor prefix) and the ICSS ``:export``
    / ``:import(...)`` rules are left untouched.
    """

    def __init__(
        self,
        config: ScopeConfig,
        registry: AliasRegistry,
        origin: str = "localscope",
    ) -> None:
        self.config = config
        self.registry = registry
        self.origin = origin
        self.rules_localized = 0
        self.edges: list[ComposedEdge] = []

    def walk(self, root: Root) -> None:
        self._walk_nodes(root.nodes, in_keyframes=False)

    def _walk_nodes(self, nodes: list[Node], in_keyframes: bool) -> None:
        for node in list(nodes):
            if isinstance(node, AtRule):
                if node.nodes is not None:
                    keyframes = in_keyframes or node.name.lower().endswith("keyframes")
                    self._walk_nodes(node.nodes, keyframes)
            elif isinstance(node, Rule):
                if not in_keyframes and not is_icss_rule(node):
                    self.localize_rule(node)
                self._walk_nodes(node.nodes, in_keyframes)

    def localize_rule(self, rule: Rule) -> None:
        """Rewrite ``rule.selector`` in place.

        Raises:
            ScopeError: on any selector, marker, consistency, purity or
                composition error, positioned at the rule.
        """
        try:
            selectors = parse_selector(rule.selector)
            localized, contexts = localize_selectors(
                selectors,
                Mode(self.config.default_mode),
                on_local=lambda node: self.registry.resolve(node.name, rule.source),
            )
        except (SelectorError, LocalizeError) as e:
            raise _error(str(e), rule.source) from e

        if len({context.mode for context in contexts}) > 1:
            raise _error(
                f'Inconsistent rule global/local result in rule "{rule.selector}" '
                "(multiple selectors must result in the same mode for the rule)",
                rule.source,
            )
        if self.config.pure and not any(context.saw_local for context in contexts):
            raise _error(
                f'Selector "{rule.selector}" is not pure '
                "(pure selectors must contain at least one local class or id)",
                rule.source,
            )

        selector = stringify_selector(localized)
        logger.debug("localized %r -> %r", rule.selector, selector)
        rule.selector = selector
        self.rules_localized += 1
        self._harvest_composes(rule, localized)

    def _harvest_composes(self, rule: Rule, localized: Selectors) -> None:
        declarations = [
            node
            for node in rule.nodes
            if isinstance(node, Declaration) and node.prop.lower() in COMPOSES_PROPS
        ]
        if not declarations:
            return

        name = single_local_class(localized)
        if name is None:
            raise _error(
                "composition is only allowed when selector is single :local class name "
                f'not in "{rule.selector}"',
                declarations[0].source,
            )

        for declaration in declarations:
            match = _COMPOSES_FROM_RE.match(declaration.value.strip())
            if match is None:
                composed, source = declaration.value.split(), None
            else:
                composed, source = match.group("names").split(), match.group("source")

            if source is not None and source != "global":
                logger.warning(
                    "composes from %s in %r left for an upstream stage", source, rule.selector
                )
                continue

            for value in composed:
                if source is None:
                    self.registry.resolve(value, declaration.source)
                self.edges.append(
                    ComposedEdge(
                        name=name, value=value, origin=self.origin, opaque=source is not None
                    )
                )
            rule.remove(declaration)
