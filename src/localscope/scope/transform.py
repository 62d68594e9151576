"""Scoping pass: walk, localize, compose exports, serialize."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from localscope.config import ScopeConfig
from localscope.events.bus import MessageBus
from localscope.model.diagnostic import Diagnostic
from localscope.scope.exports import ExportComposer
from localscope.scope.naming import generate_scoped_name
from localscope.scope.registry import AliasRegistry
from localscope.scope.walker import RuleWalker
from localscope.stylesheet import Root, parse_stylesheet, stringify

logger = logging.getLogger(__name__)

ORIGIN = "localscope"


@dataclass
class ScopeResult:
    """Outcome of one stylesheet pass.

    Attributes:
        css: The rewritten stylesheet text.
        root: The rewritten stylesheet tree.
        exports: Final ``identifier -> "alias composed..."`` table.
        messages: Messages appended to the bus by this pass.
        warnings: Non-fatal diagnostics (redeclared identifiers).
    """

    css: str
    root: Root
    exports: dict[str, str] = field(default_factory=dict)
    messages: list[Any] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)


class ScopeTransform:
    """Scope every class and id of a stylesheet to its source file.

    One instance can run any number of passes; each pass gets its own
    alias registry.  Pass a separate bus per file.
    """

    def __init__(self, config: ScopeConfig | None = None) -> None:
        self.config = config or ScopeConfig()

    def apply(self, root: Root, source: str = "", bus: MessageBus | None = None) -> ScopeResult:
        """Rewrite *root* in place.

        *source* is the text *root* was parsed from; it is forwarded to the
        name generator.  Raises :class:`~localscope.errors.ScopeError` on
        the first invalid rule, in which case neither *root* nor *bus* is
        changed.
        """
        bus = bus if bus is not None else MessageBus()
        first_message = len(bus)
        registry = AliasRegistry(
            self.config.generate_scoped_name or generate_scoped_name,
            bus,
            from_path=self.config.from_path,
            source=source,
            origin=ORIGIN,
        )

        # Rewrite a copy so a failing rule leaves the caller's tree intact.
        working = copy.deepcopy(root)
        walker = RuleWalker(self.config, registry, origin=ORIGIN)
        walker.walk(working)
        exports = ExportComposer(registry, bus, walker.edges).compose(working)
        root.nodes[:] = working.nodes
        root.after = working.after

        logger.info(
            "scoped %s: %d rule(s), %d alias(es), %d export(s)",
            self.config.from_path or "<input>",
            walker.rules_localized,
            len(registry),
            len(exports),
        )
        return ScopeResult(
            css=stringify(root),
            root=root,
            exports=exports,
            messages=bus.messages[first_message:],
            warnings=list(registry.diagnostics),
        )


def process(
    source: str,
    config: ScopeConfig | None = None,
    bus: MessageBus | None = None,
) -> ScopeResult:
    """Parse *source*, scope it and return the result.

    Raises :class:`~localscope.errors.ParseError` for unparseable text and
    :class:`~localscope.errors.ScopeError` for invalid selectors; no
    partial output is produced in either case.
    """
    root = parse_stylesheet(source)
    return ScopeTransform(config).apply(root, source=source, bus=bus)
