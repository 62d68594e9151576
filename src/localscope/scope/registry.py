"""Alias registry: one scoped name per local identifier for a single pass."""

from __future__ import annotations

import logging
from typing import Iterator

from localscope.config import NameGenerator
from localscope.events.bus import MessageBus
from localscope.events.types import ScopedBinding, ValueBinding
from localscope.model.diagnostic import Diagnostic, Severity
from localscope.stylesheet.model import SourceSpan

logger = logging.getLogger(__name__)


class AliasRegistry:
    """Insertion-ordered ``identifier -> alias`` map backed by a name generator.

    The first resolution of an identifier fixes its alias for the rest of
    the pass.  Aliases are published as ScopedBinding messages only once
    the pass completes (see :meth:`bindings`).
    """

    def __init__(
        self,
        generate: NameGenerator,
        bus: MessageBus,
        from_path: str = "",
        source: str = "",
        origin: str = "localscope",
    ) -> None:
        self._generate = generate
        self._bus = bus
        self._from_path = from_path
        self._source = source
        self._origin = origin
        self._aliases: dict[str, str] = {}
        self.diagnostics: list[Diagnostic] = []

    def resolve(self, identifier: str, source: SourceSpan | None = None) -> str:
        """Return the alias for *identifier*, generating it on first use.

        *source* is the position of the rule that introduced the identifier;
        it is attached to the redeclaration warning.
        """
        alias = self._aliases.get(identifier)
        if alias is not None:
            return alias

        if self._bus.find(ValueBinding, identifier) is not None:
            alias = identifier
        else:
            alias = self._generate(identifier, self._from_path, self._source)
            if self._bus.find(ScopedBinding, identifier) is not None:
                message = f'"{identifier}" is already declared'
                logger.warning("%s (%s)", message, self._from_path or "<input>")
                self.diagnostics.append(
                    Diagnostic(
                        rule="already_declared",
                        severity=Severity.WARNING,
                        message=message,
                        identifier=identifier,
                        line=source.line if source else None,
                        column=source.column if source else None,
                    )
                )

        logger.debug("alias %s -> %s", identifier, alias)
        self._aliases[identifier] = alias
        return alias

    def get(self, identifier: str) -> str | None:
        return self._aliases.get(identifier)

    def items(self) -> list[tuple[str, str]]:
        return list(self._aliases.items())

    def bindings(self) -> Iterator[ScopedBinding]:
        """One ScopedBinding per alias, in first-seen order."""
        for name, alias in self._aliases.items():
            yield ScopedBinding(name=name, value=alias, origin=self._origin)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)
