"""Mode context threaded through one localization walk."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Mode(Enum):
    """Scoping mode for class and id selectors."""

    LOCAL = "local"
    GLOBAL = "global"


@dataclass(frozen=True)
class ModeContext:
    """Per-sequence localization state.

    Attributes:
        mode: Mode applied to the next class or id in the sequence.
        inside: Kind of the functional marker whose argument is being
            rewritten; any marker is illegal while this is set.
        saw_local: Whether an identifier has been localized so far.
    """

    mode: Mode = Mode.LOCAL
    inside: Mode | None = None
    saw_local: bool = False

    @classmethod
    def for_marker(cls, marker: Mode) -> ModeContext:
        """Fresh context for the argument of ``:local(...)`` / ``:global(...)``."""
        return cls(mode=marker, inside=marker)

    def switch(self, mode: Mode) -> ModeContext:
        return replace(self, mode=mode)

    def with_local(self) -> ModeContext:
        if self.saw_local:
            return self
        return replace(self, saw_local=True)
