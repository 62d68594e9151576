"""Message types exchanged between pipeline stages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValueBinding:
    """``name`` was already resolved externally to ``value``; never re-aliased."""

    name: str
    value: str
    origin: str = ""


@dataclass(frozen=True)
class ScopedBinding:
    """``name`` maps to the scoped alias ``value``."""

    name: str
    value: str
    origin: str = ""


@dataclass(frozen=True)
class ComposedEdge:
    """``name`` additionally composes ``value``.

    ``value`` is a local name of the same stylesheet unless ``opaque`` is
    set, in which case it is exported verbatim (``composes: x from global``
    or a token already resolved upstream).
    """

    name: str
    value: str
    origin: str = ""
    opaque: bool = False


Message = ValueBinding | ScopedBinding | ComposedEdge
