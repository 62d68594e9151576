"""localscope -- CSS Modules scoping: local-by-default selectors and ICSS exports."""

__version__ = "0.1.0"

from localscope.config import ScopeConfig  # noqa: E402
from localscope.errors import LocalizeError, ParseError, ScopeError, SelectorError  # noqa: E402
from localscope.events import (  # noqa: E402
    ComposedEdge,
    MessageBus,
    ScopedBinding,
    ValueBinding,
)
from localscope.scope import ScopeResult, ScopeTransform, process  # noqa: E402

__all__ = [
    "__version__",
    "ComposedEdge",
    "LocalizeError",
    "MessageBus",
    "ParseError",
    "ScopeConfig",
    "ScopeError",
    "ScopeResult",
    "ScopeTransform",
    "ScopedBinding",
    "SelectorError",
    "ValueBinding",
    "process",
]
