"""Message bus and message types shared between pipeline stages."""

from localscope.events.bus import MessageBus
from localscope.events.types import ComposedEdge, Message, ScopedBinding, ValueBinding

__all__ = [
    "MessageBus",
    "ComposedEdge",
    "Message",
    "ScopedBinding",
    "ValueBinding",
]
