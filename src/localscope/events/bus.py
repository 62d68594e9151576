"""Synchronous message bus shared by the stages of one stylesheet pass."""

from __future__ import annotations

from typing import Any, Callable, Iterator, TypeVar

T = TypeVar("T")


class MessageBus:
    """Append-only message log with typed read filters.

    Listeners can subscribe to specific message types or receive all
    messages.  Messages are dispatched synchronously in registration order
    as they are appended.
    """

    def __init__(self, messages: list[Any] | None = None) -> None:
        self._messages: list[Any] = list(messages or [])
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, message_type: type, callback: Callable) -> None:
        """Register a callback for a specific message type."""
        self._listeners.setdefault(message_type, []).append(callback)

    def on_all(self, callback: Callable) -> None:
        """Register a callback that receives every message."""
        self._global_listeners.append(callback)

    def append(self, message: Any) -> None:
        """Record a message and dispatch it to all matching listeners."""
        self._messages.append(message)
        for cb in self._global_listeners:
            cb(message)
        for cb in self._listeners.get(type(message), []):
            cb(message)

    def extend(self, messages: list[Any]) -> None:
        for message in messages:
            self.append(message)

    @property
    def messages(self) -> list[Any]:
        """A snapshot of every message recorded so far."""
        return list(self._messages)

    def of_type(self, message_type: type[T]) -> Iterator[T]:
        """Yield recorded messages of *message_type* in append order."""
        for message in self._messages:
            if isinstance(message, message_type):
                yield message

    def find(self, message_type: type[T], name: str) -> T | None:
        """Return the first message of *message_type* whose ``name`` matches."""
        for message in self.of_type(message_type):
            if getattr(message, "name", None) == name:
                return message
        return None

    def __len__(self) -> int:
        return len(self._messages)
