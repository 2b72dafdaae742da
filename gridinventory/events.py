"""Multicast events that notify registered handlers."""

from __future__ import annotations

from typing import Any, Callable


class Event:
    """A list of handlers called in order of registration on broadcast."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def add(self, handler: Callable[..., Any]) -> None:
        """Register a handler; registering the same handler twice has no effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def remove(self, handler: Callable[..., Any]) -> None:
        """Unregister a handler if it is registered."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def broadcast(self, *args: Any) -> None:
        """Call every handler with the given arguments."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers