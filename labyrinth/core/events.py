"""
Synchronous notifications.

Listeners are plain callables registered on an EventHook. Emitting calls
every listener in registration order before returning.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .direction import Direction

E = TypeVar("E")


@dataclass(frozen=True)
class StartFound:
    """A start marker found while parsing."""
    x: int
    y: int


@dataclass(frozen=True)
class CrawlingEvent:
    """Crawler position and facing direction after a change."""
    x: int
    y: int
    direction: Direction


class EventHook(Generic[E]):
    """Ordered list of listeners for one kind of event."""

    def __init__(self) -> None:
        self._listeners: list[Callable[[E], None]] = []

    def subscribe(self, listener: Callable[[E], None]) -> Callable[[E], None]:
        """Register a listener. Returns it so it can be used as a decorator."""
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Callable[[E], None]) -> bool:
        """Remove a listener. Returns False if it was not registered."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def emit(self, event: E) -> None:
        for listener in list(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)
