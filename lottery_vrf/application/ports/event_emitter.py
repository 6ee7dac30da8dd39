"""Port definition for named-event emitters.

Contracts (the oracle mock, raffle consumers) publish named events on an
emitter. Observers subscribe independently; the emitter does not know
who is listening.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

# Listeners receive the emitted arguments. They may be plain functions or
# coroutine functions; emit() awaits whatever they return.
EventListener = Callable[..., Awaitable[None] | None]


class EventEmitterProtocol(ABC):
    """Port for registering listeners and emitting named events.

    Listener semantics:
    - on(): listener fires on every emission until removed
    - once(): listener is removed before its first invocation
    - emit(): listeners run in registration order; a listener that
      raises propagates to the emitter's caller
    """

    @abstractmethod
    def on(self, event_name: str, listener: EventListener) -> None:
        """Register a persistent listener."""
        ...

    @abstractmethod
    def once(self, event_name: str, listener: EventListener) -> None:
        """Register a listener that fires at most once."""
        ...

    @abstractmethod
    def off(self, event_name: str, listener: EventListener) -> bool:
        """Remove a listener.

        Returns:
            True if the listener was registered, False otherwise.
        """
        ...

    @abstractmethod
    async def emit(self, event_name: str, *args: Any) -> int:
        """Emit an event to all current listeners.

        Returns:
            Number of listeners invoked.
        """
        ...

    @abstractmethod
    def listener_count(self, event_name: str) -> int:
        """Return the number of listeners registered for event_name."""
        ...
