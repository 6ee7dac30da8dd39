"""In-memory named-event emitter.

Contracts simulated in-process publish their events here. Emission is
synchronous with respect to the emitting call: every listener has run
(and every coroutine listener has been awaited) before emit() returns,
which is how events behave inside a single on-chain transaction.
"""

from __future__ import annotations

import inspect
from collections import defaultdict
from dataclasses import dataclass
from typing import Any

import structlog

from lottery_vrf.application.ports.event_emitter import (
    EventEmitterProtocol,
    EventListener,
)
from lottery_vrf.domain.events import ObservedEvent

logger = structlog.get_logger(__name__)


@dataclass
class _Registration:
    listener: EventListener
    once: bool


class InMemoryEventEmitter(EventEmitterProtocol):
    """Event emitter backed by per-name listener lists.

    Every emission is also appended to an ordered history so tests can
    inspect what a contract emitted without having listened for it.

    Attributes:
        _owner: Entity reported as the emitter in recorded history.
        _registrations: Map of event name to registrations, in order.
        _history: Every ObservedEvent emitted, in emission order.
    """

    def __init__(self, owner: Any = None) -> None:
        """Initialize the emitter.

        Args:
            owner: Entity the events belong to. Defaults to the emitter.
        """
        self._owner = owner if owner is not None else self
        self._registrations: dict[str, list[_Registration]] = defaultdict(list)
        self._history: list[ObservedEvent] = []

    def on(self, event_name: str, listener: EventListener) -> None:
        self._registrations[event_name].append(_Registration(listener, once=False))

    def once(self, event_name: str, listener: EventListener) -> None:
        self._registrations[event_name].append(_Registration(listener, once=True))

    def off(self, event_name: str, listener: EventListener) -> bool:
        registrations = self._registrations.get(event_name)
        if not registrations:
            return False
        for index, registration in enumerate(registrations):
            if registration.listener == listener:
                del registrations[index]
                return True
        return False

    async def emit(self, event_name: str, *args: Any) -> int:
        self._history.append(ObservedEvent(event_name, self._owner, tuple(args)))

        # Snapshot, and drop one-shot listeners before any of them runs
        registrations = list(self._registrations.get(event_name, ()))
        if any(registration.once for registration in registrations):
            self._registrations[event_name] = [
                registration
                for registration in self._registrations[event_name]
                if not registration.once
            ]

        logger.debug(
            "event_emitted",
            event_name=event_name,
            listener_count=len(registrations),
        )

        for registration in registrations:
            result = registration.listener(*args)
            if inspect.isawaitable(result):
                await result
        return len(registrations)

    def listener_count(self, event_name: str) -> int:
        return len(self._registrations.get(event_name, ()))

    # Inspection helpers

    @property
    def history(self) -> list[ObservedEvent]:
        """Every emitted event, oldest first."""
        return list(self._history)

    def events_named(self, event_name: str) -> list[ObservedEvent]:
        """Return emitted events with the given name, oldest first."""
        return [event for event in self._history if event.name == event_name]

    def clear(self) -> None:
        """Remove all listeners and recorded history (for testing)."""
        self._registrations.clear()
        self._history.clear()
