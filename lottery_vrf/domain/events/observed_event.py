"""Observed event record and event names.

Event names match the names the on-chain contracts emit so logs and
listeners read the same in local and live runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Coordinator events
SUBSCRIPTION_CREATED_EVENT = "SubscriptionCreated"
SUBSCRIPTION_FUNDED_EVENT = "SubscriptionFunded"
CONSUMER_ADDED_EVENT = "ConsumerAdded"
CONSUMER_REMOVED_EVENT = "ConsumerRemoved"
RANDOM_WORDS_REQUESTED_EVENT = "RandomWordsRequested"
RANDOM_WORDS_FULFILLED_EVENT = "RandomWordsFulfilled"

# Raffle consumer events
RAFFLE_ENTER_EVENT = "RaffleEnter"
REQUESTED_RAFFLE_WINNER_EVENT = "RequestedRaffleWinner"
WINNER_PICKED_EVENT = "WinnerPicked"


@dataclass(frozen=True)
class ObservedEvent:
    """One emission of a named event.

    Attributes:
        name: Event name.
        emitter: The entity the event was emitted on.
        args: Positional arguments in emission order.
    """

    name: str
    emitter: Any
    args: tuple[Any, ...] = ()

    @property
    def first_arg(self) -> Any:
        """Return the first argument, or None for payload-less events."""
        return self.args[0] if self.args else None
