"""Subscription model - a prepaid balance that authorizes requests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

# Balances are stored as uint96 on-chain.
MAX_BALANCE = 2**96 - 1

MAX_CONSUMERS = 100


@dataclass
class Subscription:
    """Prepaid account charged for randomness requests.

    Created with a zero balance and never destroyed. Only the oracle
    that owns it mutates it.

    Attributes:
        subscription_id: Identifier allocated by the coordinator.
        owner: Address that created the subscription.
        balance: Remaining balance in juels.
        consumers: Addresses allowed to request against this subscription.
            An empty set places no restriction on the requester.
        request_count: Number of requests charged so far.
    """

    subscription_id: int
    owner: str = ""
    balance: int = 0
    consumers: set[str] = field(default_factory=set)
    request_count: int = 0

    def authorizes(self, consumer: str) -> bool:
        """Return True if consumer may request against this subscription."""
        return not self.consumers or consumer in self.consumers

    def snapshot(self) -> Subscription:
        """Return a detached copy safe to hand out to callers."""
        return replace(self, consumers=set(self.consumers))
