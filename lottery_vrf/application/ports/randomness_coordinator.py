"""Randomness coordinator port.

Local runs bind this port to the in-process oracle mock; live networks
bind it to the deployed coordinator at the configured address.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lottery_vrf.domain.models import Subscription
from lottery_vrf.domain.models.randomness_request import DEFAULT_KEY_HASH


class RandomnessCoordinatorProtocol(ABC):
    """Subscription management and randomness requests."""

    @property
    @abstractmethod
    def address(self) -> str:
        """Address consumers trust for fulfillment callbacks."""
        ...

    @abstractmethod
    async def create_subscription(self, owner: str = "") -> int:
        """Create a zero-balance subscription and return its id."""
        ...

    @abstractmethod
    async def fund_subscription(self, subscription_id: int, amount: int) -> None:
        """Add amount (juels) to a subscription balance."""
        ...

    @abstractmethod
    async def add_consumer(self, subscription_id: int, consumer: str) -> None:
        """Authorize consumer to request against a subscription."""
        ...

    @abstractmethod
    async def get_subscription(self, subscription_id: int) -> Subscription:
        """Return a snapshot of a subscription."""
        ...

    @abstractmethod
    async def request_random_words(
        self,
        consumer: str,
        subscription_id: int,
        num_words: int,
        callback_gas_limit: int,
        key_hash: str = DEFAULT_KEY_HASH,
        request_confirmations: int = 3,
    ) -> int:
        """Submit a randomness request and return its id.

        The request is fulfilled later, in a separate step.
        """
        ...
