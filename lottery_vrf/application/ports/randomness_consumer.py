"""Randomness consumer port.

A consumer requests randomness from a coordinator and receives the
words through a callback only the coordinator may invoke.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class RandomnessConsumerProtocol(ABC):
    """Callback boundary of a contract that consumes randomness."""

    @property
    @abstractmethod
    def address(self) -> str:
        """Address the coordinator delivers fulfillments to."""
        ...

    @abstractmethod
    async def raw_fulfill_random_words(
        self,
        caller: str,
        request_id: int,
        random_words: Sequence[int],
    ) -> None:
        """Receive random words for a request.

        Args:
            caller: Address of the party invoking the callback.
            request_id: Request being fulfilled.
            random_words: The delivered words.

        Raises:
            OnlyCoordinatorCanFulfillError: If caller is not the trusted
                coordinator.
        """
        ...
