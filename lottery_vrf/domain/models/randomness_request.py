"""Randomness request record."""

from __future__ import annotations

from dataclasses import dataclass

# Key hash used when the caller does not pick a gas lane.
DEFAULT_KEY_HASH = "0x" + "00" * 32


@dataclass
class RandomnessRequest:
    """A pending or completed randomness request.

    Flips from unfulfilled to fulfilled exactly once and is kept after
    fulfillment so a second attempt can be rejected.

    Attributes:
        request_id: Monotonic, unique identifier.
        consumer: Address of the requester; receives the callback.
        subscription_id: Subscription that paid for the request.
        num_words: Number of random words to deliver.
        callback_gas_limit: Gas budget the consumer asked for.
        fee_paid: Juels deducted from the subscription.
        key_hash: Gas lane identifier.
        request_confirmations: Block confirmations the requester asked for.
        fulfilled: Whether random words have been delivered.
        random_words: Words delivered on fulfillment.
    """

    request_id: int
    consumer: str
    subscription_id: int
    num_words: int
    callback_gas_limit: int
    fee_paid: int = 0
    key_hash: str = DEFAULT_KEY_HASH
    request_confirmations: int = 3
    fulfilled: bool = False
    random_words: tuple[int, ...] = ()
