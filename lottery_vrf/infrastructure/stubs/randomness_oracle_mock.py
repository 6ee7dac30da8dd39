"""Randomness oracle mock for local networks and tests.

Stands in for a decentralized randomness coordinator. Requests are
charged against prepaid subscriptions and recorded; randomness is only
produced when fulfill_random_words() is triggered separately, which
models the off-chain delay between request and delivery.

Fulfillment and the consumer callback are one atomic step: if the
callback raises, the request is left unfulfilled and the exception
reaches the caller of fulfill_random_words().

WARNING: This mock is NOT for live networks. Live networks bind the
coordinator port to the deployed coordinator address instead.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence

import structlog

from lottery_vrf.application.ports.entropy_source import EntropySourceProtocol
from lottery_vrf.application.ports.event_emitter import EventEmitterProtocol
from lottery_vrf.application.ports.randomness_consumer import (
    RandomnessConsumerProtocol,
)
from lottery_vrf.application.ports.randomness_coordinator import (
    RandomnessCoordinatorProtocol,
)
from lottery_vrf.domain.errors.oracle import (
    AlreadyFulfilledError,
    AmountOverflowError,
    InvalidConsumerError,
    InvalidRandomWordsError,
    TooManyConsumersError,
    UnfundedError,
    UnknownRequestError,
    UnknownSubscriptionError,
)
from lottery_vrf.domain.events import (
    CONSUMER_ADDED_EVENT,
    CONSUMER_REMOVED_EVENT,
    RANDOM_WORDS_FULFILLED_EVENT,
    RANDOM_WORDS_REQUESTED_EVENT,
    SUBSCRIPTION_CREATED_EVENT,
    SUBSCRIPTION_FUNDED_EVENT,
)
from lottery_vrf.domain.models import (
    MAX_BALANCE,
    MAX_CONSUMERS,
    FeeSchedule,
    RandomnessRequest,
    Subscription,
)
from lottery_vrf.domain.models.randomness_request import DEFAULT_KEY_HASH
from lottery_vrf.infrastructure.adapters.in_memory_event_emitter import (
    InMemoryEventEmitter,
)

logger = structlog.get_logger(__name__)

MOCK_COORDINATOR_ADDRESS = (
    "0x" + hashlib.sha256(b"RandomnessOracleMock").hexdigest()[:40]
)

MAX_NUM_WORDS = 500


def derive_random_words(entropy: bytes, request_id: int, num_words: int) -> tuple[int, ...]:
    """Derive 256-bit words from entropy, request id and word index.

    The same entropy and request id always give the same words.
    """
    prefix = entropy + request_id.to_bytes(32, "big")
    return tuple(
        int.from_bytes(
            hashlib.sha256(prefix + index.to_bytes(32, "big")).digest(), "big"
        )
        for index in range(num_words)
    )


class RandomnessOracleMock(RandomnessCoordinatorProtocol):
    """In-process randomness coordinator.

    Owns all subscription and request state. Each method performs its
    checks and mutations without an intervening await, so concurrent
    tasks on one event loop see calls as serialized.

    Attributes:
        _fees: Pricing applied to every request.
        _entropy: Source mixed into derived random words.
        _events: Emitter the coordinator's own events are published on.
        _subscriptions: Subscriptions by id.
        _requests: Every request issued, fulfilled or not, by id.
        _consumers: Callback targets by address.
    """

    def __init__(
        self,
        fee_schedule: FeeSchedule,
        entropy_source: EntropySourceProtocol,
        events: EventEmitterProtocol | None = None,
        address: str = MOCK_COORDINATOR_ADDRESS,
    ) -> None:
        """Initialize the oracle mock.

        Args:
            fee_schedule: Base fee and gas price used to charge requests.
            entropy_source: Entropy mixed into fulfilled words.
            events: Emitter for coordinator events. A private in-memory
                emitter is created when omitted.
            address: Address consumers trust for fulfillment callbacks.
        """
        self._fees = fee_schedule
        self._entropy = entropy_source
        self._events = events if events is not None else InMemoryEventEmitter(self)
        self._address = address
        self._subscriptions: dict[int, Subscription] = {}
        self._requests: dict[int, RandomnessRequest] = {}
        self._consumers: dict[str, RandomnessConsumerProtocol] = {}
        self._last_subscription_id = 0
        self._last_request_id = 0

    @property
    def address(self) -> str:
        return self._address

    @property
    def events(self) -> EventEmitterProtocol:
        """Emitter carrying SubscriptionCreated, RandomWordsRequested, etc."""
        return self._events

    @property
    def fee_schedule(self) -> FeeSchedule:
        return self._fees

    @property
    def last_request_id(self) -> int:
        """Id of the most recent request, or 0 if none was made."""
        return self._last_request_id

    # Subscriptions

    async def create_subscription(self, owner: str = "") -> int:
        self._last_subscription_id += 1
        subscription_id = self._last_subscription_id
        self._subscriptions[subscription_id] = Subscription(
            subscription_id=subscription_id, owner=owner
        )

        logger.info("subscription_created", subscription_id=subscription_id)
        await self._events.emit(SUBSCRIPTION_CREATED_EVENT, subscription_id, owner)
        return subscription_id

    async def fund_subscription(self, subscription_id: int, amount: int) -> None:
        """Add amount to a subscription balance.

        Raises:
            UnknownSubscriptionError: If the subscription does not exist.
            ValueError: If amount is negative.
            AmountOverflowError: If the new balance would exceed MAX_BALANCE.
        """
        subscription = self._require_subscription(subscription_id)
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")

        old_balance = subscription.balance
        if old_balance + amount > MAX_BALANCE:
            raise AmountOverflowError(
                subscription_id=subscription_id,
                balance=old_balance,
                amount=amount,
                max_balance=MAX_BALANCE,
            )
        subscription.balance = old_balance + amount

        logger.info(
            "subscription_funded",
            subscription_id=subscription_id,
            old_balance=old_balance,
            new_balance=subscription.balance,
        )
        await self._events.emit(
            SUBSCRIPTION_FUNDED_EVENT, subscription_id, old_balance, subscription.balance
        )

    async def add_consumer(self, subscription_id: int, consumer: str) -> None:
        subscription = self._require_subscription(subscription_id)
        if consumer in subscription.consumers:
            return
        if len(subscription.consumers) >= MAX_CONSUMERS:
            raise TooManyConsumersError(subscription_id, MAX_CONSUMERS)
        subscription.consumers.add(consumer)

        logger.info(
            "consumer_added", subscription_id=subscription_id, consumer=consumer
        )
        await self._events.emit(CONSUMER_ADDED_EVENT, subscription_id, consumer)

    async def remove_consumer(self, subscription_id: int, consumer: str) -> None:
        subscription = self._require_subscription(subscription_id)
        if consumer not in subscription.consumers:
            raise InvalidConsumerError(subscription_id, consumer)
        subscription.consumers.discard(consumer)

        logger.info(
            "consumer_removed", subscription_id=subscription_id, consumer=consumer
        )
        await self._events.emit(CONSUMER_REMOVED_EVENT, subscription_id, consumer)

    async def get_subscription(self, subscription_id: int) -> Subscription:
        return self._require_subscription(subscription_id).snapshot()

    async def consumer_is_added(self, subscription_id: int, consumer: str) -> bool:
        return consumer in self._require_subscription(subscription_id).consumers

    def register_consumer(self, consumer: RandomnessConsumerProtocol) -> None:
        """Bind a consumer's callback to its address for fulfillment."""
        self._consumers[consumer.address] = consumer

    # Requests

    async def request_random_words(
        self,
        consumer: str,
        subscription_id: int,
        num_words: int,
        callback_gas_limit: int,
        key_hash: str = DEFAULT_KEY_HASH,
        request_confirmations: int = 3,
    ) -> int:
        """Charge a subscription and record a randomness request.

        Does not produce randomness; see fulfill_random_words().

        Raises:
            UnknownSubscriptionError: If the subscription does not exist.
            InvalidConsumerError: If consumer is not authorized on it.
            ValueError: If num_words is outside 1..MAX_NUM_WORDS.
            UnfundedError: If the balance is below the request fee.
        """
        subscription = self._require_subscription(subscription_id)
        if not subscription.authorizes(consumer):
            raise InvalidConsumerError(subscription_id, consumer)
        if not 1 <= num_words <= MAX_NUM_WORDS:
            raise ValueError(
                f"num_words must be between 1 and {MAX_NUM_WORDS}, got {num_words}"
            )

        fee = self._fees.compute_fee(callback_gas_limit)
        if subscription.balance < fee:
            raise UnfundedError(subscription_id, subscription.balance, fee)

        subscription.balance -= fee
        subscription.request_count += 1
        self._last_request_id += 1
        request_id = self._last_request_id
        self._requests[request_id] = RandomnessRequest(
            request_id=request_id,
            consumer=consumer,
            subscription_id=subscription_id,
            num_words=num_words,
            callback_gas_limit=callback_gas_limit,
            fee_paid=fee,
            key_hash=key_hash,
            request_confirmations=request_confirmations,
        )

        logger.info(
            "randomness_requested",
            request_id=request_id,
            subscription_id=subscription_id,
            consumer=consumer,
            num_words=num_words,
            fee=fee,
            remaining_balance=subscription.balance,
        )
        await self._events.emit(
            RANDOM_WORDS_REQUESTED_EVENT,
            key_hash,
            request_id,
            subscription_id,
            request_confirmations,
            callback_gas_limit,
            num_words,
            consumer,
        )
        return request_id

    async def get_request(self, request_id: int) -> RandomnessRequest:
        request = self._requests.get(request_id)
        if request is None:
            raise UnknownRequestError(request_id)
        return request

    async def pending_request_exists(self, subscription_id: int) -> bool:
        self._require_subscription(subscription_id)
        return any(
            request.subscription_id == subscription_id and not request.fulfilled
            for request in self._requests.values()
        )

    # Fulfillment

    async def fulfill_random_words(self, request_id: int) -> tuple[int, ...]:
        """Deliver derived random words to the requesting consumer.

        Returns:
            The delivered words.

        Raises:
            UnknownRequestError: If request_id was never issued.
            AlreadyFulfilledError: If request_id was already fulfilled.
            InvalidConsumerError: If no callback is registered for the consumer.
            EntropyUnavailableError: If the entropy source fails.
            Exception: Whatever the consumer callback raises.
        """
        return await self._fulfill(request_id, override=None)

    async def fulfill_random_words_with_override(
        self, request_id: int, random_words: Sequence[int]
    ) -> tuple[int, ...]:
        """Deliver caller-chosen words, for steering a scenario.

        Raises:
            InvalidRandomWordsError: If the word count does not match the request.
            Everything fulfill_random_words() raises.
        """
        return await self._fulfill(request_id, override=tuple(random_words))

    async def _fulfill(
        self, request_id: int, override: tuple[int, ...] | None
    ) -> tuple[int, ...]:
        request = self._requests.get(request_id)
        if request is None:
            raise UnknownRequestError(request_id)
        if request.fulfilled:
            raise AlreadyFulfilledError(request_id)
        if override is not None and len(override) != request.num_words:
            raise InvalidRandomWordsError(request_id, request.num_words, len(override))
        consumer = self._consumers.get(request.consumer)
        if consumer is None:
            raise InvalidConsumerError(request.subscription_id, request.consumer)

        # Claim before the first await so a concurrent attempt sees it fulfilled
        request.fulfilled = True
        try:
            if override is None:
                entropy = await self._entropy.get_entropy()
                words = derive_random_words(entropy, request_id, request.num_words)
            else:
                words = override
            request.random_words = words
            await consumer.raw_fulfill_random_words(self._address, request_id, words)
        except BaseException:
            request.fulfilled = False
            request.random_words = ()
            logger.warning(
                "random_words_fulfillment_reverted",
                request_id=request_id,
                consumer=request.consumer,
            )
            raise

        logger.info(
            "random_words_fulfilled",
            request_id=request_id,
            consumer=request.consumer,
            num_words=len(words),
        )
        await self._events.emit(
            RANDOM_WORDS_FULFILLED_EVENT,
            request_id,
            request.subscription_id,
            request.fee_paid,
            True,
        )
        return words

    def _require_subscription(self, subscription_id: int) -> Subscription:
        subscription = self._subscriptions.get(subscription_id)
        if subscription is None:
            raise UnknownSubscriptionError(subscription_id)
        return subscription
