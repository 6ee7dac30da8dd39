"""Raffle consumer stub for driving the randomness protocol.

A minimal in-process stand-in for the raffle contract. It exists to put
a real consumer on the other side of the coordinator: it requests
randomness from its own logic, accepts the fulfillment callback only
from the trusted coordinator, and emits WinnerPicked when the round
completes.

This is not a lottery implementation. Entry and payout are reduced to
the bookkeeping the verification scenarios assert on.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from datetime import datetime, timedelta
from enum import Enum

import structlog

from lottery_vrf.application.ports.event_emitter import EventEmitterProtocol
from lottery_vrf.application.ports.randomness_consumer import (
    RandomnessConsumerProtocol,
)
from lottery_vrf.application.ports.randomness_coordinator import (
    RandomnessCoordinatorProtocol,
)
from lottery_vrf.application.ports.time_authority import TimeAuthorityProtocol
from lottery_vrf.domain.errors.consumer import (
    InsufficientEntranceFeeError,
    OnlyCoordinatorCanFulfillError,
    RaffleNotOpenError,
    UpkeepNotNeededError,
)
from lottery_vrf.domain.events import (
    RAFFLE_ENTER_EVENT,
    REQUESTED_RAFFLE_WINNER_EVENT,
    WINNER_PICKED_EVENT,
)
from lottery_vrf.domain.models.randomness_request import DEFAULT_KEY_HASH
from lottery_vrf.infrastructure.adapters.in_memory_event_emitter import (
    InMemoryEventEmitter,
)

logger = structlog.get_logger(__name__)

RAFFLE_CONSUMER_ADDRESS = "0x" + hashlib.sha256(b"Raffle").hexdigest()[:40]

NUM_WORDS = 1
REQUEST_CONFIRMATIONS = 3


class RaffleState(Enum):
    """Raffle round state. Values match the on-chain enum ordinals."""

    OPEN = 0
    CALCULATING = 1


class RaffleConsumerStub(RandomnessConsumerProtocol):
    """Raffle double: enter, request a winner, receive randomness.

    Attributes:
        _coordinator: Coordinator randomness is requested from.
        _balances: Shared account balances, debited on entry and
            credited with the pot on a win.
        _players: Entrants of the current round, in entry order.
    """

    def __init__(
        self,
        coordinator: RandomnessCoordinatorProtocol,
        subscription_id: int,
        time_authority: TimeAuthorityProtocol,
        *,
        entrance_fee: int,
        interval_seconds: int,
        callback_gas_limit: int,
        gas_lane: str = DEFAULT_KEY_HASH,
        balances: dict[str, int] | None = None,
        events: EventEmitterProtocol | None = None,
        address: str = RAFFLE_CONSUMER_ADDRESS,
    ) -> None:
        self._coordinator = coordinator
        self._subscription_id = subscription_id
        self._time = time_authority
        self._entrance_fee = entrance_fee
        self._interval = timedelta(seconds=interval_seconds)
        self._callback_gas_limit = callback_gas_limit
        self._gas_lane = gas_lane
        self._balances = balances if balances is not None else {}
        self._events = events if events is not None else InMemoryEventEmitter(self)
        self._address = address

        self._state = RaffleState.OPEN
        self._players: list[str] = []
        self._pot = 0
        self._recent_winner: str | None = None
        self._last_timestamp = time_authority.now()

    @property
    def address(self) -> str:
        return self._address

    @property
    def events(self) -> EventEmitterProtocol:
        return self._events

    @property
    def subscription_id(self) -> int:
        return self._subscription_id

    # Entry

    async def enter_raffle(self, player: str, value: int) -> None:
        """Enter player into the current round, paying value.

        Raises:
            InsufficientEntranceFeeError: If value is below the entrance fee.
            RaffleNotOpenError: If a winner is being calculated.
        """
        if value < self._entrance_fee:
            raise InsufficientEntranceFeeError(value, self._entrance_fee)
        if self._state is not RaffleState.OPEN:
            raise RaffleNotOpenError("Raffle is not open")

        self._balances[player] = self._balances.get(player, 0) - value
        self._pot += value
        self._players.append(player)
        await self._events.emit(RAFFLE_ENTER_EVENT, player)

    # Upkeep (the randomness request trigger)

    def check_upkeep(self) -> bool:
        """Return True when a winner request is due."""
        time_passed = self._time.now() - self._last_timestamp > self._interval
        return (
            self._state is RaffleState.OPEN
            and time_passed
            and bool(self._players)
            and self._pot > 0
        )

    async def perform_upkeep(self) -> int:
        """Close entries and request randomness for the winner.

        Returns:
            The coordinator's request id.

        Raises:
            UpkeepNotNeededError: If check_upkeep() is False.
        """
        if not self.check_upkeep():
            raise UpkeepNotNeededError(
                balance=self._pot,
                num_players=len(self._players),
                raffle_state=self._state.name,
            )

        self._state = RaffleState.CALCULATING
        try:
            request_id = await self._coordinator.request_random_words(
                self._address,
                self._subscription_id,
                NUM_WORDS,
                self._callback_gas_limit,
                key_hash=self._gas_lane,
                request_confirmations=REQUEST_CONFIRMATIONS,
            )
        except Exception:
            # Reverted request leaves the round open, as the transaction would
            self._state = RaffleState.OPEN
            raise

        logger.info("raffle_winner_requested", request_id=request_id)
        await self._events.emit(REQUESTED_RAFFLE_WINNER_EVENT, request_id)
        return request_id

    # Fulfillment callback

    async def raw_fulfill_random_words(
        self,
        caller: str,
        request_id: int,
        random_words: Sequence[int],
    ) -> None:
        if caller != self._coordinator.address:
            raise OnlyCoordinatorCanFulfillError(
                have=caller, want=self._coordinator.address
            )
        await self._fulfill_random_words(request_id, random_words)

    async def _fulfill_random_words(
        self, request_id: int, random_words: Sequence[int]
    ) -> None:
        winner = self._players[random_words[0] % len(self._players)]
        snapshot = (
            self._players,
            self._pot,
            self._state,
            self._recent_winner,
            self._last_timestamp,
            self._balances.get(winner),
        )

        self._recent_winner = winner
        self._balances[winner] = self._balances.get(winner, 0) + self._pot
        self._pot = 0
        self._players = []
        self._state = RaffleState.OPEN
        self._last_timestamp = self._time.now()

        logger.info("raffle_winner_picked", request_id=request_id, winner=winner)
        try:
            await self._events.emit(WINNER_PICKED_EVENT, winner)
        except BaseException:
            # A failed callback reverts the whole payout
            self._restore(winner, snapshot)
            logger.warning("raffle_payout_reverted", request_id=request_id)
            raise

    def _restore(self, winner: str, snapshot: tuple) -> None:
        (
            self._players,
            self._pot,
            self._state,
            self._recent_winner,
            self._last_timestamp,
            winner_balance,
        ) = snapshot
        if winner_balance is None:
            self._balances.pop(winner, None)
        else:
            self._balances[winner] = winner_balance

    # Views

    def get_entrance_fee(self) -> int:
        return self._entrance_fee

    def get_raffle_state(self) -> RaffleState:
        return self._state

    def get_player(self, index: int) -> str:
        """Return the entrant at index. Raises IndexError past the end."""
        if index < 0:
            raise IndexError(f"player index must be non-negative, got {index}")
        return self._players[index]

    def get_number_of_players(self) -> int:
        return len(self._players)

    def get_recent_winner(self) -> str | None:
        return self._recent_winner

    def get_latest_timestamp(self) -> datetime:
        return self._last_timestamp

    def get_interval(self) -> timedelta:
        return self._interval

    def get_pot(self) -> int:
        return self._pot

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, 0)
