"""
Pytest configuration and shared fixtures for lottery VRF tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Time-dependent tests use FakeTimeAuthority, never sleeps
"""

import pytest
import pytest_asyncio

from lottery_vrf.domain.models import JUELS_PER_LINK, FeeSchedule
from lottery_vrf.infrastructure.adapters import InMemoryEventEmitter
from lottery_vrf.infrastructure.stubs import (
    EntropySourceStub,
    RaffleConsumerStub,
    RandomnessOracleMock,
)
from tests.helpers import FakeTimeAuthority, RecordingConsumer
from tests.helpers.constants import (
    BASE_FEE,
    CONSUMER_ADDRESS,
    ENTRANCE_FEE,
    GAS_PRICE_LINK,
    INTERVAL_SECONDS,
    PLAYER,
    PLAYER_STARTING_BALANCE,
    RAFFLE_CALLBACK_GAS_LIMIT,
)


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from lottery_vrf import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Frozen clock at 2026-01-01T00:00:00Z."""
    return FakeTimeAuthority()


@pytest.fixture
def fee_schedule() -> FeeSchedule:
    """0.25 LINK base fee, 1e9 juels per callback gas."""
    return FeeSchedule(base_fee=BASE_FEE, gas_price_link=GAS_PRICE_LINK)


@pytest.fixture
def entropy_source() -> EntropySourceStub:
    return EntropySourceStub(seed="tests", warn_on_init=False)


@pytest.fixture
def oracle_events() -> InMemoryEventEmitter:
    return InMemoryEventEmitter()


@pytest.fixture
def oracle(
    fee_schedule: FeeSchedule,
    entropy_source: EntropySourceStub,
    oracle_events: InMemoryEventEmitter,
) -> RandomnessOracleMock:
    return RandomnessOracleMock(fee_schedule, entropy_source, events=oracle_events)


@pytest.fixture
def consumer(oracle: RandomnessOracleMock) -> RecordingConsumer:
    """A consumer registered with the oracle for callbacks."""
    recording = RecordingConsumer(CONSUMER_ADDRESS)
    oracle.register_consumer(recording)
    return recording


@pytest_asyncio.fixture
async def raffle(
    oracle: RandomnessOracleMock, fake_time_authority: FakeTimeAuthority
) -> RaffleConsumerStub:
    """Raffle wired to a funded subscription (1 LINK) on the oracle mock."""
    subscription_id = await oracle.create_subscription()
    await oracle.fund_subscription(subscription_id, JUELS_PER_LINK)
    consumer = RaffleConsumerStub(
        oracle,
        subscription_id,
        fake_time_authority,
        entrance_fee=ENTRANCE_FEE,
        interval_seconds=INTERVAL_SECONDS,
        callback_gas_limit=RAFFLE_CALLBACK_GAS_LIMIT,
        balances={PLAYER: PLAYER_STARTING_BALANCE},
    )
    await oracle.add_consumer(subscription_id, consumer.address)
    oracle.register_consumer(consumer)
    return consumer
