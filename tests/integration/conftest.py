"""Integration fixtures: a local deployment driven end to end.

The oracle mock comes out of the tagged deploy step exactly as a
development-chain run provisions it, rather than being constructed by
hand. Everything runs in-process; no network is required.

Usage:
    @pytest.mark.asyncio
    async def test_round(local_deployment: LocalDeployment) -> None:
        ...
"""

import pytest
import pytest_asyncio

from lottery_vrf.application.services import EventAwaitHarness
from lottery_vrf.bootstrap.deployments import (
    ORACLE_MOCK_DEPLOYMENT,
    DeploymentRegistry,
    build_deploy_context,
    run_deploy_scripts,
)
from lottery_vrf.config import (
    TEST_HARNESS_CONFIG,
    OracleMockConfig,
    get_network_config,
)
from lottery_vrf.infrastructure.stubs import (
    EntropySourceStub,
    RaffleConsumerStub,
    RandomnessOracleMock,
)
from tests.helpers import FakeTimeAuthority, LocalDeployment
from tests.helpers.constants import (
    BASE_FEE,
    GAS_PRICE_LINK,
    PLAYER,
    PLAYER_STARTING_BALANCE,
    SUBSCRIPTION_FUNDING,
)


@pytest.fixture
def harness(fake_time_authority: FakeTimeAuthority) -> EventAwaitHarness:
    return EventAwaitHarness(fake_time_authority, TEST_HARNESS_CONFIG)


@pytest_asyncio.fixture
async def local_deployment(
    fake_time_authority: FakeTimeAuthority,
) -> LocalDeployment:
    """Deploy the mocks on hardhat and wire a funded raffle to them."""
    registry = DeploymentRegistry()
    context = build_deploy_context(
        "hardhat",
        oracle_config=OracleMockConfig(
            base_fee=BASE_FEE, gas_price_link=GAS_PRICE_LINK
        ),
        entropy_source=EntropySourceStub(seed="integration", warn_on_init=False),
    )
    await run_deploy_scripts(registry, context)
    oracle = registry.get(ORACLE_MOCK_DEPLOYMENT).contract

    network = get_network_config("hardhat")
    subscription_id = await oracle.create_subscription()
    await oracle.fund_subscription(subscription_id, SUBSCRIPTION_FUNDING)
    raffle = RaffleConsumerStub(
        oracle,
        subscription_id,
        fake_time_authority,
        entrance_fee=network.entrance_fee,
        interval_seconds=network.interval_seconds,
        callback_gas_limit=100_000,
        gas_lane=network.gas_lane,
        balances={PLAYER: PLAYER_STARTING_BALANCE},
    )
    await oracle.add_consumer(subscription_id, raffle.address)
    oracle.register_consumer(raffle)

    return LocalDeployment(
        registry=registry,
        network=network,
        oracle=oracle,
        raffle=raffle,
        subscription_id=subscription_id,
    )
