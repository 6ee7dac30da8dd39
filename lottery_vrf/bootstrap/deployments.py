"""Tag-addressable deployment steps.

Deploy steps are coroutine functions tagged with the names they answer
to. run_deploy_scripts() runs every step whose tags intersect the
requested ones, in registration order, recording results in a
DeploymentRegistry.

Whether the oracle mock is provisioned is decided once, from the active
network, when the DeployContext is built. The step itself only reads
the resulting flag.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import structlog

from lottery_vrf.application.ports.entropy_source import EntropySourceProtocol
from lottery_vrf.config.network_config import get_active_network, is_development_chain
from lottery_vrf.config.oracle_config import OracleMockConfig
from lottery_vrf.domain.errors.deployment import DeploymentNotFoundError
from lottery_vrf.infrastructure.stubs.entropy_source_stub import EntropySourceStub
from lottery_vrf.infrastructure.stubs.randomness_oracle_mock import (
    RandomnessOracleMock,
)

logger = structlog.get_logger(__name__)

ORACLE_MOCK_DEPLOYMENT = "RandomnessOracleMock"

DEFAULT_DEPLOYER = "0x" + "f3" * 20


@dataclass(frozen=True)
class Deployment:
    """A recorded deployment.

    Attributes:
        name: Name the deployment is looked up by.
        contract: The deployed object.
        deployer: Account that deployed it.
        args: Constructor arguments, for inspection.
        tags: Tags of the step that produced it.
    """

    name: str
    contract: Any
    deployer: str
    args: tuple[Any, ...] = ()
    tags: frozenset[str] = frozenset()


class DeploymentRegistry:
    """Named deployments produced during one run."""

    def __init__(self) -> None:
        self._deployments: dict[str, Deployment] = {}

    def record(self, deployment: Deployment) -> None:
        self._deployments[deployment.name] = deployment

    def get(self, name: str) -> Deployment:
        """Return the deployment recorded under name.

        Raises:
            DeploymentNotFoundError: If nothing was recorded under name.
        """
        try:
            return self._deployments[name]
        except KeyError:
            raise DeploymentNotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._deployments

    def names(self) -> list[str]:
        return list(self._deployments)


@dataclass(frozen=True)
class DeployContext:
    """Inputs shared by every deploy step.

    Attributes:
        network: Name of the network being deployed to.
        deployer: Account deploying.
        deploy_mocks: Whether mock contracts are provisioned.
        oracle_config: Oracle mock constructor parameters.
        entropy_source: Entropy handed to the oracle mock.
    """

    network: str
    deployer: str
    deploy_mocks: bool
    oracle_config: OracleMockConfig = field(default_factory=OracleMockConfig)
    entropy_source: EntropySourceProtocol | None = None


DeployStep = Callable[[DeploymentRegistry, DeployContext], Awaitable[Any]]

_DEPLOY_STEPS: list[tuple[DeployStep, frozenset[str]]] = []


def deploy_step(*tags: str) -> Callable[[DeployStep], DeployStep]:
    """Register a deploy step under the given tags."""

    def decorator(step: DeployStep) -> DeployStep:
        _DEPLOY_STEPS.append((step, frozenset(tags)))
        return step

    return decorator


def build_deploy_context(
    network: str | None = None,
    deployer: str = DEFAULT_DEPLOYER,
    oracle_config: OracleMockConfig | None = None,
    entropy_source: EntropySourceProtocol | None = None,
) -> DeployContext:
    """Build the context for a deployment run.

    Args:
        network: Network name. Defaults to the NETWORK environment variable.
        deployer: Deploying account.
        oracle_config: Oracle mock parameters. Defaults to the environment.
        entropy_source: Entropy for the oracle mock. Defaults to a
            seeded EntropySourceStub.
    """
    network_name = network or get_active_network()
    return DeployContext(
        network=network_name,
        deployer=deployer,
        deploy_mocks=is_development_chain(network_name),
        oracle_config=oracle_config or OracleMockConfig.from_environment(),
        entropy_source=entropy_source,
    )


@deploy_step("all", "mocks")
async def deploy_mocks(
    registry: DeploymentRegistry, context: DeployContext
) -> RandomnessOracleMock | None:
    """Provision the oracle mock when mocks are enabled.

    Returns:
        The deployed mock, or None when mocks are disabled.
    """
    if not context.deploy_mocks:
        return None

    config = context.oracle_config
    log = logger.bind(network=context.network, deployer=context.deployer)
    log.info("mocks_deploying")

    oracle = RandomnessOracleMock(
        fee_schedule=config.to_fee_schedule(),
        entropy_source=context.entropy_source or EntropySourceStub(),
    )
    registry.record(
        Deployment(
            name=ORACLE_MOCK_DEPLOYMENT,
            contract=oracle,
            deployer=context.deployer,
            args=(config.base_fee, config.gas_price_link),
            tags=frozenset({"all", "mocks"}),
        )
    )

    log.info(
        "mocks_deployed",
        address=oracle.address,
        base_fee=config.base_fee,
        gas_price_link=config.gas_price_link,
    )
    return oracle


async def run_deploy_scripts(
    registry: DeploymentRegistry,
    context: DeployContext,
    tags: Iterable[str] = ("all",),
) -> list[str]:
    """Run every registered step whose tags intersect tags.

    Returns:
        Names of the deployments recorded by this run.
    """
    wanted = frozenset(tags)
    before = set(registry.names())
    for step, step_tags in _DEPLOY_STEPS:
        if step_tags & wanted:
            await step(registry, context)
    return [name for name in registry.names() if name not in before]
