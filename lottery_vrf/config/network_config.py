"""Known networks and their raffle/coordinator parameters.

Development chains get the oracle mock deployed in-process. Every other
network binds to the coordinator address in its table entry.

Environment Variables:
- NETWORK: Name of the active network (default: hardhat)
"""

from __future__ import annotations

import os
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Networks that run against the in-process oracle mock
DEVELOPMENT_CHAINS: tuple[str, ...] = ("hardhat", "localhost")

NETWORK_ENV = "NETWORK"
DEFAULT_NETWORK = "hardhat"

_HEX32 = re.compile(r"^0x[0-9a-fA-F]{64}$")
_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")


class NetworkConfig(BaseModel):
    """Raffle deployment parameters for one network.

    Attributes:
        name: Network name used to select the entry.
        chain_id: Chain id of the network.
        entrance_fee: Raffle entrance fee in wei.
        gas_lane: Key hash selecting the coordinator's gas lane.
        subscription_id: Prepaid subscription on live networks
            (0 on development chains, where one is created at deploy time).
        callback_gas_limit: Gas budget for the fulfillment callback.
        interval_seconds: Minimum seconds between winner requests.
        vrf_coordinator: Deployed coordinator address. None on
            development chains.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    chain_id: int = Field(..., gt=0)
    entrance_fee: int = Field(..., ge=0)
    gas_lane: str
    subscription_id: int = Field(default=0, ge=0)
    callback_gas_limit: int = Field(..., gt=0)
    interval_seconds: int = Field(..., ge=0)
    vrf_coordinator: str | None = None

    @field_validator("gas_lane")
    @classmethod
    def validate_gas_lane(cls, v: str) -> str:
        """Gas lane must be a 0x-prefixed 32-byte hex string."""
        if not _HEX32.match(v):
            raise ValueError("gas_lane must be a 0x-prefixed 32-byte hex string")
        return v.lower()

    @field_validator("vrf_coordinator")
    @classmethod
    def validate_vrf_coordinator(cls, v: str | None) -> str | None:
        """Coordinator, when present, must be a 20-byte hex address."""
        if v is not None and not _ADDRESS.match(v):
            raise ValueError("vrf_coordinator must be a 0x-prefixed 20-byte address")
        return v

    @property
    def is_development(self) -> bool:
        return self.name in DEVELOPMENT_CHAINS


_GAS_LANE_500_GWEI = (
    "0x474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c"
)

NETWORK_CONFIG: dict[str, NetworkConfig] = {
    "hardhat": NetworkConfig(
        name="hardhat",
        chain_id=31337,
        entrance_fee=10**16,
        gas_lane=_GAS_LANE_500_GWEI,
        callback_gas_limit=500_000,
        interval_seconds=30,
    ),
    "localhost": NetworkConfig(
        name="localhost",
        chain_id=31337,
        entrance_fee=10**16,
        gas_lane=_GAS_LANE_500_GWEI,
        callback_gas_limit=500_000,
        interval_seconds=30,
    ),
    "sepolia": NetworkConfig(
        name="sepolia",
        chain_id=11155111,
        entrance_fee=10**16,
        gas_lane=_GAS_LANE_500_GWEI,
        subscription_id=0,
        callback_gas_limit=500_000,
        interval_seconds=30,
        vrf_coordinator="0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625",
    ),
}


def get_active_network() -> str:
    """Return the active network name from NETWORK (default: hardhat)."""
    return os.environ.get(NETWORK_ENV, DEFAULT_NETWORK).strip() or DEFAULT_NETWORK


def is_development_chain(network_name: str) -> bool:
    """Return True if network_name runs against the oracle mock."""
    return network_name in DEVELOPMENT_CHAINS


def get_network_config(network_name: str) -> NetworkConfig:
    """Look up the table entry for a network.

    Raises:
        KeyError: If the network is not configured.
    """
    try:
        return NETWORK_CONFIG[network_name]
    except KeyError:
        raise KeyError(
            f"Network {network_name!r} is not configured; "
            f"known networks: {', '.join(sorted(NETWORK_CONFIG))}"
        ) from None
