"""Oracle mock deployment parameters.

The mock is provisioned with a base fee (flat juels per request) and a
gas price in juels per unit of callback gas.

Environment Variables:
- VRF_BASE_FEE_JUELS: Flat fee per request (default: 0.25 LINK)
- VRF_GAS_PRICE_LINK: Juels per callback gas unit (default: 1e9)
"""

from __future__ import annotations

from dataclasses import dataclass

from lottery_vrf.config._env import get_int_env
from lottery_vrf.domain.models import JUELS_PER_LINK, FeeSchedule

# 0.25 LINK per request
DEFAULT_BASE_FEE = JUELS_PER_LINK // 4

# Derived from the gas price of the target chain
DEFAULT_GAS_PRICE_LINK = 10**9


@dataclass(frozen=True)
class OracleMockConfig:
    """Constructor arguments for the oracle mock.

    Attributes:
        base_fee: Flat juels charged per request. Must be >= 0.
        gas_price_link: Juels per unit of callback gas. Must be >= 0.
    """

    base_fee: int = DEFAULT_BASE_FEE
    gas_price_link: int = DEFAULT_GAS_PRICE_LINK

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.base_fee < 0:
            raise ValueError(f"base_fee must be non-negative, got {self.base_fee}")
        if self.gas_price_link < 0:
            raise ValueError(
                f"gas_price_link must be non-negative, got {self.gas_price_link}"
            )

    def to_fee_schedule(self) -> FeeSchedule:
        return FeeSchedule(base_fee=self.base_fee, gas_price_link=self.gas_price_link)

    @classmethod
    def from_environment(cls) -> OracleMockConfig:
        """Create config from environment variables with defaults.

        Negative overrides fall back to the defaults.
        """
        base_fee = get_int_env("VRF_BASE_FEE_JUELS", DEFAULT_BASE_FEE)
        gas_price_link = get_int_env("VRF_GAS_PRICE_LINK", DEFAULT_GAS_PRICE_LINK)
        return cls(
            base_fee=base_fee if base_fee >= 0 else DEFAULT_BASE_FEE,
            gas_price_link=(
                gas_price_link if gas_price_link >= 0 else DEFAULT_GAS_PRICE_LINK
            ),
        )


DEFAULT_ORACLE_MOCK_CONFIG = OracleMockConfig()
