"""Configuration for the oracle mock, the harness and known networks."""

from lottery_vrf.config.harness_config import (
    DEFAULT_HARNESS_CONFIG,
    TEST_HARNESS_CONFIG,
    HarnessConfig,
)
from lottery_vrf.config.network_config import (
    DEVELOPMENT_CHAINS,
    NETWORK_CONFIG,
    NetworkConfig,
    get_active_network,
    get_network_config,
    is_development_chain,
)
from lottery_vrf.config.oracle_config import (
    DEFAULT_ORACLE_MOCK_CONFIG,
    OracleMockConfig,
)

__all__: list[str] = [
    "DEFAULT_HARNESS_CONFIG",
    "DEFAULT_ORACLE_MOCK_CONFIG",
    "DEVELOPMENT_CHAINS",
    "HarnessConfig",
    "NETWORK_CONFIG",
    "NetworkConfig",
    "OracleMockConfig",
    "TEST_HARNESS_CONFIG",
    "get_active_network",
    "get_network_config",
    "is_development_chain",
]
