"""Infrastructure stubs for local networks and testing.

WARNING: Nothing here is verifiable randomness. Live networks bind the
coordinator port to a deployed coordinator instead.
"""

from lottery_vrf.infrastructure.stubs.entropy_source_stub import (
    DEV_MODE_WARNING,
    EntropySourceStub,
    SecureEntropySourceStub,
)
from lottery_vrf.infrastructure.stubs.raffle_consumer_stub import (
    RAFFLE_CONSUMER_ADDRESS,
    RaffleConsumerStub,
    RaffleState,
)
from lottery_vrf.infrastructure.stubs.randomness_oracle_mock import (
    MAX_NUM_WORDS,
    MOCK_COORDINATOR_ADDRESS,
    RandomnessOracleMock,
    derive_random_words,
)

__all__: list[str] = [
    "DEV_MODE_WARNING",
    "EntropySourceStub",
    "MAX_NUM_WORDS",
    "MOCK_COORDINATOR_ADDRESS",
    "RAFFLE_CONSUMER_ADDRESS",
    "RaffleConsumerStub",
    "RaffleState",
    "RandomnessOracleMock",
    "SecureEntropySourceStub",
    "derive_random_words",
]
