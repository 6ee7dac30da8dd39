"""Domain models for the randomness request/fulfill protocol."""

from lottery_vrf.domain.models.fee_schedule import (
    JUELS_PER_LINK,
    FeeSchedule,
)
from lottery_vrf.domain.models.randomness_request import RandomnessRequest
from lottery_vrf.domain.models.subscription import (
    MAX_BALANCE,
    MAX_CONSUMERS,
    Subscription,
)

__all__: list[str] = [
    "FeeSchedule",
    "JUELS_PER_LINK",
    "MAX_BALANCE",
    "MAX_CONSUMERS",
    "RandomnessRequest",
    "Subscription",
]
