"""Port definitions (abstract interfaces) for the randomness workflow."""

from lottery_vrf.application.ports.entropy_source import EntropySourceProtocol
from lottery_vrf.application.ports.event_emitter import (
    EventEmitterProtocol,
    EventListener,
)
from lottery_vrf.application.ports.randomness_consumer import (
    RandomnessConsumerProtocol,
)
from lottery_vrf.application.ports.randomness_coordinator import (
    RandomnessCoordinatorProtocol,
)
from lottery_vrf.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "EntropySourceProtocol",
    "EventEmitterProtocol",
    "EventListener",
    "RandomnessConsumerProtocol",
    "RandomnessCoordinatorProtocol",
    "TimeAuthorityProtocol",
]
