"""Infrastructure adapters implementing application ports."""

from lottery_vrf.infrastructure.adapters.in_memory_event_emitter import (
    InMemoryEventEmitter,
)
from lottery_vrf.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)

__all__: list[str] = ["InMemoryEventEmitter", "SystemTimeAuthority"]
