"""Application services."""

from lottery_vrf.application.services.event_await_harness import (
    EventAwaitHarness,
    OneShotSubscription,
    Outcome,
)

__all__: list[str] = ["EventAwaitHarness", "OneShotSubscription", "Outcome"]
