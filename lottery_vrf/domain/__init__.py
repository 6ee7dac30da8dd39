"""
Domain layer - Protocol types and errors for the randomness workflow.

This layer contains:
- Domain models (Subscription, RandomnessRequest, FeeSchedule)
- Domain events (ObservedEvent, event names)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or config.
Only stdlib and typing imports are allowed.
"""

from lottery_vrf.domain.exceptions import LotteryVRFError
from lottery_vrf.domain.models import FeeSchedule, RandomnessRequest, Subscription

__all__: list[str] = [
    "LotteryVRFError",
    "FeeSchedule",
    "RandomnessRequest",
    "Subscription",
]
