"""Time Authority Protocol - interface for timestamp provisioning.

Consumers read block-style timestamps through this port, and the
event-await harness measures elapsed time with its monotonic clock.
Tests inject FakeTimeAuthority to control time.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    For production:
        Use SystemTimeAuthority from lottery_vrf/infrastructure/adapters/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC)."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Values never decrease. Only differences are meaningful.
        """
        ...
