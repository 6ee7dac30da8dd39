"""System clock implementation of TimeAuthorityProtocol."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from lottery_vrf.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Reads wall-clock time in UTC and the process monotonic clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
