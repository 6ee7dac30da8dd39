"""Event-await harness configuration.

A staging round waits on a live coordinator and upkeep network, so the
default bound is generous. Unit tests use TEST_HARNESS_CONFIG.

Environment Variables:
- EVENT_TIMEOUT_SECONDS: Bound on each awaited event (default: 500,
  min: 0.01, max: 3600)
"""

from __future__ import annotations

from dataclasses import dataclass

from lottery_vrf.config._env import get_float_env

DEFAULT_EVENT_TIMEOUT_SECONDS = 500.0

# Floor keeps a zero or negative override from disabling the wait
MIN_EVENT_TIMEOUT_SECONDS = 0.01

MAX_EVENT_TIMEOUT_SECONDS = 3600.0


@dataclass(frozen=True)
class HarnessConfig:
    """Configuration for EventAwaitHarness.

    Attributes:
        event_timeout_seconds: Bound on each awaited event.
            Default: 500 seconds.
            Minimum: 0.01.
            Maximum: 3600 (1 hour).
    """

    event_timeout_seconds: float = DEFAULT_EVENT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if (
            not MIN_EVENT_TIMEOUT_SECONDS
            <= self.event_timeout_seconds
            <= MAX_EVENT_TIMEOUT_SECONDS
        ):
            raise ValueError(
                f"event_timeout_seconds must be between {MIN_EVENT_TIMEOUT_SECONDS} "
                f"and {MAX_EVENT_TIMEOUT_SECONDS}, got {self.event_timeout_seconds}"
            )

    @classmethod
    def from_environment(cls) -> HarnessConfig:
        """Create config from EVENT_TIMEOUT_SECONDS, clamped to the valid range."""
        timeout = get_float_env(
            "EVENT_TIMEOUT_SECONDS", DEFAULT_EVENT_TIMEOUT_SECONDS
        )
        timeout = max(
            MIN_EVENT_TIMEOUT_SECONDS,
            min(timeout, MAX_EVENT_TIMEOUT_SECONDS),
        )
        return cls(event_timeout_seconds=timeout)


DEFAULT_HARNESS_CONFIG = HarnessConfig()

# Short bound for unit tests so a missed event fails fast
TEST_HARNESS_CONFIG = HarnessConfig(event_timeout_seconds=1.0)
