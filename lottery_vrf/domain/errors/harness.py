"""Event-await harness errors."""

from lottery_vrf.domain.exceptions import LotteryVRFError


class HarnessError(LotteryVRFError):
    """Base class for event-await harness errors."""

    pass


class EventTimeoutError(HarnessError):
    """Raised when an awaited completion event never fires.

    Indicates the environment never reached the expected state. The
    listener has already been released when this is raised.

    Attributes:
        event_name: Name of the event that was awaited.
        timeout_seconds: The bound that elapsed.
    """

    def __init__(self, event_name: str, timeout_seconds: float) -> None:
        self.event_name = event_name
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Event {event_name!r} did not fire within {timeout_seconds}s"
        )
