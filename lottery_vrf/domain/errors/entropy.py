"""Entropy source errors.

When entropy cannot be obtained, fulfillment halts rather than
falling back to weak randomness.
"""

from lottery_vrf.domain.exceptions import LotteryVRFError


class EntropyUnavailableError(LotteryVRFError):
    """Raised when the entropy source cannot supply entropy.

    Attributes:
        source_identifier: The entropy source that failed
        reason: Reason for failure (if known)
    """

    def __init__(
        self,
        source_identifier: str | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialize entropy unavailable error.

        Args:
            source_identifier: The entropy source that failed
            reason: Reason for failure (if known)
        """
        self.source_identifier = source_identifier
        self.reason = reason
        message = "Entropy source unavailable"
        if source_identifier:
            message += f" ({source_identifier})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
