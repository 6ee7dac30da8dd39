"""Base exception classes for the lottery VRF domain layer."""


class LotteryVRFError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.

    Subclass families:
    - OracleError: misuse of the randomness coordinator
    - HarnessError: event-await failures
    - ConsumerError: rejections raised by a randomness consumer
    - DeploymentError: missing or invalid deployments
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
