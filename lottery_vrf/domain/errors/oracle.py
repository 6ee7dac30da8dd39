"""Randomness coordinator errors.

All of these indicate caller misuse of the coordinator. They are
surfaced to the caller as-is and are never retried.
"""

from lottery_vrf.domain.exceptions import LotteryVRFError


class OracleError(LotteryVRFError):
    """Base class for randomness coordinator errors."""

    pass


class UnknownSubscriptionError(OracleError):
    """Raised when a subscription id was never created.

    Attributes:
        subscription_id: The id that was looked up.
    """

    def __init__(self, subscription_id: int) -> None:
        self.subscription_id = subscription_id
        super().__init__(f"Unknown subscription: {subscription_id}")


class AmountOverflowError(OracleError):
    """Raised when funding would push a balance past the balance ceiling.

    Balances never saturate; the funding call is rejected instead.

    Attributes:
        subscription_id: Subscription being funded.
        balance: Balance before the rejected call.
        amount: Amount that was offered.
        max_balance: The balance ceiling.
    """

    def __init__(
        self,
        subscription_id: int,
        balance: int,
        amount: int,
        max_balance: int,
    ) -> None:
        self.subscription_id = subscription_id
        self.balance = balance
        self.amount = amount
        self.max_balance = max_balance
        super().__init__(
            f"Funding subscription {subscription_id} with {amount} "
            f"overflows balance {balance} (max {max_balance})"
        )


class UnfundedError(OracleError):
    """Raised when a subscription balance cannot cover a request fee.

    Attributes:
        subscription_id: Subscription charged for the request.
        balance: Current balance.
        required: Fee the request would cost.
    """

    def __init__(self, subscription_id: int, balance: int, required: int) -> None:
        self.subscription_id = subscription_id
        self.balance = balance
        self.required = required
        super().__init__(
            f"Subscription {subscription_id} balance {balance} "
            f"is below required fee {required}"
        )


class UnknownRequestError(OracleError):
    """Raised when fulfilling a request id that was never issued."""

    def __init__(self, request_id: int) -> None:
        self.request_id = request_id
        super().__init__(f"Unknown request: {request_id}")


class AlreadyFulfilledError(OracleError):
    """Raised on a second fulfillment attempt for the same request."""

    def __init__(self, request_id: int) -> None:
        self.request_id = request_id
        super().__init__(f"Request {request_id} already fulfilled")


class InvalidConsumerError(OracleError):
    """Raised when a consumer is not authorized on a subscription.

    Also raised when removing a consumer that was never added, or when
    fulfilling for a consumer address with no registered callback.
    """

    def __init__(self, subscription_id: int, consumer: str) -> None:
        self.subscription_id = subscription_id
        self.consumer = consumer
        super().__init__(
            f"Consumer {consumer} is not authorized on subscription {subscription_id}"
        )


class TooManyConsumersError(OracleError):
    """Raised when adding a consumer past the per-subscription limit."""

    def __init__(self, subscription_id: int, limit: int) -> None:
        self.subscription_id = subscription_id
        self.limit = limit
        super().__init__(
            f"Subscription {subscription_id} already has {limit} consumers"
        )


class InvalidRandomWordsError(OracleError):
    """Raised when override words do not match the requested word count."""

    def __init__(self, request_id: int, expected: int, actual: int) -> None:
        self.request_id = request_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Request {request_id} expects {expected} random words, got {actual}"
        )
