"""Domain errors for the randomness request/fulfill workflow.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from LotteryVRFError.
"""

from lottery_vrf.domain.errors.consumer import (
    ConsumerError,
    InsufficientEntranceFeeError,
    OnlyCoordinatorCanFulfillError,
    RaffleNotOpenError,
    UpkeepNotNeededError,
)
from lottery_vrf.domain.errors.deployment import (
    DeploymentError,
    DeploymentNotFoundError,
)
from lottery_vrf.domain.errors.entropy import EntropyUnavailableError
from lottery_vrf.domain.errors.harness import EventTimeoutError, HarnessError
from lottery_vrf.domain.errors.oracle import (
    AlreadyFulfilledError,
    AmountOverflowError,
    InvalidConsumerError,
    InvalidRandomWordsError,
    OracleError,
    TooManyConsumersError,
    UnfundedError,
    UnknownRequestError,
    UnknownSubscriptionError,
)

__all__: list[str] = [
    "AlreadyFulfilledError",
    "AmountOverflowError",
    "ConsumerError",
    "DeploymentError",
    "DeploymentNotFoundError",
    "EntropyUnavailableError",
    "EventTimeoutError",
    "HarnessError",
    "InsufficientEntranceFeeError",
    "InvalidConsumerError",
    "InvalidRandomWordsError",
    "OnlyCoordinatorCanFulfillError",
    "OracleError",
    "RaffleNotOpenError",
    "TooManyConsumersError",
    "UnfundedError",
    "UnknownRequestError",
    "UnknownSubscriptionError",
    "UpkeepNotNeededError",
]
