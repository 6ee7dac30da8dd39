"""Errors raised by randomness consumers (the raffle boundary)."""

from lottery_vrf.domain.exceptions import LotteryVRFError


class ConsumerError(LotteryVRFError):
    """Base class for consumer-side rejections."""

    pass


class OnlyCoordinatorCanFulfillError(ConsumerError):
    """Raised when a fulfillment callback comes from an untrusted caller.

    Attributes:
        have: Address that attempted the callback.
        want: The trusted coordinator address.
    """

    def __init__(self, have: str, want: str) -> None:
        self.have = have
        self.want = want
        super().__init__(f"Only coordinator {want} can fulfill, got {have}")


class RaffleNotOpenError(ConsumerError):
    """Raised when entering a raffle that is not accepting players."""

    pass


class InsufficientEntranceFeeError(ConsumerError):
    """Raised when an entry pays less than the entrance fee."""

    def __init__(self, paid: int, required: int) -> None:
        self.paid = paid
        self.required = required
        super().__init__(f"Entrance fee {required} required, got {paid}")


class UpkeepNotNeededError(ConsumerError):
    """Raised when a winner request is triggered before it is due.

    Attributes:
        balance: Current raffle pot.
        num_players: Number of entrants.
        raffle_state: Current state name.
    """

    def __init__(self, balance: int, num_players: int, raffle_state: str) -> None:
        self.balance = balance
        self.num_players = num_players
        self.raffle_state = raffle_state
        super().__init__(
            f"Upkeep not needed (balance={balance}, players={num_players}, "
            f"state={raffle_state})"
        )
