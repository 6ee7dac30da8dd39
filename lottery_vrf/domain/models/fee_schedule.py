"""Fee schedule for randomness requests.

Amounts are integers in juels (1 LINK = 10**18 juels), the fixed-point
unit the coordinator charges in.
"""

from __future__ import annotations

from dataclasses import dataclass

JUELS_PER_LINK = 10**18


@dataclass(frozen=True)
class FeeSchedule:
    """Immutable pricing for randomness requests.

    Attributes:
        base_fee: Flat cost charged for every request, in juels.
        gas_price_link: Juels charged per unit of callback gas.
    """

    base_fee: int
    gas_price_link: int

    def __post_init__(self) -> None:
        """Validate fee values."""
        if self.base_fee < 0:
            raise ValueError(f"base_fee must be non-negative, got {self.base_fee}")
        if self.gas_price_link < 0:
            raise ValueError(
                f"gas_price_link must be non-negative, got {self.gas_price_link}"
            )

    def compute_fee(self, callback_gas_limit: int) -> int:
        """Return the fee for a request with the given callback gas limit."""
        if callback_gas_limit < 0:
            raise ValueError(
                f"callback_gas_limit must be non-negative, got {callback_gas_limit}"
            )
        return self.base_fee + self.gas_price_link * callback_gas_limit
