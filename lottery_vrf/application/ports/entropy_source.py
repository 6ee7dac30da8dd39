"""Entropy source port definition.

Defines the abstract interface the oracle mock draws entropy from when
deriving random words. Infrastructure adapters must implement this
protocol.
"""

from abc import ABC, abstractmethod


class EntropySourceProtocol(ABC):
    """Abstract protocol for entropy source operations.

    If entropy cannot be obtained, fulfillment halts rather than
    deriving words from weak randomness.

    Development/Testing:
    - EntropySourceStub: Deterministic entropy from a seed
    - SecureEntropySourceStub: os.urandom entropy
    """

    @abstractmethod
    async def get_entropy(self) -> bytes:
        """Get entropy bytes.

        Returns:
            At least 32 bytes of entropy.

        Raises:
            EntropyUnavailableError: If entropy cannot be obtained.
        """
        ...

    @abstractmethod
    async def get_source_identifier(self) -> str:
        """Get a human-readable identifier for the entropy source.

        Returns:
            Identifier used in logs, e.g. "dev-stub".
        """
        ...

    @abstractmethod
    async def is_available(self) -> bool:
        """Check if the entropy source is currently available."""
        ...
