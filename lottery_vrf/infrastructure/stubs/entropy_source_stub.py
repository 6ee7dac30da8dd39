"""Entropy source stubs for local randomness fulfillment.

EntropySourceStub feeds the oracle mock a fixed, seed-derived entropy so
fulfilled words are reproducible across runs, which makes failing
scenarios easy to replay. SecureEntropySourceStub draws from os.urandom
when reproducibility is not wanted.

WARNING: These stubs are NOT verifiable randomness. Live networks get
their randomness from the deployed coordinator.
"""

from __future__ import annotations

import hashlib
import os
import warnings

from lottery_vrf.application.ports.entropy_source import EntropySourceProtocol
from lottery_vrf.domain.errors.entropy import EntropyUnavailableError

# DEV MODE warning prefix
DEV_MODE_WARNING = "[DEV MODE] EntropySourceStub in use - NOT VERIFIABLE RANDOMNESS"

DEFAULT_SEED = "lottery-vrf-local"


class EntropySourceStub(EntropySourceProtocol):
    """Deterministic entropy source for local and test runs.

    Features:
    - Seed-derived entropy for reproducible fulfillment
    - Failure simulation for error path testing
    - DEV MODE warning on initialization

    Example:
        stub = EntropySourceStub(seed="scenario-7")
        entropy = await stub.get_entropy()

        stub.set_failure(True)
        await stub.get_entropy()  # Raises EntropyUnavailableError
    """

    SOURCE_IDENTIFIER = "dev-stub"

    def __init__(
        self,
        seed: str = DEFAULT_SEED,
        warn_on_init: bool = True,
    ) -> None:
        """Initialize entropy source stub.

        Args:
            seed: String hashed into the entropy bytes.
            warn_on_init: If True, emit DEV MODE warning (default True)
        """
        if warn_on_init:
            warnings.warn(DEV_MODE_WARNING, UserWarning, stacklevel=2)

        self._entropy = self._entropy_from_seed(seed)
        self._should_fail = False
        self._failure_reason: str | None = None

    @staticmethod
    def _entropy_from_seed(seed: str) -> bytes:
        return hashlib.sha256(seed.encode("utf-8")).digest()

    async def get_entropy(self) -> bytes:
        """Get entropy bytes.

        Returns:
            The configured 32 entropy bytes.

        Raises:
            EntropyUnavailableError: If failure simulation is enabled.
        """
        if self._should_fail:
            raise EntropyUnavailableError(
                source_identifier=self.SOURCE_IDENTIFIER,
                reason=self._failure_reason or "Simulated entropy failure",
            )
        return self._entropy

    async def get_source_identifier(self) -> str:
        return self.SOURCE_IDENTIFIER

    async def is_available(self) -> bool:
        return not self._should_fail

    # Test control methods

    def set_seed(self, seed: str) -> None:
        """Replace the entropy with one derived from seed."""
        self._entropy = self._entropy_from_seed(seed)

    def set_failure(self, should_fail: bool, reason: str | None = None) -> None:
        """Configure failure simulation.

        Args:
            should_fail: If True, get_entropy() will raise EntropyUnavailableError
            reason: Optional reason to include in the error
        """
        self._should_fail = should_fail
        self._failure_reason = reason

    @property
    def current_entropy(self) -> bytes:
        """Get the currently configured entropy (for test assertions)."""
        return self._entropy


class SecureEntropySourceStub(EntropySourceProtocol):
    """Stub that uses OS random for unpredictable fulfillment.

    Use this when a scenario must not depend on a particular word.
    """

    SOURCE_IDENTIFIER = "dev-secure-stub"

    def __init__(self, warn_on_init: bool = True) -> None:
        if warn_on_init:
            warnings.warn(
                "[DEV MODE] SecureEntropySourceStub - uses os.urandom, NOT verifiable",
                UserWarning,
                stacklevel=2,
            )
        self._should_fail = False
        self._failure_reason: str | None = None

    async def get_entropy(self) -> bytes:
        """Get 32 bytes from os.urandom()."""
        if self._should_fail:
            raise EntropyUnavailableError(
                source_identifier=self.SOURCE_IDENTIFIER,
                reason=self._failure_reason or "Simulated failure",
            )
        return os.urandom(32)

    async def get_source_identifier(self) -> str:
        return self.SOURCE_IDENTIFIER

    async def is_available(self) -> bool:
        return not self._should_fail

    def set_failure(self, should_fail: bool, reason: str | None = None) -> None:
        """Configure failure simulation."""
        self._should_fail = should_fail
        self._failure_reason = reason
