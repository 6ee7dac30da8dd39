"""Test helpers for lottery VRF tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    LocalDeployment: The pieces of a locally deployed raffle round
    RecordingConsumer: Consumer double that records or rejects callbacks

Usage:
    from tests.helpers import FakeTimeAuthority
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.local_deployment import LocalDeployment
from tests.helpers.recording_consumer import RecordingConsumer

__all__ = ["FakeTimeAuthority", "LocalDeployment", "RecordingConsumer"]
