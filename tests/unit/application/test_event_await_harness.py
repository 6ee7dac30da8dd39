"""Unit tests for EventAwaitHarness and OneShotSubscription.

Covers listen-then-trigger ordering, bounded waits, pre-trigger state
capture and the resolve-after-validation discipline.
"""

import asyncio

import pytest

from lottery_vrf.application.services import (
    EventAwaitHarness,
    OneShotSubscription,
    Outcome,
)
from lottery_vrf.config import TEST_HARNESS_CONFIG, HarnessConfig
from lottery_vrf.domain.errors import EventTimeoutError
from lottery_vrf.infrastructure.adapters import InMemoryEventEmitter
from tests.helpers import FakeTimeAuthority

SHORT_TIMEOUT = 0.05


@pytest.fixture
def emitter() -> InMemoryEventEmitter:
    return InMemoryEventEmitter()


@pytest.fixture
def harness(fake_time_authority: FakeTimeAuthority) -> EventAwaitHarness:
    return EventAwaitHarness(fake_time_authority, TEST_HARNESS_CONFIG)


class TestListenerOrdering:
    """Listen-then-trigger never loses a synchronously emitted event."""

    @pytest.mark.asyncio
    async def test_synchronous_trigger_is_observed(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        """The event fires before the trigger returns and is still caught."""

        async def trigger() -> None:
            await emitter.emit("WinnerPicked", "0xwinner")

        outcome = await harness.await_event(emitter, "WinnerPicked", trigger)

        assert outcome.event.name == "WinnerPicked"
        assert outcome.args == ("0xwinner",)
        assert outcome.event.emitter is emitter

    @pytest.mark.asyncio
    async def test_trigger_then_listen_loses_the_event(
        self, emitter: InMemoryEventEmitter
    ) -> None:
        """Attaching after a synchronous trigger misses the event."""
        await emitter.emit("WinnerPicked", "0xwinner")

        late = OneShotSubscription(emitter, "WinnerPicked")
        late.attach()

        with pytest.raises(EventTimeoutError):
            await late.wait(SHORT_TIMEOUT)

    @pytest.mark.asyncio
    async def test_delayed_event_is_observed(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        """An event emitted after the trigger returns also resolves the wait."""

        async def emit_later() -> None:
            await asyncio.sleep(0)
            await emitter.emit("WinnerPicked", "0xlate")

        background: list[asyncio.Task[None]] = []

        async def trigger() -> None:
            background.append(asyncio.get_running_loop().create_task(emit_later()))

        outcome = await harness.await_event(
            emitter, "WinnerPicked", trigger, timeout_seconds=1.0
        )

        assert outcome.args == ("0xlate",)

    @pytest.mark.asyncio
    async def test_only_first_emission_is_captured(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        async def trigger() -> None:
            await emitter.emit("WinnerPicked", "0xfirst")
            await emitter.emit("WinnerPicked", "0xsecond")

        outcome = await harness.await_event(emitter, "WinnerPicked", trigger)

        assert outcome.args == ("0xfirst",)

    @pytest.mark.asyncio
    async def test_other_events_do_not_resolve(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        async def trigger() -> None:
            await emitter.emit("RaffleEnter", "0xplayer")

        with pytest.raises(EventTimeoutError):
            await harness.await_event(
                emitter, "WinnerPicked", trigger, timeout_seconds=SHORT_TIMEOUT
            )


class TestBoundedWait:
    """Timeouts fail loudly and release the listener."""

    @pytest.mark.asyncio
    async def test_timeout_raises_event_timeout(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        async def trigger() -> None:
            return None

        with pytest.raises(EventTimeoutError) as exc_info:
            await harness.await_event(
                emitter, "WinnerPicked", trigger, timeout_seconds=SHORT_TIMEOUT
            )

        assert exc_info.value.event_name == "WinnerPicked"
        assert exc_info.value.timeout_seconds == SHORT_TIMEOUT

    @pytest.mark.asyncio
    async def test_timeout_releases_listener(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        async def trigger() -> None:
            return None

        with pytest.raises(EventTimeoutError):
            await harness.await_event(
                emitter, "WinnerPicked", trigger, timeout_seconds=SHORT_TIMEOUT
            )

        assert emitter.listener_count("WinnerPicked") == 0

    @pytest.mark.asyncio
    async def test_stalled_trigger_times_out(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        """A trigger that never returns is covered by the same bound."""

        async def trigger() -> None:
            await asyncio.Event().wait()

        with pytest.raises(EventTimeoutError) as exc_info:
            await asyncio.wait_for(
                harness.await_event(
                    emitter, "WinnerPicked", trigger, timeout_seconds=SHORT_TIMEOUT
                ),
                timeout=2.0,
            )

        assert exc_info.value.timeout_seconds == SHORT_TIMEOUT
        assert emitter.listener_count("WinnerPicked") == 0

    @pytest.mark.asyncio
    async def test_trigger_own_timeout_is_not_an_event_timeout(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        async def trigger() -> None:
            raise TimeoutError("rpc timed out")

        with pytest.raises(TimeoutError, match="rpc timed out") as exc_info:
            await harness.await_event(
                emitter, "WinnerPicked", trigger, timeout_seconds=1.0
            )

        assert not isinstance(exc_info.value, EventTimeoutError)
        assert emitter.listener_count("WinnerPicked") == 0

    @pytest.mark.asyncio
    async def test_default_timeout_comes_from_config(
        self, fake_time_authority: FakeTimeAuthority, emitter: InMemoryEventEmitter
    ) -> None:
        harness = EventAwaitHarness(
            fake_time_authority, HarnessConfig(event_timeout_seconds=SHORT_TIMEOUT)
        )

        async def trigger() -> None:
            return None

        with pytest.raises(EventTimeoutError) as exc_info:
            await harness.await_event(emitter, "WinnerPicked", trigger)

        assert exc_info.value.timeout_seconds == SHORT_TIMEOUT

    @pytest.mark.asyncio
    async def test_trigger_failure_propagates_and_releases_listener(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        async def trigger() -> None:
            raise RuntimeError("request reverted")

        with pytest.raises(RuntimeError, match="request reverted"):
            await harness.await_event(emitter, "WinnerPicked", trigger)

        assert emitter.listener_count("WinnerPicked") == 0

    @pytest.mark.asyncio
    async def test_successful_await_leaves_no_listener(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        async def trigger() -> None:
            await emitter.emit("WinnerPicked")

        await harness.await_event(emitter, "WinnerPicked", trigger)

        assert emitter.listener_count("WinnerPicked") == 0


class TestPreTriggerCapture:
    """State captured before the trigger reflects the pre-trigger world."""

    @pytest.mark.asyncio
    async def test_pre_state_captured_before_trigger(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        balance = {"value": 100}

        async def trigger() -> None:
            balance["value"] = 250
            await emitter.emit("WinnerPicked")

        outcome = await harness.await_event(
            emitter,
            "WinnerPicked",
            trigger,
            capture_before=lambda: balance["value"],
        )

        assert outcome.pre_state == 100
        assert balance["value"] == 250

    @pytest.mark.asyncio
    async def test_capture_runs_after_attach_and_before_trigger(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        order: list[str] = []

        async def capture() -> int:
            order.append(f"capture:listeners={emitter.listener_count('Done')}")
            return 1

        async def trigger() -> None:
            order.append("trigger")
            await emitter.emit("Done")

        outcome = await harness.await_event(
            emitter, "Done", trigger, capture_before=capture
        )

        assert order == ["capture:listeners=1", "trigger"]
        assert outcome.pre_state == 1

    @pytest.mark.asyncio
    async def test_no_capture_gives_none(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        async def trigger() -> None:
            await emitter.emit("Done")

        outcome = await harness.await_event(emitter, "Done", trigger)

        assert outcome.pre_state is None

    @pytest.mark.asyncio
    async def test_elapsed_time_measured_from_trigger(
        self,
        fake_time_authority: FakeTimeAuthority,
        harness: EventAwaitHarness,
        emitter: InMemoryEventEmitter,
    ) -> None:
        async def trigger() -> None:
            fake_time_authority.advance(seconds=12)
            await emitter.emit("Done")

        outcome = await harness.await_event(emitter, "Done", trigger)

        assert outcome.elapsed_seconds == 12.0


class TestValidationDiscipline:
    """The outcome resolves only after validation succeeds."""

    @pytest.mark.asyncio
    async def test_validator_failure_rejects_outcome(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        def validate(outcome: Outcome[None]) -> None:
            assert outcome.args == ("0xexpected",), "wrong winner"

        async def trigger() -> None:
            await emitter.emit("WinnerPicked", "0xactual")

        with pytest.raises(AssertionError, match="wrong winner"):
            await harness.await_event(
                emitter, "WinnerPicked", trigger, validate=validate
            )

        assert emitter.listener_count("WinnerPicked") == 0

    @pytest.mark.asyncio
    async def test_validator_failure_does_not_reach_emitter(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        """The emitting call completes; only the awaited outcome fails."""
        emit_returned: list[bool] = []

        def validate(outcome: Outcome[None]) -> None:
            raise ValueError("bad state")

        async def trigger() -> None:
            await emitter.emit("WinnerPicked")
            emit_returned.append(True)

        with pytest.raises(ValueError, match="bad state"):
            await harness.await_event(
                emitter, "WinnerPicked", trigger, validate=validate
            )

        assert emit_returned == [True]

    @pytest.mark.asyncio
    async def test_async_validator_sees_pre_state(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        seen: list[int | None] = []

        async def validate(outcome: Outcome[int]) -> None:
            await asyncio.sleep(0)
            seen.append(outcome.pre_state)

        async def trigger() -> None:
            await emitter.emit("Done")

        outcome = await harness.await_event(
            emitter,
            "Done",
            trigger,
            capture_before=lambda: 41,
            validate=validate,
        )

        assert seen == [41]
        assert outcome.pre_state == 41

    @pytest.mark.asyncio
    async def test_validator_failure_during_trigger_still_rejects(
        self, harness: EventAwaitHarness, emitter: InMemoryEventEmitter
    ) -> None:
        """A rejection recorded mid-trigger surfaces after the trigger."""

        def validate(outcome: Outcome[None]) -> None:
            raise AssertionError("state mismatch")

        async def trigger() -> None:
            await emitter.emit("Done")
            await asyncio.sleep(0)

        with pytest.raises(AssertionError, match="state mismatch"):
            await harness.await_event(emitter, "Done", trigger, validate=validate)


class TestOneShotSubscription:
    """Lifecycle rules of OneShotSubscription."""

    @pytest.mark.asyncio
    async def test_wait_before_attach_raises(
        self, emitter: InMemoryEventEmitter
    ) -> None:
        subscription = OneShotSubscription(emitter, "Done")

        with pytest.raises(RuntimeError, match="attach"):
            await subscription.wait(SHORT_TIMEOUT)

    @pytest.mark.asyncio
    async def test_attach_is_single_use(self, emitter: InMemoryEventEmitter) -> None:
        subscription = OneShotSubscription(emitter, "Done")
        subscription.attach()

        with pytest.raises(RuntimeError, match="single-use"):
            subscription.attach()
        subscription.cancel()

    @pytest.mark.asyncio
    async def test_cancel_releases_listener(
        self, emitter: InMemoryEventEmitter
    ) -> None:
        subscription = OneShotSubscription(emitter, "Done")
        subscription.attach()
        assert emitter.listener_count("Done") == 1
        assert subscription.is_attached is True

        subscription.cancel()

        assert emitter.listener_count("Done") == 0
        assert subscription.is_attached is False

    @pytest.mark.asyncio
    async def test_wait_returns_observed_event(
        self, emitter: InMemoryEventEmitter
    ) -> None:
        subscription = OneShotSubscription(emitter, "Done")
        subscription.attach()

        await emitter.emit("Done", 1, 2)
        event = await subscription.wait(SHORT_TIMEOUT)

        assert event.args == (1, 2)
        assert event.first_arg == 1
