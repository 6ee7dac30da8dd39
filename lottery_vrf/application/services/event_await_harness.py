"""Event-await harness for verifying event-driven workflows.

Turns "wait until a contract emits X after I do Y" into a single
awaitable Outcome, without polling.

Ordering (always, in this order):
    1. Attach a one-shot listener for the completion event.
    2. Capture pre-trigger state.
    3. Run the trigger action.
    4. Wait for the listener to resolve.

Steps 3 and 4 share one time bound, so a trigger that never returns
fails with EventTimeoutError like an event that never arrives.

Attaching after the trigger is racy: a trigger that completes the
workflow before returning emits the event while nobody is listening,
and the wait then hangs until its bound expires.

Validation discipline: the outcome resolves only after validation
succeeds. The validator runs inside the listener, at the moment the
event is emitted. If it raises, the outcome is rejected with that
exception. The listener never resolves and then fails, and never
leaves the wait pending.

Because the validator runs inside the emitter's call, it must not await
anything that waits for the emitting call to finish.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lottery_vrf.application.ports.event_emitter import EventEmitterProtocol
from lottery_vrf.application.ports.time_authority import TimeAuthorityProtocol
from lottery_vrf.application.services.base import LoggingMixin
from lottery_vrf.config.harness_config import DEFAULT_HARNESS_CONFIG, HarnessConfig
from lottery_vrf.domain.errors.harness import EventTimeoutError
from lottery_vrf.domain.events import ObservedEvent
from lottery_vrf.infrastructure.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

T = TypeVar("T")

EventValidator = Callable[[ObservedEvent], Awaitable[None] | None]


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a successful await.

    Attributes:
        event: The completion event, with its emitted arguments.
        pre_state: Whatever capture_before returned, captured before
            the trigger ran. None when no capture was requested.
        elapsed_seconds: Time from trigger start to event arrival.
    """

    event: ObservedEvent
    pre_state: T | None = None
    elapsed_seconds: float = 0.0

    @property
    def args(self) -> tuple[Any, ...]:
        return self.event.args


class OneShotSubscription:
    """A single-use listener with an explicit lifecycle.

    attach() registers the listener; wait() resolves with the first
    matching event (after the optional validator passes); cancel()
    releases the registration. wait() always releases it on exit.

    Example:
        subscription = OneShotSubscription(raffle.events, "WinnerPicked")
        subscription.attach()
        await raffle.perform_upkeep()
        event = await subscription.wait(timeout_seconds=30)
    """

    def __init__(
        self,
        emitter: EventEmitterProtocol,
        event_name: str,
        validator: EventValidator | None = None,
    ) -> None:
        self._emitter = emitter
        self._event_name = event_name
        self._validator = validator
        self._future: asyncio.Future[ObservedEvent] | None = None
        # Stored once so off() matches the registered callable
        self._listener = self._on_event

    @property
    def event_name(self) -> str:
        return self._event_name

    @property
    def is_attached(self) -> bool:
        return self._future is not None and not self._future.done()

    def attach(self) -> None:
        """Register the listener. Must be called before the trigger runs.

        Raises:
            RuntimeError: If the subscription was already attached.
        """
        if self._future is not None:
            raise RuntimeError(
                f"Subscription for {self._event_name!r} is single-use"
            )
        self._future = asyncio.get_running_loop().create_future()
        self._emitter.once(self._event_name, self._listener)

    async def wait(self, timeout_seconds: float | None = None) -> ObservedEvent:
        """Wait for the event. None waits without a bound of its own.

        Raises:
            RuntimeError: If attach() was never called.
            EventTimeoutError: If the event does not arrive in time.
            Exception: Whatever the validator raised.
        """
        if self._future is None:
            raise RuntimeError("attach() must be called before wait()")
        try:
            return await asyncio.wait_for(self._future, timeout=timeout_seconds)
        except TimeoutError:
            raise EventTimeoutError(self._event_name, timeout_seconds) from None
        finally:
            self.cancel()

    def cancel(self) -> None:
        """Release the listener and abandon any pending wait."""
        self._emitter.off(self._event_name, self._listener)
        future = self._future
        if future is None:
            return
        if not future.done():
            future.cancel()
        elif not future.cancelled():
            # Mark a rejected outcome as retrieved
            future.exception()

    async def _on_event(self, *args: Any) -> None:
        future = self._future
        if future is None or future.done():
            return
        event = ObservedEvent(self._event_name, self._emitter, tuple(args))
        if self._validator is not None:
            try:
                result = self._validator(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as exc:
                if not future.done():
                    future.set_exception(exc)
                return
        if not future.done():
            future.set_result(event)


class EventAwaitHarness(LoggingMixin):
    """Drives a trigger and awaits the completion event it causes.

    Example:
        harness = EventAwaitHarness(time_authority)

        async def check(outcome: Outcome[int]) -> None:
            assert raffle.get_recent_winner() == player

        outcome = await harness.await_event(
            raffle.events,
            "WinnerPicked",
            trigger,
            capture_before=lambda: raffle.balance_of(player),
            validate=check,
        )
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        config: HarnessConfig = DEFAULT_HARNESS_CONFIG,
    ) -> None:
        self._time = time_authority
        self._config = config
        self._init_logger()

    async def await_event(
        self,
        emitter: EventEmitterProtocol,
        event_name: str,
        trigger_action: Callable[[], Awaitable[Any]],
        *,
        capture_before: Callable[[], T | Awaitable[T]] | None = None,
        validate: Callable[[Outcome[T]], Awaitable[None] | None] | None = None,
        timeout_seconds: float | None = None,
    ) -> Outcome[T]:
        """Attach, capture, trigger, then wait for event_name.

        Args:
            emitter: Where the completion event is emitted.
            event_name: Name of the completion event.
            trigger_action: Coroutine function that starts the workflow.
            capture_before: Returns pre-trigger state; runs after the
                listener is attached and strictly before the trigger.
            validate: Assertions on the outcome. Runs when the event
                arrives; raising rejects the outcome.
            timeout_seconds: Bound on the trigger and the wait together.
                Defaults to the configured event timeout.

        Returns:
            The validated Outcome.

        Raises:
            EventTimeoutError: If the event does not fire in time.
            Exception: Whatever trigger_action or validate raised.
        """
        timeout = (
            timeout_seconds
            if timeout_seconds is not None
            else self._config.event_timeout_seconds
        )
        if not get_correlation_id():
            set_correlation_id(generate_correlation_id())
        log = self._log_operation("await_event", event_name=event_name)

        pre_state: T | None = None
        started_at = self._time.monotonic()

        async def on_event(event: ObservedEvent) -> None:
            if validate is not None:
                result = validate(self._outcome(event, pre_state, started_at))
                if inspect.isawaitable(result):
                    await result

        subscription = OneShotSubscription(emitter, event_name, on_event)
        subscription.attach()
        log.debug("event_listener_attached")

        triggered = False
        bound: asyncio.Timeout | None = None
        try:
            if capture_before is not None:
                captured = capture_before()
                if inspect.isawaitable(captured):
                    captured = await captured
                pre_state = captured
            started_at = self._time.monotonic()

            # One bound covers a stalled trigger as well as a missing event
            async with asyncio.timeout(timeout) as bound:
                await trigger_action()
                triggered = True
                log.debug("event_trigger_completed")
                event = await subscription.wait()
        except TimeoutError:
            if bound is None or not bound.expired():
                log.warning("event_trigger_failed", error="TimeoutError")
                raise
            log.error(
                "event_await_timeout",
                timeout_seconds=timeout,
                trigger_completed=triggered,
            )
            raise EventTimeoutError(event_name, timeout) from None
        except Exception as exc:
            if triggered:
                log.error("event_validation_failed", error=str(exc))
            else:
                log.warning("event_trigger_failed", error=str(exc))
            raise
        finally:
            subscription.cancel()

        outcome = self._outcome(event, pre_state, started_at)
        log.info("event_observed", elapsed_seconds=outcome.elapsed_seconds)
        return outcome

    def _outcome(
        self, event: ObservedEvent, pre_state: T | None, started_at: float
    ) -> Outcome[T]:
        return Outcome(
            event=event,
            pre_state=pre_state,
            elapsed_seconds=self._time.monotonic() - started_at,
        )
