"""Single-owner reducer applying queued events to the pomodoro timer state."""

from __future__ import annotations

import asyncio
import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional

from notify import NotificationError
from pomodoro import (
    BREAK_STATES,
    Idle,
    Paused,
    TimerState,
    TimerStateError,
    Work,
    encode_state,
    initial_state,
    is_due,
)

from .contracts import Clock, NotifierLike
from .events import Event, Reset, Status, Tick, Toggle
from .messages import TEXT_RESET, finish_text, toggle_text

REASON_STARTED = "started"
REASON_PAUSED = "paused"
REASON_RESUMED = "resumed"
REASON_BREAK_LOCKED = "break_locked"
REASON_RESET = "reset"
REASON_FINISHED = "finished"
REASON_NOT_DUE = "not_due"
REASON_REPLIED = "replied"
REASON_REQUESTER_GONE = "requester_gone"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of applying one event to the owned timer state."""
    event: str
    changed: bool
    reason: str
    state: TimerState
    notification: Optional[str] = None


class EventDispatcher:
    """Owns the one live timer state and is the only place it changes."""

    def __init__(
        self,
        *,
        notifier: NotifierLike,
        clock: Clock = dt.datetime.now,
        logger: Optional[logging.Logger] = None,
        state: Optional[TimerState] = None,
    ):
        self._notifier = notifier
        self._clock = clock
        self._logger = logger or logging.getLogger("dispatcher")
        self._state: TimerState = state if state is not None else initial_state()

    @property
    def state(self) -> TimerState:
        return self._state

    async def run(self, events: "asyncio.Queue[Event]") -> None:
        """Consume events forever. Failures are logged per event."""
        while True:
            event = await events.get()
            try:
                self.dispatch(event)
            except Exception as error:
                self._logger.error(
                    "Failed to apply %s event: %s",
                    type(event).__name__,
                    error,
                    exc_info=True,
                )
                if isinstance(event, Status) and not event.reply.done():
                    event.reply.set_exception(
                        TimerStateError(f"Status unavailable: {error}")
                    )
            finally:
                events.task_done()

    def dispatch(self, event: Event) -> DispatchResult:
        if isinstance(event, Tick):
            return self._on_tick()
        if isinstance(event, Toggle):
            return self._on_toggle()
        if isinstance(event, Reset):
            return self._on_reset()
        if isinstance(event, Status):
            return self._on_status(event)
        raise TimerStateError(f"Unsupported event: {type(event).__name__}")

    def _on_toggle(self) -> DispatchResult:
        previous = self._state
        now = self._clock()

        if isinstance(previous, BREAK_STATES):
            # Breaks run to completion.
            self._logger.debug("Ignoring toggle during %s", previous.state_name)
            return DispatchResult(Toggle.kind, False, REASON_BREAK_LOCKED, previous)

        if isinstance(previous, Idle):
            successor: TimerState = previous.start(now)
            reason = REASON_STARTED
        elif isinstance(previous, Work):
            successor = previous.pause(now)
            reason = REASON_PAUSED
        elif isinstance(previous, Paused):
            successor = previous.resume(now)
            reason = REASON_RESUMED
        else:
            raise TimerStateError(f"Cannot toggle state: {type(previous).__name__}")

        return self._transition(Toggle.kind, reason, successor, toggle_text(previous))

    def _on_reset(self) -> DispatchResult:
        return self._transition(Reset.kind, REASON_RESET, initial_state(), TEXT_RESET)

    def _on_tick(self) -> DispatchResult:
        previous = self._state
        now = self._clock()
        # Level-triggered: an overdue state (e.g. after suspend) finishes on
        # whichever tick observes it.
        if not is_due(previous, now):
            return DispatchResult(Tick.kind, False, REASON_NOT_DUE, previous)

        successor = previous.finish(now)  # type: ignore[union-attr]
        return self._transition(Tick.kind, REASON_FINISHED, successor, finish_text(previous))

    def _on_status(self, event: Status) -> DispatchResult:
        state = self._state
        reply = event.reply
        if reply.done():
            self._logger.debug("Status requester went away before the reply")
            return DispatchResult(Status.kind, False, REASON_REQUESTER_GONE, state)

        reply.set_result(encode_state(state))
        return DispatchResult(Status.kind, False, REASON_REPLIED, state)

    def _transition(
        self,
        event: str,
        reason: str,
        successor: TimerState,
        notification: str,
    ) -> DispatchResult:
        previous = self._state
        self._state = successor
        self._logger.info(
            "Timer %s: %s -> %s (cycles=%d)",
            reason,
            previous.state_name,
            successor.state_name,
            successor.cycle_count,
        )
        self._notify(notification)
        return DispatchResult(event, True, reason, successor, notification)

    def _notify(self, message: str) -> None:
        try:
            self._notifier.notify(message)
        except NotificationError as error:
            self._logger.warning("Notification failed: %s", error)
