"""Immutable pomodoro timer states and their consuming transitions.

Each state is a frozen dataclass. A transition is a method that exists only on
the state it is legal for and returns a brand-new successor value, so calls
such as ``Idle().pause()`` cannot be expressed without a type error.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from .constants import (
    LONG_BREAK_DURATION,
    LONG_BREAK_EVERY,
    SHORT_BREAK_DURATION,
    STATE_IDLE,
    STATE_LONG_BREAK,
    STATE_PAUSED,
    STATE_SHORT_BREAK,
    STATE_WORK,
    WORK_DURATION,
)

_ZERO = dt.timedelta(0)


def _now(now: Optional[dt.datetime]) -> dt.datetime:
    return now if now is not None else dt.datetime.now()


def _validate_cycles(cycles: int) -> None:
    if isinstance(cycles, bool) or not isinstance(cycles, int):
        raise ValueError(f"cycles must be an integer, got: {cycles!r}")
    if cycles < 0:
        raise ValueError(f"cycles must not be negative, got: {cycles}")


@dataclass(frozen=True)
class Idle:
    """No session running. Reports a full work duration as a display value."""

    state_name: ClassVar[str] = STATE_IDLE

    @property
    def cycle_count(self) -> int:
        return 0

    def remaining_time(self, now: Optional[dt.datetime] = None) -> dt.timedelta:
        del now
        return WORK_DURATION

    def start(self, now: Optional[dt.datetime] = None) -> "Work":
        return Work(started_at=_now(now), cycles=0)


@dataclass(frozen=True)
class _TimedState:
    started_at: dt.datetime
    cycles: int = 0

    duration: ClassVar[dt.timedelta] = _ZERO

    def __post_init__(self) -> None:
        if not isinstance(self.started_at, dt.datetime):
            raise ValueError(f"started_at must be a datetime, got: {self.started_at!r}")
        _validate_cycles(self.cycles)

    @property
    def cycle_count(self) -> int:
        return self.cycles

    def remaining_time(self, now: Optional[dt.datetime] = None) -> dt.timedelta:
        remaining = self.duration - (_now(now) - self.started_at)
        return max(_ZERO, remaining)


@dataclass(frozen=True)
class Work(_TimedState):
    """Active focus session."""

    state_name: ClassVar[str] = STATE_WORK
    duration: ClassVar[dt.timedelta] = WORK_DURATION

    def pause(self, now: Optional[dt.datetime] = None) -> "Paused":
        # A wall clock stepped backwards must not store more than a full session.
        remaining = min(WORK_DURATION, self.remaining_time(now))
        return Paused(remaining=remaining, cycles=self.cycles)

    def finish(self, now: Optional[dt.datetime] = None) -> Union["ShortBreak", "LongBreak"]:
        completed = self.cycles + 1
        started_at = _now(now)
        if completed % LONG_BREAK_EVERY == 0:
            return LongBreak(started_at=started_at, cycles=completed)
        return ShortBreak(started_at=started_at, cycles=completed)


@dataclass(frozen=True)
class Paused:
    """Suspended focus session holding its remaining time, not a start time."""

    remaining: dt.timedelta
    cycles: int = 0

    state_name: ClassVar[str] = STATE_PAUSED

    def __post_init__(self) -> None:
        if not isinstance(self.remaining, dt.timedelta):
            raise ValueError(f"remaining must be a timedelta, got: {self.remaining!r}")
        if not _ZERO <= self.remaining <= WORK_DURATION:
            raise ValueError(
                f"remaining must be in [0, {WORK_DURATION}], got: {self.remaining}"
            )
        _validate_cycles(self.cycles)

    @property
    def cycle_count(self) -> int:
        return self.cycles

    def remaining_time(self, now: Optional[dt.datetime] = None) -> dt.timedelta:
        del now
        return self.remaining

    def resume(self, now: Optional[dt.datetime] = None) -> Work:
        # Back-date the start so the original deadline is kept.
        started_at = _now(now) - (WORK_DURATION - self.remaining)
        return Work(started_at=started_at, cycles=self.cycles)


@dataclass(frozen=True)
class ShortBreak(_TimedState):
    state_name: ClassVar[str] = STATE_SHORT_BREAK
    duration: ClassVar[dt.timedelta] = SHORT_BREAK_DURATION

    def finish(self, now: Optional[dt.datetime] = None) -> Work:
        return Work(started_at=_now(now), cycles=self.cycles)


@dataclass(frozen=True)
class LongBreak(_TimedState):
    state_name: ClassVar[str] = STATE_LONG_BREAK
    duration: ClassVar[dt.timedelta] = LONG_BREAK_DURATION

    def finish(self, now: Optional[dt.datetime] = None) -> Work:
        return Work(started_at=_now(now), cycles=self.cycles)


TimerState = Union[Idle, Work, Paused, ShortBreak, LongBreak]

TIMED_STATES: tuple[type, ...] = (Work, ShortBreak, LongBreak)
BREAK_STATES: tuple[type, ...] = (ShortBreak, LongBreak)


def initial_state() -> Idle:
    """Return the state a freshly started daemon owns."""
    return Idle()


def is_due(state: TimerState, now: Optional[dt.datetime] = None) -> bool:
    """True when a timed state has no time left and must finish."""
    return isinstance(state, TIMED_STATES) and state.remaining_time(now) == _ZERO
