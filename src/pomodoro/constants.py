"""Durations, state names, and cycle rules used by the pomodoro state machine."""

from __future__ import annotations

import datetime as dt

WORK_DURATION = dt.timedelta(minutes=25)
SHORT_BREAK_DURATION = dt.timedelta(minutes=5)
LONG_BREAK_DURATION = dt.timedelta(minutes=15)

# Every Nth completed work session earns a long break.
LONG_BREAK_EVERY = 4

STATE_IDLE = "idle"
STATE_WORK = "work"
STATE_PAUSED = "paused"
STATE_SHORT_BREAK = "short_break"
STATE_LONG_BREAK = "long_break"
