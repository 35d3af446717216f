from .codec import decode_state, encode_state, payload_to_state, state_to_payload
from .constants import (
    LONG_BREAK_DURATION,
    LONG_BREAK_EVERY,
    SHORT_BREAK_DURATION,
    WORK_DURATION,
)
from .errors import PomodoroError, StateDecodeError, TimerStateError
from .states import (
    BREAK_STATES,
    TIMED_STATES,
    Idle,
    LongBreak,
    Paused,
    ShortBreak,
    TimerState,
    Work,
    initial_state,
    is_due,
)
from .view import StatusView, format_remaining, to_view

__all__ = [
    "BREAK_STATES",
    "LONG_BREAK_DURATION",
    "LONG_BREAK_EVERY",
    "SHORT_BREAK_DURATION",
    "TIMED_STATES",
    "WORK_DURATION",
    "Idle",
    "LongBreak",
    "Paused",
    "PomodoroError",
    "ShortBreak",
    "StateDecodeError",
    "StatusView",
    "TimerState",
    "TimerStateError",
    "Work",
    "decode_state",
    "encode_state",
    "format_remaining",
    "initial_state",
    "is_due",
    "payload_to_state",
    "state_to_payload",
    "to_view",
]
