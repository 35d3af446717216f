"""JSON status payloads exchanged between the daemon and its clients."""

from __future__ import annotations

import datetime as dt
import json
from typing import Any, Mapping, Union

from .constants import (
    STATE_IDLE,
    STATE_LONG_BREAK,
    STATE_PAUSED,
    STATE_SHORT_BREAK,
    STATE_WORK,
)
from .errors import StateDecodeError
from .states import Idle, LongBreak, Paused, ShortBreak, TimerState, Work

_TIMED_BY_NAME = {
    STATE_WORK: Work,
    STATE_SHORT_BREAK: ShortBreak,
    STATE_LONG_BREAK: LongBreak,
}


def state_to_payload(state: TimerState) -> dict[str, Any]:
    """Build the status mapping for a state, tagged by its ``status`` name."""
    if isinstance(state, Idle):
        return {"status": STATE_IDLE}
    if isinstance(state, Paused):
        return {
            "status": STATE_PAUSED,
            "remaining": state.remaining.total_seconds(),
            "cycles": state.cycles,
        }
    if isinstance(state, (Work, ShortBreak, LongBreak)):
        return {
            "status": state.state_name,
            "started_at": state.started_at.isoformat(),
            "cycles": state.cycles,
        }
    raise TypeError(f"Unsupported timer state: {type(state).__name__}")


def encode_state(state: TimerState) -> str:
    return json.dumps(state_to_payload(state))


def payload_to_state(payload: Mapping[str, Any]) -> TimerState:
    if not isinstance(payload, Mapping):
        raise StateDecodeError("Status payload must be a JSON object.")

    status = payload.get("status")
    if not isinstance(status, str):
        raise StateDecodeError(f"status must be a string, got: {status!r}")
    if status == STATE_IDLE:
        return Idle()

    try:
        if status == STATE_PAUSED:
            return Paused(
                remaining=dt.timedelta(seconds=_as_number(payload, "remaining")),
                cycles=_as_cycles(payload),
            )

        state_type = _TIMED_BY_NAME.get(status)
        if state_type is None:
            raise StateDecodeError(f"Unknown status: {status!r}")

        raw_started_at = payload.get("started_at")
        if not isinstance(raw_started_at, str):
            raise StateDecodeError("started_at must be an ISO-8601 string.")
        return state_type(
            started_at=dt.datetime.fromisoformat(raw_started_at),
            cycles=_as_cycles(payload),
        )
    except (OverflowError, ValueError) as error:
        raise StateDecodeError(f"Invalid {status} payload: {error}") from error


def decode_state(raw: Union[str, bytes]) -> TimerState:
    """Parse a status reply back into a timer state."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as error:
            raise StateDecodeError(f"Status reply is not UTF-8: {error}") from error

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as error:
        raise StateDecodeError(f"Status reply is not valid JSON: {error}") from error

    return payload_to_state(payload)


def _as_cycles(payload: Mapping[str, Any]) -> int:
    value = payload.get("cycles")
    if isinstance(value, bool) or not isinstance(value, int):
        raise StateDecodeError("cycles must be an integer.")
    return value


def _as_number(payload: Mapping[str, Any], field: str) -> float:
    value = payload.get(field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StateDecodeError(f"{field} must be a number of seconds.")
    return float(value)
