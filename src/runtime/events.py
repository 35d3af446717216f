"""Events consumed by the timer dispatcher."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Union

EVENT_TOGGLE = "toggle"
EVENT_RESET = "reset"
EVENT_STATUS = "status"
EVENT_TICK = "tick"


@dataclass(frozen=True)
class Toggle:
    """Start, pause, or resume depending on the current state."""
    kind = EVENT_TOGGLE


@dataclass(frozen=True)
class Reset:
    """Drop the current session and return to idle."""
    kind = EVENT_RESET


@dataclass(frozen=True, eq=False)
class Status:
    """Status query; the dispatcher completes ``reply`` with the encoded state."""
    reply: "asyncio.Future[str]" = field(repr=False)
    kind = EVENT_STATUS


@dataclass(frozen=True)
class Tick:
    """Periodic wake-up used to detect elapsed deadlines."""
    kind = EVENT_TICK


Event = Union[Toggle, Reset, Status, Tick]
