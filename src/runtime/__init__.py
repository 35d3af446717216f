"""Timer event dispatch and tick production."""

from .dispatcher import DispatchResult, EventDispatcher
from .events import Event, Reset, Status, Tick, Toggle
from .ticks import TICK_INTERVAL_SECONDS, TickSource

__all__ = [
    "DispatchResult",
    "Event",
    "EventDispatcher",
    "Reset",
    "Status",
    "TICK_INTERVAL_SECONDS",
    "Tick",
    "TickSource",
    "Toggle",
]
