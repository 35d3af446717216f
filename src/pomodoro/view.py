"""Status-bar projection of a timer state."""

from __future__ import annotations

import datetime as dt
import json
from dataclasses import dataclass
from typing import Optional

from .states import TimerState


def format_remaining(remaining: dt.timedelta) -> str:
    """Format a duration as ``MM:SS``, truncating partial seconds."""
    total_seconds = max(0, int(remaining.total_seconds()))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def cycles_tooltip(cycles: int) -> str:
    return f"Completed {cycles} pomodoros."


@dataclass(frozen=True)
class StatusView:
    """Display payload consumed by waybar-style custom modules."""
    text: str
    alt: str
    css_class: str
    tooltip: str

    def to_dict(self) -> dict[str, str]:
        return {
            "text": self.text,
            "alt": self.alt,
            "class": self.css_class,
            "tooltip": self.tooltip,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def to_view(state: TimerState, now: Optional[dt.datetime] = None) -> StatusView:
    name = state.state_name
    return StatusView(
        text=format_remaining(state.remaining_time(now)),
        alt=name,
        css_class=name,
        tooltip=cycles_tooltip(state.cycle_count),
    )
