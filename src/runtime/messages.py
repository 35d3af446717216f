"""Notification text for timer transitions."""

from __future__ import annotations

from pomodoro import Idle, LongBreak, Paused, ShortBreak, TimerState, Work

TEXT_STARTED = "Time to focus!"
TEXT_PAUSED = "Pomodoro paused."
TEXT_RESUMED = "Resuming pomodoro."
TEXT_BREAK_STARTED = "Time for a break!"
TEXT_SHORT_BREAK_OVER = "Break is over. Time to focus!"
TEXT_LONG_BREAK_OVER = "Long break is over. Time to get back to it!"
TEXT_RESET = "Reset timer."


def toggle_text(previous: TimerState) -> str:
    """Return the text announced when ``previous`` is toggled."""
    if isinstance(previous, Idle):
        return TEXT_STARTED
    if isinstance(previous, Work):
        return TEXT_PAUSED
    if isinstance(previous, Paused):
        return TEXT_RESUMED
    raise ValueError(f"{previous.state_name} cannot be toggled")


def finish_text(previous: TimerState) -> str:
    """Return the text announced when ``previous`` runs out."""
    if isinstance(previous, Work):
        return TEXT_BREAK_STARTED
    if isinstance(previous, ShortBreak):
        return TEXT_SHORT_BREAK_OVER
    if isinstance(previous, LongBreak):
        return TEXT_LONG_BREAK_OVER
    raise ValueError(f"{previous.state_name} has no deadline")
