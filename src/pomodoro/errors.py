class PomodoroError(Exception):
    """Base exception for pomodoro state handling."""


class TimerStateError(PomodoroError):
    """Raised when a transition is requested on a state that cannot take it."""


class StateDecodeError(PomodoroError):
    """Raised when a serialized status payload cannot be turned into a state."""
