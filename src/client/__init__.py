"""Command-line client for the pomodoro daemon."""

from .transport import ClientError, send_command

__all__ = ["ClientError", "send_command"]
