"""Fire-and-forget desktop notifications for timer transitions."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional

from .config import NotificationConfig


class NotificationError(Exception):
    """Raised when a notification could not be handed to the desktop."""


class DesktopNotifier:
    """Shows notifications through a ``notify-send`` compatible command."""

    def __init__(
        self,
        config: NotificationConfig,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._logger = logger or logging.getLogger("notify")
        self._running: list[subprocess.Popen] = []

    def build_command(self, message: str) -> list[str]:
        command = [
            self._config.command,
            "--app-name",
            self._config.app_name,
            "--urgency",
            self._config.urgency,
        ]
        if self._config.icon:
            command.extend(["--icon", self._config.icon])
        command.append(message)
        return command

    def notify(self, message: str) -> None:
        command = self.build_command(message)
        self._logger.debug("Sending notification: %s", message)
        self._reap_finished()
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as error:
            raise NotificationError(
                f"Failed to run {self._config.command!r}: {error}"
            ) from error
        self._running.append(process)

    def _reap_finished(self) -> None:
        self._running = [process for process in self._running if process.poll() is None]


class NullNotifier:
    """Notifier used when notifications are disabled."""

    def notify(self, message: str) -> None:
        del message


def build_notifier(
    config: NotificationConfig,
    logger: Optional[logging.Logger] = None,
):
    if not config.enabled:
        return NullNotifier()
    return DesktopNotifier(config, logger=logger)
