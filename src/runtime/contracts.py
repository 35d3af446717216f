"""Protocols describing collaborators injected into the runtime."""

from __future__ import annotations

import datetime as dt
from typing import Callable, Protocol

Clock = Callable[[], dt.datetime]


class NotifierLike(Protocol):
    """Best-effort notification sink; may raise ``NotificationError``."""
    def notify(self, message: str) -> None:
        ...
