"""Periodic tick producer feeding the dispatcher queue."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .events import Event, Tick

TICK_INTERVAL_SECONDS = 1.0


class TickSource:
    """Emits a ``Tick`` then sleeps, forever."""

    def __init__(
        self,
        events: "asyncio.Queue[Event]",
        *,
        interval_seconds: float = TICK_INTERVAL_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")
        self._events = events
        self._interval_seconds = interval_seconds
        self._logger = logger or logging.getLogger("ticks")

    async def run(self) -> None:
        self._logger.debug("Tick source running every %.1fs", self._interval_seconds)
        while True:
            # put() waits when the queue is full; ticks are never dropped.
            await self._events.put(Tick())
            await asyncio.sleep(self._interval_seconds)
