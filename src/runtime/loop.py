"""Daemon wiring: event queue, dispatcher, tick source, and command server."""

from __future__ import annotations

import asyncio
import contextlib
import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional

from server import CommandServer, IPCServerConfig

from .contracts import Clock, NotifierLike
from .dispatcher import EventDispatcher
from .events import Event
from .ticks import TICK_INTERVAL_SECONDS, TickSource


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the daemon runtime."""
    logger: logging.Logger
    server_config: IPCServerConfig
    notifier: NotifierLike
    clock: Clock = dt.datetime.now
    tick_interval_seconds: float = TICK_INTERVAL_SECONDS


class DaemonRuntime:
    """Runs the dispatcher and its producers until ``stop()`` is requested."""

    def __init__(self, bootstrap: RuntimeBootstrap):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        self._events: "asyncio.Queue[Event]" = asyncio.Queue(
            maxsize=bootstrap.server_config.queue_size
        )
        self._dispatcher = EventDispatcher(
            notifier=bootstrap.notifier,
            clock=bootstrap.clock,
            logger=logging.getLogger("dispatcher"),
        )
        self._ticks = TickSource(
            self._events,
            interval_seconds=bootstrap.tick_interval_seconds,
            logger=logging.getLogger("ticks"),
        )
        self._server = CommandServer(
            bootstrap.server_config,
            self._events,
            logger=logging.getLogger("ipc_server"),
        )
        self._stop_requested: Optional[asyncio.Event] = None

    @property
    def dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    @property
    def server(self) -> CommandServer:
        return self._server

    def stop(self) -> None:
        if self._stop_requested is not None:
            self._stop_requested.set()

    async def run(self) -> None:
        """Serve until stopped. Raises ``IPCServerError`` if binding fails."""
        self._stop_requested = asyncio.Event()
        await self._server.start()

        dispatcher_task = asyncio.create_task(
            self._dispatcher.run(self._events),
            name="dispatcher",
        )
        producer_tasks = [
            asyncio.create_task(self._ticks.run(), name="ticks"),
            asyncio.create_task(self._server.serve_forever(), name="ipc-server"),
        ]
        stop_task = asyncio.create_task(self._stop_requested.wait(), name="stop")

        self._logger.info("Pomodoro daemon ready.")
        try:
            done, _ = await asyncio.wait(
                [dispatcher_task, stop_task, *producer_tasks],
                return_when=asyncio.FIRST_COMPLETED,
            )
            for task in done:
                if task is not stop_task and not task.cancelled():
                    error = task.exception()
                    if error is not None:
                        self._logger.error(
                            "Task %s failed: %s",
                            task.get_name(),
                            error,
                            exc_info=error,
                        )
        finally:
            await self._shutdown(dispatcher_task, producer_tasks, stop_task)

    async def _shutdown(
        self,
        dispatcher_task: "asyncio.Task[None]",
        producer_tasks: list["asyncio.Task[None]"],
        stop_task: "asyncio.Task[bool]",
    ) -> None:
        self._logger.info("Stopping pomodoro daemon...")
        for task in (*producer_tasks, stop_task):
            task.cancel()
        # Connections still waiting for a status reply are answered before the
        # dispatcher goes away.
        await self._server.stop()
        dispatcher_task.cancel()

        for task in (*producer_tasks, stop_task, dispatcher_task):
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task
