"""Asyncio Unix socket server feeding client commands to the dispatcher."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import stat
from pathlib import Path
from typing import Optional

from pomodoro import PomodoroError
from runtime.events import Event, Reset, Status, Toggle

from .config import SOCKET_MODE, IPCServerConfig
from .protocol import (
    COMMAND_RESET,
    COMMAND_TOGGLE,
    MAX_COMMAND_BYTES,
    parse_command,
)


class IPCServerError(Exception):
    """Raised when the command socket cannot be prepared or bound."""


def remove_stale_socket(path: Path, logger: Optional[logging.Logger] = None) -> bool:
    """Remove whatever a previous daemon left at ``path``.

    Returns True when an entry was removed.
    """
    logger = logger or logging.getLogger("ipc_server")
    try:
        mode = os.lstat(path).st_mode
    except FileNotFoundError:
        return False
    except OSError as error:
        raise IPCServerError(f"Cannot inspect socket path {path}: {error}") from error

    if stat.S_ISDIR(mode):
        raise IPCServerError(f"Socket path is a directory: {path}")

    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as error:
        raise IPCServerError(f"Cannot remove stale socket {path}: {error}") from error

    logger.debug("Removed existing socket file: %s", path)
    return True


class CommandServer:
    """Unix socket server turning one command per connection into events."""

    def __init__(
        self,
        config: IPCServerConfig,
        events: "asyncio.Queue[Event]",
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._events = events
        self._logger = logger or logging.getLogger("ipc_server")
        self._server: Optional[asyncio.AbstractServer] = None

    @property
    def path(self) -> Path:
        return self._config.path

    @property
    def is_running(self) -> bool:
        return self._server is not None and self._server.is_serving()

    async def start(self) -> None:
        if self.is_running:
            self._logger.warning("Command server is already running")
            return

        path = self.path
        remove_stale_socket(path, self._logger)
        try:
            self._server = await asyncio.start_unix_server(
                self._handle_connection,
                path=str(path),
            )
            path.chmod(SOCKET_MODE)
        except OSError as error:
            await self.stop()
            raise IPCServerError(f"Cannot listen on {path}: {error}") from error

        self._logger.info("Command server listening on %s", path)

    async def serve_forever(self) -> None:
        if self._server is None:
            raise IPCServerError("Command server has not been started")
        await self._server.serve_forever()

    async def stop(self, timeout_seconds: float = 5.0) -> None:
        server = self._server
        self._server = None
        if server is None:
            return

        server.close()
        with contextlib.suppress(Exception):
            await asyncio.wait_for(server.wait_closed(), timeout=timeout_seconds)

        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as error:
            self._logger.warning("Failed to remove socket %s: %s", self.path, error)

    async def _handle_connection(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
    ) -> None:
        try:
            raw = await reader.read(MAX_COMMAND_BYTES)
            command = parse_command(raw)
            self._logger.debug("Received command %r (%d bytes)", command, len(raw))

            if command == COMMAND_TOGGLE:
                await self._events.put(Toggle())
                return
            if command == COMMAND_RESET:
                await self._events.put(Reset())
                return

            reply: "asyncio.Future[str]" = asyncio.get_running_loop().create_future()
            await self._events.put(Status(reply=reply))
            response = await reply
            writer.write(response.encode("utf-8"))
            await writer.drain()
        except (ConnectionError, OSError) as error:
            self._logger.warning("Client connection failed: %s", error)
        except PomodoroError as error:
            self._logger.error("Status request failed: %s", error)
        finally:
            writer.close()
            with contextlib.suppress(Exception):
                await writer.wait_closed()
