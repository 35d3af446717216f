"""One-shot request/reply exchange with the daemon socket."""

from __future__ import annotations

import asyncio
import contextlib

from server.protocol import FIRE_AND_FORGET_COMMANDS


class ClientError(Exception):
    """Raised when the daemon cannot be reached or does not answer."""


async def send_command(socket_path: str, command: str, *, timeout_seconds: float) -> bytes:
    """Send ``command`` and return the reply (empty for fire-and-forget commands)."""
    try:
        reader, writer = await asyncio.wait_for(
            asyncio.open_unix_connection(socket_path),
            timeout=timeout_seconds,
        )
    except asyncio.TimeoutError as error:
        raise ClientError(f"Timed out connecting to {socket_path}") from error
    except OSError as error:
        raise ClientError(f"Cannot connect to {socket_path}: {error}") from error

    try:
        writer.write(command.encode("utf-8"))
        await writer.drain()
        if command in FIRE_AND_FORGET_COMMANDS:
            return b""

        reply = await asyncio.wait_for(reader.read(), timeout=timeout_seconds)
    except asyncio.TimeoutError as error:
        raise ClientError(f"No reply from daemon within {timeout_seconds:.1f}s") from error
    except OSError as error:
        raise ClientError(f"Connection to daemon failed: {error}") from error
    finally:
        writer.close()
        with contextlib.suppress(Exception):
            await writer.wait_closed()

    if not reply:
        raise ClientError("Daemon closed the connection without a reply")
    return reply


def request(socket_path: str, command: str, *, timeout_seconds: float) -> bytes:
    return asyncio.run(send_command(socket_path, command, timeout_seconds=timeout_seconds))
