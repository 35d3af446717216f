"""Command tokens accepted on the daemon socket."""

from __future__ import annotations

from typing import Literal

COMMAND_TOGGLE = "toggle"
COMMAND_RESET = "reset"
COMMAND_STATUS = "status"

# Upper bound for the single read that carries a command.
MAX_COMMAND_BYTES = 1024

Command = Literal["toggle", "reset", "status"]

CLIENT_COMMANDS: tuple[str, ...] = (COMMAND_STATUS, COMMAND_TOGGLE, COMMAND_RESET)
FIRE_AND_FORGET_COMMANDS: frozenset[str] = frozenset({COMMAND_TOGGLE, COMMAND_RESET})


def parse_command(raw: bytes) -> Command:
    """Map raw request bytes to a command.

    Only the exact tokens ``toggle`` and ``reset`` change state. Everything
    else, including empty or undecodable input, is read as a status query.
    """
    text = raw.decode("utf-8", errors="replace")
    if text == COMMAND_TOGGLE:
        return COMMAND_TOGGLE
    if text == COMMAND_RESET:
        return COMMAND_RESET
    return COMMAND_STATUS
