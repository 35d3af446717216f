"""Command-line client printing daemon status for status bars."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from app_config import AppConfigurationError, load_app_config
from app_config_schema import OUTPUT_RAW
from pomodoro import StateDecodeError, decode_state, to_view
from server.protocol import (
    CLIENT_COMMANDS,
    COMMAND_RESET,
    COMMAND_STATUS,
    COMMAND_TOGGLE,
)

from .transport import ClientError, request

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

_COMMAND_HELP = {
    COMMAND_STATUS: "Get current pomodoro status.",
    COMMAND_TOGGLE: "Start/pause pomodoro.",
    COMMAND_RESET: "Reset pomodoro.",
}


def positive_seconds(value: str) -> float:
    """argparse type for timeouts: a float greater than zero."""
    try:
        seconds = float(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from error
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value!r}")
    return seconds


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomobar",
        description="Control the pomodoro daemon and print its status.",
    )
    parser.add_argument("--config", help="Path to config.toml.")
    parser.add_argument("--socket", help="Daemon socket path.")
    parser.add_argument(
        "--timeout",
        type=positive_seconds,
        help="Seconds to wait for the daemon.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request details to stderr.",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the daemon's JSON reply unchanged.",
    )

    subcommands = parser.add_subparsers(dest="command", metavar="COMMAND")
    for command in CLIENT_COMMANDS:
        subcommands.add_parser(command, help=_COMMAND_HELP[command])
    return parser


def render_status(reply: bytes, *, raw: bool) -> str:
    """Turn a status reply into the text printed on stdout."""
    if raw:
        return reply.decode("utf-8", errors="replace")
    return to_view(decode_state(reply)).to_json()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    logger = logging.getLogger("pomobar")

    if args.command is None:
        parser.print_help()
        return EXIT_USAGE

    try:
        app_config = load_app_config(args.config)
    except AppConfigurationError as error:
        logger.error("Configuration error: %s", error)
        return EXIT_FAILURE

    socket_path = args.socket or app_config.daemon.socket_path
    timeout_seconds = (
        args.timeout if args.timeout is not None else app_config.client.timeout_seconds
    )
    raw = args.raw or app_config.client.output == OUTPUT_RAW

    try:
        reply = request(socket_path, args.command, timeout_seconds=timeout_seconds)
        if args.command == COMMAND_STATUS:
            print(render_status(reply, raw=raw))
    except (ClientError, StateDecodeError) as error:
        logger.debug("Request %r failed", args.command, exc_info=True)
        logger.error("%s", error)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
