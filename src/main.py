"""Entry point for the pomodoro timer daemon."""

import argparse
import asyncio
import dataclasses
import logging
import signal
from typing import Optional, Sequence

from app_config import AppConfigurationError, load_app_config, log_level_value
from notify import NotificationConfig, NotificationConfigurationError, build_notifier
from runtime.loop import DaemonRuntime, RuntimeBootstrap
from server import IPCServerConfig, IPCServerError, ServerConfigurationError


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the daemon."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomobar_daemon")


def setup_signal_handlers(runtime: DaemonRuntime) -> None:
    """Stop the runtime gracefully on SIGTERM and SIGINT."""
    loop = asyncio.get_running_loop()
    for signum in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(signum, runtime.stop)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomobar-daemon",
        description="Pomodoro timer daemon serving a local status socket.",
    )
    parser.add_argument("--config", help="Path to config.toml.")
    parser.add_argument("--socket", help="Override the socket path.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


async def _serve(runtime: DaemonRuntime) -> None:
    setup_signal_handlers(runtime)
    await runtime.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        app_config = load_app_config(args.config)
    except AppConfigurationError as error:
        setup_logging().error("Configuration error: %s", error)
        return 1

    level = logging.DEBUG if args.verbose else log_level_value(app_config.daemon.log_level)
    logger = setup_logging(level)
    if app_config.source_file:
        logger.debug("Loaded config from %s", app_config.source_file)

    try:
        daemon_settings = app_config.daemon
        if args.socket:
            daemon_settings = dataclasses.replace(daemon_settings, socket_path=args.socket)
        server_config = IPCServerConfig.from_settings(daemon_settings)
        notification_config = NotificationConfig.from_settings(app_config.notifications)
    except (ServerConfigurationError, NotificationConfigurationError) as error:
        logger.error("Configuration error: %s", error)
        return 1

    runtime = DaemonRuntime(
        RuntimeBootstrap(
            logger=logger,
            server_config=server_config,
            notifier=build_notifier(
                notification_config,
                logger=logging.getLogger("notify"),
            ),
        )
    )

    try:
        asyncio.run(_serve(runtime))
    except IPCServerError as error:
        logger.error("Failed to start command server: %s", error)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutdown requested by keyboard interrupt.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
