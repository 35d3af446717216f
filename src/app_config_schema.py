"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CONFIG_DIR = "pomobar"
DEFAULT_CONFIG_FILE = "config.toml"

OUTPUT_WAYBAR = "waybar"
OUTPUT_RAW = "raw"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class DaemonSettings:
    """Socket and logging settings from `[daemon]`."""
    socket_path: str = "/tmp/pomobar.sock"
    queue_size: int = 256
    log_level: str = "INFO"


@dataclass(frozen=True)
class NotificationSettings:
    """Desktop notification settings from `[notifications]`."""
    enabled: bool = True
    command: str = "notify-send"
    app_name: str = "pomobar"
    icon: str = "pomobar"
    urgency: str = "low"


@dataclass(frozen=True)
class ClientSettings:
    """Client output and timeout settings from `[client]`."""
    output: str = OUTPUT_WAYBAR
    timeout_seconds: float = 2.0


@dataclass(frozen=True)
class AppConfig:
    daemon: DaemonSettings = field(default_factory=DaemonSettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    client: ClientSettings = field(default_factory=ClientSettings)
    source_file: str = ""
