"""Configuration model for the local command socket."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SOCKET_PATH = "/tmp/pomobar.sock"
DEFAULT_QUEUE_SIZE = 256
SOCKET_MODE = 0o600


class ServerConfigurationError(Exception):
    """Raised when command server configuration is invalid."""


@dataclass(frozen=True)
class IPCServerConfig:
    """Validated command server configuration derived from app settings."""
    socket_path: str = DEFAULT_SOCKET_PATH
    queue_size: int = DEFAULT_QUEUE_SIZE

    def __post_init__(self) -> None:
        if not self.socket_path.strip():
            raise ServerConfigurationError("daemon.socket_path cannot be empty")

        if self.queue_size < 1:
            raise ServerConfigurationError(
                f"daemon.queue_size must be at least 1, got: {self.queue_size}"
            )

        parent = Path(self.socket_path).expanduser().parent
        if parent.exists() and not parent.is_dir():
            raise ServerConfigurationError(
                f"Socket parent path is not a directory: {parent}"
            )

    @property
    def path(self) -> Path:
        return Path(self.socket_path).expanduser()

    @classmethod
    def from_settings(cls, settings) -> "IPCServerConfig":
        socket_path = settings.socket_path.strip() if settings.socket_path else ""
        return cls(
            socket_path=socket_path or DEFAULT_SOCKET_PATH,
            queue_size=settings.queue_size,
        )
