"""Local command socket used by the pomobar client."""

from .config import IPCServerConfig, ServerConfigurationError
from .service import CommandServer, IPCServerError, remove_stale_socket

__all__ = [
    "CommandServer",
    "IPCServerConfig",
    "IPCServerError",
    "ServerConfigurationError",
    "remove_stale_socket",
]
