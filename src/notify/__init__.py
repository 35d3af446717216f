"""Public exports for desktop notification delivery."""

from .config import NotificationConfig, NotificationConfigurationError
from .service import DesktopNotifier, NotificationError, NullNotifier, build_notifier

__all__ = [
    "DesktopNotifier",
    "NotificationConfig",
    "NotificationConfigurationError",
    "NotificationError",
    "NullNotifier",
    "build_notifier",
]
