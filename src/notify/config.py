"""Configuration model for desktop notification delivery."""

from __future__ import annotations

from dataclasses import dataclass

URGENCY_LEVELS = ("low", "normal", "critical")


class NotificationConfigurationError(Exception):
    """Raised when notification configuration is invalid."""


@dataclass(frozen=True)
class NotificationConfig:
    """Validated notifier settings derived from app settings."""
    enabled: bool = True
    command: str = "notify-send"
    app_name: str = "pomobar"
    icon: str = "pomobar"
    urgency: str = "low"

    def __post_init__(self) -> None:
        if self.enabled and not self.command.strip():
            raise NotificationConfigurationError("notifications.command cannot be empty")
        if self.urgency not in URGENCY_LEVELS:
            allowed = ", ".join(URGENCY_LEVELS)
            raise NotificationConfigurationError(
                f"notifications.urgency must be one of: {allowed}"
            )

    @classmethod
    def from_settings(cls, settings) -> "NotificationConfig":
        return cls(
            enabled=bool(settings.enabled),
            command=(settings.command or "").strip(),
            app_name=(settings.app_name or "").strip() or "pomobar",
            icon=(settings.icon or "").strip(),
            urgency=(settings.urgency or "low").strip().lower(),
        )
