"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from app_config_schema import (
    OUTPUT_RAW,
    OUTPUT_WAYBAR,
    AppConfig,
    AppConfigurationError,
    ClientSettings,
    DaemonSettings,
    NotificationSettings,
)
from notify.config import URGENCY_LEVELS

_ALLOWED_OUTPUTS = {OUTPUT_WAYBAR, OUTPUT_RAW}
_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_app_config(raw: Mapping[str, Any], *, source_file: str) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    return AppConfig(
        daemon=_parse_daemon_settings(_section(raw, "daemon")),
        notifications=_parse_notification_settings(_section(raw, "notifications")),
        client=_parse_client_settings(_section(raw, "client")),
        source_file=source_file,
    )


def log_level_value(name: str) -> int:
    """Translate a validated level name into a ``logging`` constant."""
    return getattr(logging, name.upper(), logging.INFO)


def _parse_daemon_settings(section: Mapping[str, Any]) -> DaemonSettings:
    queue_size = _as_int(section.get("queue_size", 256), "daemon.queue_size")
    if queue_size < 1:
        raise AppConfigurationError("daemon.queue_size must be at least 1.")
    return DaemonSettings(
        socket_path=_as_str(
            section.get("socket_path", "/tmp/pomobar.sock"),
            "daemon.socket_path",
        )
        or "/tmp/pomobar.sock",
        queue_size=queue_size,
        log_level=_as_choice(
            section.get("log_level", "INFO"),
            "daemon.log_level",
            _ALLOWED_LOG_LEVELS,
            upper=True,
        ),
    )


def _parse_notification_settings(section: Mapping[str, Any]) -> NotificationSettings:
    return NotificationSettings(
        enabled=_as_bool(section.get("enabled", True), "notifications.enabled"),
        command=_as_str(section.get("command", "notify-send"), "notifications.command"),
        app_name=_as_str(section.get("app_name", "pomobar"), "notifications.app_name"),
        icon=_as_str(section.get("icon", "pomobar"), "notifications.icon"),
        urgency=_as_choice(
            section.get("urgency", "low"),
            "notifications.urgency",
            set(URGENCY_LEVELS),
        ),
    )


def _parse_client_settings(section: Mapping[str, Any]) -> ClientSettings:
    timeout_seconds = _as_float(
        section.get("timeout_seconds", 2.0),
        "client.timeout_seconds",
    )
    if timeout_seconds <= 0:
        raise AppConfigurationError("client.timeout_seconds must be greater than zero.")
    return ClientSettings(
        output=_as_choice(section.get("output", OUTPUT_WAYBAR), "client.output", _ALLOWED_OUTPUTS),
        timeout_seconds=timeout_seconds,
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_choice(
    value: Any,
    field: str,
    allowed: set[str],
    *,
    upper: bool = False,
) -> str:
    text = _as_str(value, field)
    text = text.upper() if upper else text.lower()
    if text not in allowed:
        choices = ", ".join(sorted(allowed))
        raise AppConfigurationError(f"{field} must be one of: {choices}.")
    return text


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")
