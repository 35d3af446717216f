"""Config file resolution and loading for the daemon and the client."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli as tomllib  # type: ignore

from app_config_parser import log_level_value, parse_app_config
from app_config_schema import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_FILE,
    AppConfig,
    AppConfigurationError,
    ClientSettings,
    DaemonSettings,
    NotificationSettings,
)

CONFIG_ENV_VAR = "POMOBAR_CONFIG_FILE"

__all__ = [
    "CONFIG_ENV_VAR",
    "AppConfig",
    "AppConfigurationError",
    "ClientSettings",
    "DaemonSettings",
    "NotificationSettings",
    "load_app_config",
    "log_level_value",
    "resolve_config_path",
]


def resolve_config_path(
    config_path: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> tuple[Path, bool]:
    """Return the config path to read and whether it was asked for explicitly."""
    env = os.environ if environ is None else environ
    explicit = config_path or env.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser(), True

    config_home = env.get("XDG_CONFIG_HOME")
    base = Path(config_home).expanduser() if config_home else Path.home() / ".config"
    return base / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE, False


def load_app_config(
    config_path: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """Load settings; a missing implicit config file yields defaults."""
    path, explicit = resolve_config_path(config_path, environ=environ)
    if not path.exists():
        if explicit:
            raise AppConfigurationError(f"Config file not found: {path}")
        return AppConfig()
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    return parse_app_config(raw, source_file=str(path))
