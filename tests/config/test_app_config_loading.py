import tempfile
import textwrap
import unittest
from pathlib import Path

from app_config import (
    CONFIG_ENV_VAR,
    AppConfig,
    AppConfigurationError,
    load_app_config,
    resolve_config_path,
)
from notify.config import URGENCY_LEVELS, NotificationConfig


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class AppConfigLoadingTests(unittest.TestCase):
    def test_missing_implicit_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config = load_app_config(environ={"XDG_CONFIG_HOME": temp_dir})

        self.assertEqual(AppConfig(), config)
        self.assertEqual("/tmp/pomobar.sock", config.daemon.socket_path)
        self.assertEqual("", config.source_file)

    def test_missing_explicit_config_is_an_error(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = str(Path(temp_dir) / "nope.toml")
            with self.assertRaisesRegex(AppConfigurationError, "not found"):
                load_app_config(missing, environ={})

    def test_resolution_prefers_argument_then_env_then_xdg(self) -> None:
        environ = {CONFIG_ENV_VAR: "/etc/pomobar.toml", "XDG_CONFIG_HOME": "/xdg"}

        self.assertEqual(
            (Path("/explicit.toml"), True),
            resolve_config_path("/explicit.toml", environ=environ),
        )
        self.assertEqual(
            (Path("/etc/pomobar.toml"), True),
            resolve_config_path(environ=environ),
        )
        self.assertEqual(
            (Path("/xdg/pomobar/config.toml"), False),
            resolve_config_path(environ={"XDG_CONFIG_HOME": "/xdg"}),
        )

    def test_load_app_config_parses_all_sections(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "pomobar" / "config.toml"
            _write_text(
                config_path,
                textwrap.dedent(
                    """
                    [daemon]
                    socket_path = "/run/user/1000/pomobar.sock"
                    queue_size = 16
                    log_level = "debug"

                    [notifications]
                    enabled = false
                    urgency = "Critical"
                    icon = ""

                    [client]
                    output = "raw"
                    timeout_seconds = 5
                    """
                ).strip(),
            )

            config = load_app_config(environ={"XDG_CONFIG_HOME": temp_dir})

        self.assertEqual(str(config_path), config.source_file)
        self.assertEqual("/run/user/1000/pomobar.sock", config.daemon.socket_path)
        self.assertEqual(16, config.daemon.queue_size)
        self.assertEqual("DEBUG", config.daemon.log_level)
        self.assertFalse(config.notifications.enabled)
        self.assertEqual("critical", config.notifications.urgency)
        self.assertEqual("", config.notifications.icon)
        self.assertEqual("notify-send", config.notifications.command)
        self.assertEqual("raw", config.client.output)
        self.assertEqual(5.0, config.client.timeout_seconds)

    def test_every_notifier_urgency_is_accepted(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            for urgency in URGENCY_LEVELS:
                with self.subTest(urgency=urgency):
                    _write_text(config_path, f'[notifications]\nurgency = "{urgency}"\n')
                    settings = load_app_config(str(config_path), environ={}).notifications
                    self.assertEqual(
                        urgency,
                        NotificationConfig.from_settings(settings).urgency,
                    )

    def test_env_var_points_at_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "custom.toml"
            _write_text(config_path, '[daemon]\nsocket_path = "/tmp/custom.sock"\n')

            config = load_app_config(environ={CONFIG_ENV_VAR: str(config_path)})

        self.assertEqual("/tmp/custom.sock", config.daemon.socket_path)

    def test_invalid_values_name_the_field(self) -> None:
        cases = (
            ("[daemon]\nqueue_size = 0\n", "daemon.queue_size"),
            ("[daemon]\nqueue_size = true\n", "daemon.queue_size"),
            ("[daemon]\nlog_level = \"loud\"\n", "daemon.log_level"),
            ("[notifications]\nurgency = \"urgent\"\n", "notifications.urgency"),
            ("[client]\ntimeout_seconds = -1\n", "client.timeout_seconds"),
            ("[client]\noutput = \"xml\"\n", "client.output"),
            ("daemon = 3\n", "[daemon]"),
        )
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            for content, field in cases:
                with self.subTest(field=field, content=content):
                    _write_text(config_path, content)
                    with self.assertRaises(AppConfigurationError) as raised:
                        load_app_config(str(config_path), environ={})
                    self.assertIn(field, str(raised.exception))

    def test_malformed_toml_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            _write_text(config_path, "[daemon\n")
            with self.assertRaisesRegex(AppConfigurationError, "Failed to parse"):
                load_app_config(str(config_path), environ={})


if __name__ == "__main__":
    unittest.main()
