import tempfile
import unittest
from pathlib import Path

from app_config_schema import DaemonSettings
from server.config import DEFAULT_SOCKET_PATH, IPCServerConfig, ServerConfigurationError


class IPCServerConfigTests(unittest.TestCase):
    def test_from_settings_copies_socket_and_queue(self) -> None:
        settings = DaemonSettings(socket_path="/tmp/custom.sock", queue_size=64)

        config = IPCServerConfig.from_settings(settings)

        self.assertEqual("/tmp/custom.sock", config.socket_path)
        self.assertEqual(64, config.queue_size)
        self.assertEqual(Path("/tmp/custom.sock"), config.path)

    def test_from_settings_falls_back_to_default_socket(self) -> None:
        config = IPCServerConfig.from_settings(DaemonSettings(socket_path="  "))
        self.assertEqual(DEFAULT_SOCKET_PATH, config.socket_path)

    def test_rejects_empty_queue(self) -> None:
        with self.assertRaises(ServerConfigurationError):
            IPCServerConfig(socket_path="/tmp/pomobar.sock", queue_size=0)

    def test_rejects_socket_under_a_regular_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            blocker = Path(temp_dir) / "file"
            blocker.write_text("x", encoding="utf-8")

            with self.assertRaises(ServerConfigurationError):
                IPCServerConfig(socket_path=str(blocker / "pomobar.sock"))


if __name__ == "__main__":
    unittest.main()
