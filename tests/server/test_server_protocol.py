import unittest

from server.protocol import (
    COMMAND_RESET,
    COMMAND_STATUS,
    COMMAND_TOGGLE,
    parse_command,
)


class CommandProtocolTests(unittest.TestCase):
    def test_exact_tokens_map_to_commands(self) -> None:
        self.assertEqual(COMMAND_TOGGLE, parse_command(b"toggle"))
        self.assertEqual(COMMAND_RESET, parse_command(b"reset"))
        self.assertEqual(COMMAND_STATUS, parse_command(b"status"))

    def test_anything_else_is_a_status_query(self) -> None:
        for raw in (b"", b"Toggle", b"toggle\n", b" reset", b"stop", b"\xff\xfe"):
            with self.subTest(raw=raw):
                self.assertEqual(COMMAND_STATUS, parse_command(raw))


if __name__ == "__main__":
    unittest.main()
