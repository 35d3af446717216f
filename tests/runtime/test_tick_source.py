import asyncio
import unittest

from runtime import Tick, TickSource


class TickSourceTests(unittest.IsolatedAsyncioTestCase):
    async def test_emits_ticks_repeatedly(self) -> None:
        events: asyncio.Queue = asyncio.Queue()
        source = TickSource(events, interval_seconds=0.01)

        task = asyncio.create_task(source.run())
        try:
            first = await asyncio.wait_for(events.get(), timeout=1.0)
            second = await asyncio.wait_for(events.get(), timeout=1.0)
        finally:
            task.cancel()

        self.assertIsInstance(first, Tick)
        self.assertIsInstance(second, Tick)

    async def test_waits_instead_of_dropping_when_queue_is_full(self) -> None:
        events: asyncio.Queue = asyncio.Queue(maxsize=1)
        source = TickSource(events, interval_seconds=0.001)

        task = asyncio.create_task(source.run())
        try:
            await asyncio.sleep(0.05)
            self.assertEqual(1, events.qsize())
            self.assertFalse(task.done())

            events.get_nowait()
            await asyncio.wait_for(events.get(), timeout=1.0)
        finally:
            task.cancel()

    def test_rejects_non_positive_interval(self) -> None:
        with self.assertRaises(ValueError):
            TickSource(asyncio.Queue(), interval_seconds=0)


if __name__ == "__main__":
    unittest.main()
