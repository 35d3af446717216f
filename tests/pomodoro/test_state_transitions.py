import datetime as dt
import unittest

from pomodoro import (
    Idle,
    LongBreak,
    Paused,
    ShortBreak,
    Work,
    initial_state,
    is_due,
)

T0 = dt.datetime(2026, 3, 2, 9, 0, 0)


def _minutes(value: float) -> dt.timedelta:
    return dt.timedelta(minutes=value)


class TimerStateTransitionTests(unittest.TestCase):
    def test_initial_state_is_idle_with_full_work_duration(self) -> None:
        state = initial_state()

        self.assertIsInstance(state, Idle)
        self.assertEqual("idle", state.state_name)
        self.assertEqual(0, state.cycle_count)
        self.assertEqual(_minutes(25), state.remaining_time(T0))

    def test_start_begins_work_with_zero_cycles(self) -> None:
        work = Idle().start(T0)

        self.assertEqual(Work(started_at=T0, cycles=0), work)
        self.assertEqual(_minutes(25), work.remaining_time(T0))

    def test_pause_stores_remaining_and_carries_cycles(self) -> None:
        work = Work(started_at=T0, cycles=3)
        paused = work.pause(T0 + _minutes(10))

        self.assertEqual(Paused(remaining=_minutes(15), cycles=3), paused)
        # Stored, not recomputed from the clock.
        self.assertEqual(_minutes(15), paused.remaining_time(T0 + _minutes(90)))

    def test_pause_after_deadline_clamps_to_zero(self) -> None:
        paused = Work(started_at=T0).pause(T0 + _minutes(40))
        self.assertEqual(dt.timedelta(0), paused.remaining)

    def test_resume_backdates_start_to_keep_deadline(self) -> None:
        paused = Paused(remaining=_minutes(15), cycles=2)
        resume_at = T0 + _minutes(60)

        work = paused.resume(resume_at)

        self.assertEqual(resume_at - _minutes(10), work.started_at)
        self.assertEqual(2, work.cycles)
        self.assertEqual(_minutes(15), work.remaining_time(resume_at))

    def test_pause_then_resume_preserves_remaining_time(self) -> None:
        work = Work(started_at=T0, cycles=1)
        pause_at = T0 + dt.timedelta(minutes=7, seconds=13, microseconds=250)
        before = work.remaining_time(pause_at)

        resume_at = pause_at + dt.timedelta(hours=3)
        resumed = work.pause(pause_at).resume(resume_at)

        self.assertEqual(before, resumed.remaining_time(resume_at))

    def test_finish_alternates_short_and_long_breaks(self) -> None:
        now = T0
        state = Idle().start(now)
        breaks = []
        for _ in range(8):
            now += _minutes(25)
            state = state.finish(now)
            breaks.append((type(state).__name__, state.cycles))
            now += _minutes(15)
            state = state.finish(now)

        self.assertEqual(
            [
                ("ShortBreak", 1),
                ("ShortBreak", 2),
                ("ShortBreak", 3),
                ("LongBreak", 4),
                ("ShortBreak", 5),
                ("ShortBreak", 6),
                ("ShortBreak", 7),
                ("LongBreak", 8),
            ],
            breaks,
        )

    def test_break_finish_returns_to_work_with_same_cycles(self) -> None:
        short = ShortBreak(started_at=T0, cycles=1).finish(T0 + _minutes(5))
        long = LongBreak(started_at=T0, cycles=4).finish(T0 + _minutes(15))

        self.assertEqual(Work(started_at=T0 + _minutes(5), cycles=1), short)
        self.assertEqual(Work(started_at=T0 + _minutes(15), cycles=4), long)

    def test_break_durations(self) -> None:
        self.assertEqual(_minutes(5), ShortBreak(started_at=T0).remaining_time(T0))
        self.assertEqual(_minutes(15), LongBreak(started_at=T0).remaining_time(T0))

    def test_remaining_time_never_negative(self) -> None:
        much_later = T0 + dt.timedelta(days=2)
        for state in (
            Work(started_at=T0),
            ShortBreak(started_at=T0),
            LongBreak(started_at=T0),
            Paused(remaining=dt.timedelta(0)),
            Idle(),
        ):
            with self.subTest(state=state.state_name):
                self.assertGreaterEqual(state.remaining_time(much_later), dt.timedelta(0))

    def test_is_due_only_for_elapsed_timed_states(self) -> None:
        later = T0 + _minutes(30)

        self.assertTrue(is_due(Work(started_at=T0), later))
        self.assertTrue(is_due(ShortBreak(started_at=T0), later))
        self.assertTrue(is_due(LongBreak(started_at=T0), later))
        almost = T0 + dt.timedelta(minutes=14, seconds=59)
        self.assertFalse(is_due(LongBreak(started_at=T0), almost))
        self.assertTrue(is_due(LongBreak(started_at=T0), T0 + _minutes(15)))
        self.assertFalse(is_due(Paused(remaining=dt.timedelta(0)), later))
        self.assertFalse(is_due(Idle(), later))

    def test_illegal_transitions_are_not_defined(self) -> None:
        self.assertFalse(hasattr(Idle(), "pause"))
        self.assertFalse(hasattr(Paused(remaining=_minutes(1)), "finish"))
        self.assertFalse(hasattr(ShortBreak(started_at=T0), "pause"))

    def test_states_are_immutable(self) -> None:
        work = Work(started_at=T0)
        with self.assertRaises(AttributeError):
            work.cycles = 5  # type: ignore[misc]

    def test_invalid_payloads_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Work(started_at=T0, cycles=-1)
        with self.assertRaises(ValueError):
            Paused(remaining=_minutes(26))
        with self.assertRaises(ValueError):
            Paused(remaining=dt.timedelta(seconds=-1))


if __name__ == "__main__":
    unittest.main()
