# test_driver.py
import math
import unittest

from animator.animation.curves import linear, overshoot, shake
from animator.animation.driver import AnimationDriver, RunState, animate
from animator.core.clock import ManualFrameClock


class Recorder:
    """Collects progress and completion calls in order."""

    def __init__(self):
        self.events = []

    def progress(self, value):
        self.events.append(("progress", value))

    def complete(self):
        self.events.append(("complete",))

    @property
    def values(self):
        return [e[1] for e in self.events if e[0] == "progress"]

    @property
    def completions(self):
        return sum(1 for e in self.events if e[0] == "complete")


class TestZeroDuration(unittest.TestCase):
    def setUp(self):
        self.clock = ManualFrameClock()
        self.driver = AnimationDriver(self.clock)
        self.rec = Recorder()

    def test_finishes_synchronously(self):
        run = self.driver.start(0, self.rec.progress, on_complete=self.rec.complete)
        self.assertEqual(self.rec.events, [("progress", 1.0), ("complete",)])
        self.assertFalse(run.is_running)
        self.assertEqual(run.state, RunState.FINISHED)

    def test_never_subscribes(self):
        self.driver.start(0, self.rec.progress)
        self.assertEqual(self.clock.subscriber_count, 0)
        self.assertEqual(self.driver.active_count, 0)

    def test_further_frames_and_stop_do_nothing(self):
        run = self.driver.start(0, self.rec.progress, on_complete=self.rec.complete)
        self.clock.advance(0.5)
        run.stop()
        self.assertEqual(len(self.rec.events), 2)

    def test_reports_curve_final_value(self):
        self.driver.start(0, self.rec.progress, curve=lambda x: 2 * x)
        self.assertEqual(self.rec.values, [2.0])

    def test_negative_duration_behaves_like_zero(self):
        run = self.driver.start(-1.0, self.rec.progress, on_complete=self.rec.complete)
        self.assertEqual(self.rec.events, [("progress", 1.0), ("complete",)])
        self.assertFalse(run.is_running)
        self.assertEqual(self.clock.subscriber_count, 0)


class TestTimedRun(unittest.TestCase):
    def setUp(self):
        self.clock = ManualFrameClock()
        self.driver = AnimationDriver(self.clock)
        self.rec = Recorder()

    def test_linear_frames_then_terminal(self):
        run = self.driver.start(1.0, self.rec.progress, curve=linear, on_complete=self.rec.complete)
        self.assertTrue(run.is_running)
        self.assertEqual(self.rec.events, [])

        for t in (0.25, 0.5, 0.75):
            self.clock.advance_to(t)
            self.assertEqual(self.rec.completions, 0)
        self.clock.advance_to(1.0)

        self.assertEqual(self.rec.values, [0.25, 0.5, 0.75, 1.0])
        self.assertEqual(self.rec.events[-1], ("complete",))
        self.assertEqual(self.rec.completions, 1)
        self.assertFalse(run.is_running)
        self.assertEqual(self.clock.subscriber_count, 0)

    def test_no_curve_is_linear(self):
        self.driver.start(2.0, self.rec.progress)
        self.clock.advance_to(0.5)
        self.assertEqual(self.rec.values, [0.25])

    def test_curve_is_applied(self):
        self.driver.start(1.0, self.rec.progress, curve=lambda x: x * x)
        self.clock.advance_to(0.5)
        self.assertEqual(self.rec.values, [0.25])

    def test_late_final_frame_reports_final_value(self):
        self.driver.start(1.0, self.rec.progress, curve=overshoot(2), on_complete=self.rec.complete)
        self.clock.advance_to(0.3)
        self.clock.advance_to(5.0)
        self.assertEqual(self.rec.values[-1], 1.0)
        self.assertEqual(self.rec.completions, 1)

    def test_terminal_uses_curve_value_at_one(self):
        curve = shake(3)
        self.driver.start(1.0, self.rec.progress, curve=curve)
        self.clock.advance_to(1.0)
        self.assertEqual(self.rec.values, [curve(1.0)])

    def test_out_of_range_and_nan_values_pass_through(self):
        self.driver.start(1.0, self.rec.progress, curve=lambda x: float("nan") if x > 0 else 0.0)
        self.clock.advance_to(0.5)
        self.assertTrue(math.isnan(self.rec.values[0]))

    def test_frames_after_completion_are_ignored(self):
        self.driver.start(1.0, self.rec.progress, on_complete=self.rec.complete)
        self.clock.advance_to(1.0)
        self.clock.advance_to(1.5)
        self.clock.advance_to(2.0)
        self.assertEqual(len(self.rec.events), 2)

    def test_start_time_comes_from_clock(self):
        self.clock.advance_to(10.0)
        self.driver.start(1.0, self.rec.progress)
        self.clock.advance_to(10.5)
        self.assertEqual(self.rec.values, [0.5])

    def test_progress_and_frame_count(self):
        run = self.driver.start(1.0, self.rec.progress)
        self.clock.advance_to(0.5)
        self.assertEqual(run.progress, 0.5)
        self.assertEqual(run.frame_count, 1)
        self.clock.advance_to(1.0)
        self.assertEqual(run.progress, 1.0)
        self.assertEqual(run.frame_count, 2)


class TestStop(unittest.TestCase):
    def setUp(self):
        self.clock = ManualFrameClock()
        self.driver = AnimationDriver(self.clock)
        self.rec = Recorder()

    def test_stop_fast_forwards(self):
        curve = overshoot(3)
        run = self.driver.start(1.0, self.rec.progress, curve=curve, on_complete=self.rec.complete)
        self.clock.advance_to(0.3)
        self.assertEqual(len(self.rec.values), 1)

        run.stop()
        self.assertEqual(self.rec.values[-1], curve(1.0))
        self.assertEqual(self.rec.completions, 1)
        self.assertEqual(self.rec.events[-1], ("complete",))
        self.assertEqual(self.clock.subscriber_count, 0)
        self.assertFalse(run.is_running)

        run.stop()
        self.clock.advance_to(0.6)
        self.assertEqual(len(self.rec.events), 3)

    def test_stop_from_inside_callbacks_is_a_no_op(self):
        runs = []

        def on_progress(value):
            self.rec.progress(value)
            runs[0].stop()

        runs.append(self.driver.start(1.0, on_progress, on_complete=lambda: runs[0].stop()))
        self.clock.advance_to(0.5)

        self.assertEqual(self.rec.values, [0.5, 1.0])
        self.assertFalse(runs[0].is_running)

    def test_completion_can_start_next_run(self):
        def chain():
            self.driver.start(1.0, self.rec.progress, on_complete=self.rec.complete)

        self.driver.start(1.0, self.rec.progress, on_complete=chain)
        self.clock.advance_to(1.0)
        self.assertEqual(self.driver.active_count, 1)
        self.clock.advance_to(1.5)
        self.clock.advance_to(2.0)
        self.assertEqual(self.rec.values, [1.0, 0.5, 1.0])
        self.assertEqual(self.rec.completions, 1)

    def test_raising_terminal_update_releases_clock(self):
        def on_progress(value):
            self.rec.progress(value)
            if value >= 1.0:
                raise RuntimeError("terminal update failed")

        run = self.driver.start(1.0, on_progress, on_complete=self.rec.complete)
        self.clock.advance_to(0.5)
        with self.assertLogs("animator.core.clock", level="ERROR"):
            self.clock.advance_to(1.0)

        self.assertEqual(self.rec.values, [0.5, 1.0])
        self.assertFalse(run.is_running)
        self.assertEqual(self.clock.subscriber_count, 0)
        self.assertEqual(self.driver.active_count, 0)
        self.assertEqual(self.rec.completions, 0)

    def test_raising_terminal_update_on_stop(self):
        def on_progress(value):
            if value >= 1.0:
                raise RuntimeError("terminal update failed")

        run = self.driver.start(1.0, on_progress)
        with self.assertRaises(RuntimeError):
            run.stop()
        self.assertEqual(self.clock.subscriber_count, 0)
        self.assertEqual(self.driver.active_count, 0)


class TestDriverRegistry(unittest.TestCase):
    def setUp(self):
        self.clock = ManualFrameClock()
        self.driver = AnimationDriver(self.clock)

    def test_runs_are_independent(self):
        a, b = Recorder(), Recorder()
        self.driver.start(1.0, a.progress)
        self.driver.start(2.0, b.progress)
        self.assertEqual(self.driver.active_count, 2)
        self.assertEqual(self.clock.subscriber_count, 2)

        self.clock.advance_to(1.0)
        self.assertEqual(a.values, [1.0])
        self.assertEqual(b.values, [0.5])
        self.assertEqual(self.driver.active_count, 1)

    def test_stop_all(self):
        recs = [Recorder() for _ in range(3)]
        for rec in recs:
            self.driver.start(1.0, rec.progress, on_complete=rec.complete)
        self.clock.advance_to(0.5)

        self.assertEqual(self.driver.stop_all(), 3)
        for rec in recs:
            self.assertEqual(rec.values, [0.5, 1.0])
            self.assertEqual(rec.completions, 1)
        self.assertEqual(self.driver.active_count, 0)
        self.assertEqual(self.clock.subscriber_count, 0)
        self.assertEqual(self.driver.stop_all(), 0)

    def test_stop_all_skips_runs_already_stopped(self):
        runs = {}
        self.driver.start(1.0, lambda p: None, on_complete=lambda: runs["second"].stop())
        runs["second"] = self.driver.start(1.0, lambda p: None)
        self.driver.start(1.0, lambda p: None)

        self.assertEqual(self.driver.stop_all(), 2)
        self.assertFalse(runs["second"].is_running)
        self.assertEqual(self.driver.active_count, 0)

    def test_names(self):
        run = self.driver.start(1.0, lambda p: None, name="fade")
        self.assertEqual(run.name, "fade")
        self.assertIn("fade", repr(run))
        other = self.driver.start(1.0, lambda p: None)
        self.assertTrue(other.name.startswith("run_"))

    def test_animate_helper(self):
        rec = Recorder()
        run = animate(self.clock, 1.0, rec.progress, on_complete=rec.complete)
        self.clock.advance_to(0.5)
        run.stop()
        self.assertEqual(rec.values, [0.5, 1.0])
        self.assertEqual(rec.completions, 1)


if __name__ == "__main__":
    unittest.main()
