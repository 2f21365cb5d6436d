import sys
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "encoder"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "timing"))

from countdown_core.driver import DriverState, FrameSequenceDriver
from countdown_renderer import DrawingSurface, build_render_config
from countdown_timing import PASSED_MESSAGE, UnitBreakdown, compute_initial


class _FakeEncoder:
    def __init__(self):
        self.frames = []
        self.finished = 0

    def add_frame(self, frame):
        self.frames.append(frame.snapshot())

    def finish(self):
        self.finished += 1


class _ExplodingEncoder(_FakeEncoder):
    def add_frame(self, frame):
        raise OSError("disk gone")


NOW = datetime(2026, 3, 1, 9, 30, 0, tzinfo=timezone.utc)


def _driver(frames=3, encoder=None):
    cfg = build_render_config(width=200, height=80, frame_count=frames)
    surface = DrawingSurface(cfg.width, cfg.height, background=cfg.background_color)
    return FrameSequenceDriver(cfg, surface, encoder or _FakeEncoder())


class DriverTests(unittest.TestCase):
    def test_ninety_seconds_three_frames(self):
        driver = _driver(frames=3)
        report = driver.run(compute_initial(NOW + timedelta(seconds=90), NOW))

        self.assertFalse(report.passed)
        self.assertEqual(
            [r.breakdown for r in report.frames],
            [UnitBreakdown(0, 0, 1, 30), UnitBreakdown(0, 0, 1, 29), UnitBreakdown(0, 0, 1, 28)],
        )
        self.assertEqual(report.frames[0].text, "00 00 01 30")
        self.assertEqual(len(driver.encoder.frames), 3)
        self.assertEqual(driver.encoder.finished, 1)
        self.assertIs(driver.state, DriverState.DONE)

    def test_frames_decrease_by_one_second(self):
        driver = _driver(frames=90)
        report = driver.run(compute_initial(NOW + timedelta(days=2, hours=3), NOW))
        self.assertEqual(report.frame_count, 90)
        totals = [r.breakdown.total_seconds for r in report.frames]
        self.assertEqual(totals, list(range(totals[0], totals[0] - 90, -1)))

    def test_passed_target_renders_single_frame(self):
        driver = _driver(frames=30)
        report = driver.run(compute_initial(NOW - timedelta(seconds=5), NOW))
        self.assertTrue(report.passed)
        self.assertEqual(report.frame_count, 1)
        self.assertIsNone(report.frames[0].breakdown)
        self.assertEqual(report.frames[0].text, PASSED_MESSAGE)
        self.assertEqual(len(driver.encoder.frames), 1)
        self.assertEqual(driver.encoder.finished, 1)

    def test_frames_past_deadline_show_zero(self):
        driver = _driver(frames=5)
        report = driver.run(compute_initial(NOW + timedelta(seconds=2), NOW))
        self.assertEqual([r.breakdown.seconds for r in report.frames], [2, 1, 0, 0, 0])
        self.assertEqual(report.frames[-1].text, "00 00 00 00")

    def test_consecutive_frames_differ(self):
        driver = _driver(frames=2)
        driver.run(compute_initial(NOW + timedelta(seconds=100), NOW))
        first, second = driver.encoder.frames
        self.assertNotEqual(first.tobytes(), second.tobytes())

    def test_encoder_failure_propagates(self):
        driver = _driver(frames=2, encoder=_ExplodingEncoder())
        with self.assertRaises(OSError):
            driver.run(compute_initial(NOW + timedelta(seconds=10), NOW))

    def test_driver_runs_once(self):
        driver = _driver(frames=1)
        driver.run(compute_initial(NOW + timedelta(seconds=10), NOW))
        with self.assertRaises(RuntimeError):
            driver.run(compute_initial(NOW + timedelta(seconds=10), NOW))


if __name__ == "__main__":
    unittest.main()
