import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from countdown_renderer.normalize import build_render_config, clamp, normalize, normalize_color, safe_name


class ClampTests(unittest.TestCase):
    def test_clamp_semantics(self):
        self.assertEqual(clamp(5, 1, 10), 5)
        self.assertEqual(clamp(-3, 1, 10), 1)
        self.assertEqual(clamp(11, 1, 10), 10)
        self.assertEqual(clamp(1, 1, 10), 1)
        self.assertEqual(clamp(10, 1, 10), 10)

    def test_boundary_values(self):
        self.assertEqual(normalize(149, 79, 0), (150, 80, 1))
        self.assertEqual(normalize(501, 501, 91), (500, 500, 90))
        self.assertEqual(normalize(150, 80, 1), (150, 80, 1))
        self.assertEqual(normalize(500, 500, 90), (500, 500, 90))

    def test_any_width_stays_in_range(self):
        for width in range(-1000, 2000, 37):
            w, h, frames = normalize(width, width, width)
            self.assertTrue(150 <= w <= 500)
            self.assertTrue(80 <= h <= 500)
            self.assertTrue(1 <= frames <= 90)


class ColorAndNameTests(unittest.TestCase):
    def test_color_forms(self):
        self.assertEqual(normalize_color("FF8800", "#000000"), "#ff8800")
        self.assertEqual(normalize_color("#abc", "#000000"), "#aabbcc")
        self.assertEqual(normalize_color("not-a-color", "#123456"), "#123456")
        self.assertEqual(normalize_color(None, "#123456"), "#123456")

    def test_safe_name(self):
        self.assertEqual(safe_name("launch day"), "launch-day")
        self.assertEqual(safe_name("../../etc/passwd"), "etc-passwd")
        self.assertEqual(safe_name(""), "default")


class RenderConfigTests(unittest.TestCase):
    def test_defaults_and_derived_sizes(self):
        cfg = build_render_config()
        self.assertEqual((cfg.width, cfg.height, cfg.frame_count), (200, 80, 30))
        self.assertEqual(cfg.background_color, "#ffffff")
        self.assertEqual(cfg.text_color, "#000000")
        self.assertEqual(cfg.artifact_name, "default")
        self.assertEqual(cfg.title, "Countdown!")
        self.assertEqual(cfg.value_font_size, 20)
        self.assertEqual(cfg.label_font_size, 7)
        self.assertEqual(cfg.passed_font_size, 16)
        self.assertEqual(cfg.half_width, 100)

    def test_config_is_frozen(self):
        cfg = build_render_config(width=9999)
        self.assertEqual(cfg.width, 500)
        with self.assertRaises(Exception):
            cfg.width = 10  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
