"""Tests for random circle generation."""

import math
import random

from orbit_canvas.core.config import SceneCfg
from orbit_canvas.core.spawn import hsl_to_rgb, random_circle


class TestHslToRgb:
    def test_primary_hues(self):
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
        assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)


class TestRandomCircle:
    def test_ranges(self):
        rng = random.Random(1234)
        for _ in range(300):
            circle = random_circle(800, 600, rng=rng)
            assert 0.0 <= circle.x < 800
            assert 0.0 <= circle.y < 600
            assert 10.0 <= circle.radius < 30.0
            assert 0.0 <= circle.angle < 2 * math.pi
            assert circle.orbit_radius == circle.radius + 10.0
            assert all(0 <= channel <= 255 for channel in circle.color)

    def test_full_saturation_colors(self):
        rng = random.Random(5)
        for _ in range(50):
            r, g, b = random_circle(100, 100, rng=rng).color
            # Full saturation at 50% lightness always hits both extremes.
            assert max(r, g, b) >= 254
            assert min(r, g, b) <= 1

    def test_seed_is_deterministic(self):
        a = random_circle(800, 600, rng=random.Random(99))
        b = random_circle(800, 600, rng=random.Random(99))
        assert a.position.tolist() == b.position.tolist()
        assert (a.radius, a.color, a.angle) == (b.radius, b.color, b.angle)

    def test_config_is_applied(self):
        cfg = SceneCfg(min_radius=40.0, max_radius=41.0, orbit_gap=2.0, orbit_speed=0.5, moon_radius=3.0)
        circle = random_circle(50, 50, rng=random.Random(0), cfg=cfg)
        assert 40.0 <= circle.radius < 41.0
        assert circle.orbit_radius == circle.radius + 2.0
        assert circle.orbit_speed == 0.5
        assert circle.moon_radius == 3.0
