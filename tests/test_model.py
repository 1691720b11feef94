"""Tests for the Circle entity."""

import math

import numpy as np
import pytest
from orbit_canvas.core.model import Circle


def make_circle(x=100.0, y=100.0, radius=20.0, angle=0.0):
    return Circle(position=(x, y), radius=radius, color=(255, 0, 0), angle=angle)


class TestContainsPoint:
    """Point containment is a closed disc test."""

    def test_center_is_inside(self):
        circle = make_circle(x=37.5, y=412.25, radius=11.0)
        assert circle.contains_point(circle.x, circle.y)

    def test_boundary_is_inclusive(self):
        circle = make_circle()
        assert circle.contains_point(120.0, 100.0)
        assert circle.contains_point(100.0, 80.0)

    def test_just_outside_is_rejected(self):
        circle = make_circle()
        assert not circle.contains_point(120.001, 100.0)
        assert not circle.contains_point(100.0 + 15.0, 100.0 + 15.0)

    def test_far_point_is_rejected(self):
        circle = make_circle()
        assert not circle.contains_point(0.0, 0.0)


class TestOrbit:
    """Moon orbit radius and phase progression."""

    def test_orbit_radius_is_radius_plus_gap(self):
        circle = make_circle(radius=17.0)
        assert circle.orbit_radius == 27.0
        assert circle.moon_radius == 5.0
        assert circle.orbit_speed == 0.02

    def test_orbit_radius_is_not_recomputed(self):
        circle = make_circle(radius=17.0)
        circle.radius = 40.0
        assert circle.orbit_radius == 27.0

    def test_custom_orbit_gap(self):
        circle = Circle(position=(0, 0), radius=10.0, color=(0, 0, 0), orbit_gap=4.0)
        assert circle.orbit_radius == 14.0

    def test_each_update_advances_by_speed(self):
        circle = make_circle(angle=1.25)
        previous = circle.angle
        for _ in range(10):
            circle.update()
            assert circle.angle > previous
            assert circle.angle - previous == pytest.approx(0.02)
            previous = circle.angle

    def test_n_updates_accumulate(self):
        circle = make_circle(angle=0.5)
        for _ in range(500):
            circle.update()
        assert circle.angle == pytest.approx(0.5 + 500 * 0.02)

    def test_phase_is_not_wrapped(self):
        circle = make_circle(angle=6.2)
        for _ in range(100):
            circle.update()
        assert circle.angle > 2 * math.pi

    def test_fractional_frames(self):
        circle = make_circle()
        circle.update(2.5)
        assert circle.angle == pytest.approx(0.05)

    def test_moon_position(self):
        circle = make_circle(x=50.0, y=60.0, radius=10.0, angle=0.0)
        assert circle.moon_position() == pytest.approx((70.0, 60.0))
        circle.angle = math.pi / 2
        assert circle.moon_position() == pytest.approx((50.0, 80.0))


class TestPosition:
    def test_position_is_float_copy(self):
        source = np.array([1, 2])
        circle = Circle(position=source, radius=5.0, color=(0, 0, 0))
        circle.move_to(10.5, 20.5)
        assert circle.position.dtype == float
        assert source.tolist() == [1, 2]
        assert (circle.x, circle.y) == (10.5, 20.5)

    def test_identity_equality(self):
        a = make_circle()
        b = make_circle()
        assert a != b
        assert a == a
