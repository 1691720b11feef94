"""End-to-end scene scenarios without a window."""

import random

import numpy as np
import pygame
import pytest
from orbit_canvas.core.model import Circle
from orbit_canvas.core.scene import Scene
from orbit_canvas.render.assets import BackgroundImage


class TestDragScenario:
    def test_spawn_press_move_release(self):
        scene = Scene(800, 600)
        circle = scene.spawn(random.Random(42))
        start = circle.position.copy()
        dx, dy = 37.0, -12.5

        assert scene.pointer_down(circle.x, circle.y) is circle
        scene.pointer_move(start[0] + dx, start[1] + dy)
        assert scene.pointer_up() is circle

        assert circle.position == pytest.approx(start + np.array([dx, dy]))
        assert scene.drag.session is None

        scene.pointer_move(0.0, 0.0)
        assert circle.position == pytest.approx(start + np.array([dx, dy]))

    def test_press_off_center_keeps_grab_point(self):
        scene = Scene(800, 600)
        circle = scene.add(Circle(position=(200, 200), radius=25, color=(1, 2, 3)))
        scene.pointer_down(210, 195)
        scene.pointer_move(410, 395)
        scene.pointer_up()
        assert circle.position.tolist() == [400.0, 400.0]

    def test_hit_inside_second_of_two(self):
        scene = Scene(800, 600)
        first = scene.add(Circle(position=(100, 100), radius=20, color=(1, 2, 3)))
        second = scene.add(Circle(position=(400, 300), radius=20, color=(4, 5, 6)))
        assert scene.registry.hit_test(410, 305) is second
        assert scene.registry.hit_test(410, 305) is not first


class TestSceneState:
    def test_spawn_uses_current_size(self):
        scene = Scene(800, 600)
        scene.resize(50, 40)
        rng = random.Random(3)
        for _ in range(50):
            circle = scene.spawn(rng)
            assert circle.x < 50 and circle.y < 40
        assert len(scene.registry) == 50
        assert scene.size == (50, 40)

    def test_background_swap(self):
        scene = Scene(800, 600)
        first = BackgroundImage(pygame.Surface((4, 4)))
        second = BackgroundImage(pygame.Surface((8, 2)))
        assert scene.background is None
        scene.set_background(first)
        scene.set_background(second)
        assert scene.background is second
        scene.set_background(None)
        assert scene.background is None

    def test_clear_ends_drag(self):
        scene = Scene(800, 600)
        circle = scene.add(Circle(position=(10, 10), radius=5, color=(1, 2, 3)))
        scene.pointer_down(10, 10)
        scene.clear()
        assert len(scene.registry) == 0
        assert not scene.drag.is_dragging
        scene.pointer_move(100, 100)
        assert circle.position.tolist() == [10.0, 10.0]
