"""Ordered collection of the circles living on the canvas."""
from __future__ import annotations

from typing import Callable, Iterator, TypeVar

from .model import Circle

SurfaceT = TypeVar("SurfaceT")


class CircleRegistry:
    """Insertion-ordered store of circles.

    Circles are drawn oldest-first, so the most recently added circle ends up
    on top. :meth:`hit_test` walks the list newest-first to match what the
    user sees.
    """

    def __init__(self) -> None:
        self._circles: list[Circle] = []

    def __len__(self) -> int:
        return len(self._circles)

    def __iter__(self) -> Iterator[Circle]:
        return iter(self._circles)

    def add(self, circle: Circle) -> Circle:
        self._circles.append(circle)
        return circle

    def clear(self) -> None:
        self._circles.clear()

    def update_all(self, dt: float = 1.0) -> None:
        for circle in self._circles:
            circle.update(dt)

    def draw_all(
        self,
        surface: SurfaceT,
        painter: Callable[[SurfaceT, Circle], None],
        *,
        dt: float = 1.0,
    ) -> None:
        """Advance every circle by ``dt`` frames, then paint it."""

        for circle in self._circles:
            circle.update(dt)
            painter(surface, circle)

    def hit_test(self, px: float, py: float) -> Circle | None:
        for circle in reversed(self._circles):
            if circle.contains_point(px, py):
                return circle
        return None


__all__ = ["CircleRegistry"]
