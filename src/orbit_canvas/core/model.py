"""Data models for the canvas entities."""
from __future__ import annotations

import math
from dataclasses import InitVar, dataclass, field

import numpy as np

from .config import SCENE_CFG


@dataclass(eq=False)
class Circle:
    """A draggable disc with a moon orbiting around it.

    ``orbit_radius`` is fixed at construction as ``radius + orbit_gap`` and
    is not recomputed afterwards. ``angle`` grows without bound.
    """

    position: np.ndarray
    radius: float
    color: tuple[int, int, int]
    angle: float = 0.0
    moon_radius: float = SCENE_CFG.moon_radius
    orbit_speed: float = SCENE_CFG.orbit_speed
    orbit_gap: InitVar[float] = SCENE_CFG.orbit_gap
    orbit_radius: float = field(init=False)

    def __post_init__(self, orbit_gap: float) -> None:
        self.position = np.array(self.position, dtype=float)
        self.orbit_radius = self.radius + orbit_gap

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def move_to(self, x: float, y: float) -> None:
        self.position[0] = x
        self.position[1] = y

    def update(self, dt: float = 1.0) -> None:
        """Advance the moon by ``dt`` frames."""

        self.angle += self.orbit_speed * dt

    def moon_position(self) -> tuple[float, float]:
        return (
            self.x + math.cos(self.angle) * self.orbit_radius,
            self.y + math.sin(self.angle) * self.orbit_radius,
        )

    def contains_point(self, px: float, py: float) -> bool:
        """Return ``True`` if ``(px, py)`` lies on or inside the disc."""

        return math.hypot(self.x - px, self.y - py) <= self.radius


__all__ = ["Circle"]
