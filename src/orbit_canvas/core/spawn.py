"""Random circle generation for the spawn action."""
from __future__ import annotations

import math
import random

import pygame

from .config import SCENE_CFG, SceneCfg
from .model import Circle


def _uniform(rng: random.Random, lo: float, hi: float) -> float:
    # Half-open [lo, hi), unlike random.uniform.
    return lo + rng.random() * (hi - lo)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """Convert an HSL triple (degrees, percent, percent) to an RGB tuple."""

    color = pygame.Color(0, 0, 0)
    color.hsla = (hue % 360.0, saturation, lightness, 100.0)
    return color.r, color.g, color.b


def random_circle(
    width: float,
    height: float,
    *,
    rng: random.Random | None = None,
    cfg: SceneCfg = SCENE_CFG,
) -> Circle:
    rng = rng or random.Random()
    x = _uniform(rng, 0.0, width)
    y = _uniform(rng, 0.0, height)
    radius = _uniform(rng, cfg.min_radius, cfg.max_radius)
    hue = _uniform(rng, *cfg.hue_range)
    angle = _uniform(rng, 0.0, 2.0 * math.pi)
    return Circle(
        position=(x, y),
        radius=radius,
        color=hsl_to_rgb(hue, cfg.saturation, cfg.lightness),
        angle=angle,
        moon_radius=cfg.moon_radius,
        orbit_speed=cfg.orbit_speed,
        orbit_gap=cfg.orbit_gap,
    )


__all__ = ["hsl_to_rgb", "random_circle"]
