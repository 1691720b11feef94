from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from .assets import AssetLibrary

if TYPE_CHECKING:  # pragma: no cover
    from orbit_canvas.core.config import RenderCfg
    from orbit_canvas.core.model import Circle


def draw_disc(
    surface: pygame.Surface,
    position: tuple[float, float],
    radius: float,
    color: tuple[int, int, int],
    *,
    assets: AssetLibrary,
) -> None:
    if radius <= 0:
        return
    sprite = assets.get_disc_sprite(radius, color)
    width, height = sprite.get_size()
    topleft = (round(position[0] - width / 2.0), round(position[1] - height / 2.0))
    surface.blit(sprite, topleft)


def draw_moon(
    surface: pygame.Surface,
    position: tuple[float, float],
    radius: float,
    *,
    color: tuple[int, int, int],
) -> None:
    if radius <= 0:
        return
    pygame.draw.circle(surface, color, position, radius)


def draw_circle(
    surface: pygame.Surface,
    circle: Circle,
    *,
    assets: AssetLibrary,
    render_cfg: RenderCfg,
) -> None:
    """Paint ``circle`` and its moon at their current state."""

    draw_disc(surface, (circle.x, circle.y), circle.radius, circle.color, assets=assets)
    draw_moon(surface, circle.moon_position(), circle.moon_radius, color=render_cfg.moon_color)


class CirclePainter:
    """Callable bound to a cache and config, handed to the registry each frame."""

    def __init__(self, assets: AssetLibrary, render_cfg: RenderCfg) -> None:
        self._assets = assets
        self._render_cfg = render_cfg

    def __call__(self, surface: pygame.Surface, circle: Circle) -> None:
        draw_circle(surface, circle, assets=self._assets, render_cfg=self._render_cfg)


__all__ = ["CirclePainter", "draw_circle", "draw_disc", "draw_moon"]
