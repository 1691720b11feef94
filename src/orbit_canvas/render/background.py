"""Backdrop compositing: aspect-fit an image into the canvas."""
from __future__ import annotations

import pygame

from .assets import AssetLibrary, BackgroundImage


def aspect_fit(
    image_size: tuple[float, float], surface_size: tuple[float, float]
) -> tuple[float, float, float, float]:
    """Return ``(offset_x, offset_y, width, height)`` that fits the image inside.

    The image is first scaled to the surface width. If that makes it too
    tall it is scaled to the surface height instead. The result is centered
    on both axes and keeps the image's aspect ratio.
    """

    image_width, image_height = image_size
    surface_width, surface_height = surface_size
    if image_width <= 0 or image_height <= 0:
        raise ValueError("Image size must be positive")
    aspect_ratio = image_width / image_height

    new_width = float(surface_width)
    new_height = surface_width / aspect_ratio
    if new_height > surface_height:
        new_height = float(surface_height)
        new_width = surface_height * aspect_ratio

    offset_x = (surface_width - new_width) / 2.0
    offset_y = (surface_height - new_height) / 2.0
    return offset_x, offset_y, new_width, new_height


def draw_background(
    surface: pygame.Surface,
    background: BackgroundImage | None,
    *,
    assets: AssetLibrary,
) -> pygame.Rect | None:
    """Blit ``background`` aspect-fitted and centered. Returns the target rect."""

    if background is None:
        return None
    if background.width <= 0 or background.height <= 0:
        return None
    surface_width, surface_height = surface.get_size()
    if surface_width <= 0 or surface_height <= 0:
        return None

    offset_x, offset_y, width, height = aspect_fit(
        (background.width, background.height), (surface_width, surface_height)
    )
    size = (max(1, round(width)), max(1, round(height)))
    scaled = assets.get_scaled_background(background, size)
    rect = scaled.get_rect(topleft=(round(offset_x), round(offset_y)))
    surface.blit(scaled, rect)
    return rect


__all__ = ["aspect_fit", "draw_background"]
