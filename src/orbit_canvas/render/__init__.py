"""Rendering helpers for the orbit canvas."""

from .assets import (
    BACKGROUND_FAILED,
    BACKGROUND_LOADED,
    AssetLibrary,
    BackgroundImage,
    BackgroundLoader,
    get_text_surface,
    load_background_image,
    load_font,
    prepare_background,
    radial_gradient_rgba,
)
from .background import aspect_fit, draw_background
from .draw import (
    CirclePainter,
    draw_circle,
    draw_disc,
    draw_moon,
)
from .ui import (
    Button,
    ButtonVisualStyle,
    draw_status_text,
    layout_buttons,
)

__all__ = [
    "AssetLibrary",
    "BACKGROUND_FAILED",
    "BACKGROUND_LOADED",
    "BackgroundImage",
    "BackgroundLoader",
    "Button",
    "ButtonVisualStyle",
    "CirclePainter",
    "aspect_fit",
    "draw_background",
    "draw_circle",
    "draw_disc",
    "draw_moon",
    "draw_status_text",
    "get_text_surface",
    "layout_buttons",
    "load_background_image",
    "load_font",
    "prepare_background",
    "radial_gradient_rgba",
]
