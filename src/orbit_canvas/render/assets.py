from __future__ import annotations

import math
import threading
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import numpy as np
import pygame

from orbit_canvas.core.config import RENDER_CFG, RenderCfg


Color = tuple[int, int, int] | tuple[int, int, int, int]

BACKGROUND_LOADED = pygame.event.custom_type()
BACKGROUND_FAILED = pygame.event.custom_type()


@dataclass(frozen=True)
class BackgroundImage:
    """A decoded raster used as the canvas backdrop."""

    surface: pygame.Surface
    source: Path | None = None

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()


def load_background_image(path: str | Path) -> BackgroundImage:
    """Decode ``path`` into a :class:`BackgroundImage`.

    Raises ``pygame.error`` or ``OSError`` when the file cannot be read.
    """

    path = Path(path)
    surface = pygame.image.load(path.as_posix())
    return BackgroundImage(surface=surface, source=path)


def prepare_background(image: BackgroundImage) -> BackgroundImage:
    """Convert a decoded image to the display format once a window exists."""

    if pygame.display.get_surface() is None:
        return image
    return BackgroundImage(surface=image.surface.convert_alpha(), source=image.source)


class BackgroundLoader:
    """Decodes background images off the main thread.

    Every :meth:`request` posts exactly one event back to the pygame queue:
    ``BACKGROUND_LOADED`` with ``image`` or ``BACKGROUND_FAILED`` with
    ``path`` and ``error``. The scene is only touched by whoever handles those
    events on the main thread.
    """

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []

    def request(self, path: str | Path) -> threading.Thread:
        thread = threading.Thread(
            target=self._load, args=(Path(path),), name="background-loader", daemon=True
        )
        self._threads = [t for t in self._threads if t.is_alive()]
        self._threads.append(thread)
        thread.start()
        return thread

    def wait(self, timeout: float | None = None) -> None:
        for thread in list(self._threads):
            thread.join(timeout)

    @staticmethod
    def _post(event: pygame.event.Event) -> None:
        # The queue is gone once the app has shut pygame down.
        if pygame.display.get_init():
            pygame.event.post(event)

    @classmethod
    def _load(cls, path: Path) -> None:
        try:
            image = load_background_image(path)
        except Exception as exc:
            error = str(exc) or type(exc).__name__
            cls._post(pygame.event.Event(BACKGROUND_FAILED, path=path, error=error))
            return
        cls._post(pygame.event.Event(BACKGROUND_LOADED, image=image))


def radial_gradient_rgba(
    radius: float,
    color: tuple[int, int, int],
    *,
    render_cfg: RenderCfg = RENDER_CFG,
) -> np.ndarray:
    """Rasterize a shaded disc as an ``(size, size, 4)`` array indexed ``[x, y]``.

    The gradient runs from a zero-radius focus circle, shifted up and left of
    the center by ``radius * gradient_focus_ratio``, out to the full disc.
    Colors are interpolated across ``gradient_stops``: highlight, base color,
    edge. Alpha is 255 inside the disc with a one pixel soft rim.
    """

    if radius <= 0:
        raise ValueError("Gradient radius must be positive")
    size = int(math.ceil(radius * 2.0)) + 2
    center = size / 2.0
    coords = np.arange(size, dtype=float) + 0.5
    px, py = np.meshgrid(coords, coords, indexing="ij")

    shift = radius * render_cfg.gradient_focus_ratio
    dx = dy = shift
    a = dx * dx + dy * dy - radius * radius
    if a >= 0.0:
        raise ValueError("Gradient focus must lie inside the disc")

    qx = px - (center - shift)
    qy = py - (center - shift)
    qd = qx * dx + qy * dy
    qq = qx * qx + qy * qy
    t = (qd - np.sqrt(qd * qd - a * qq)) / a
    t = np.clip(t, 0.0, 1.0)

    palette = np.array(
        [render_cfg.gradient_highlight_color, color, render_cfg.gradient_edge_color],
        dtype=float,
    )
    stops = np.asarray(render_cfg.gradient_stops, dtype=float)
    rgba = np.empty((size, size, 4), dtype=np.uint8)
    for channel in range(3):
        rgba[..., channel] = np.rint(np.interp(t, stops, palette[:, channel])).astype(np.uint8)

    dist = np.hypot(px - center, py - center)
    coverage = np.clip(radius + 0.5 - dist, 0.0, 1.0)
    rgba[..., 3] = np.rint(coverage * 255.0).astype(np.uint8)
    return rgba


def surface_from_rgba(rgba: np.ndarray) -> pygame.Surface:
    width, height = rgba.shape[:2]
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    rgb_view = pygame.surfarray.pixels3d(surface)
    rgb_view[...] = rgba[..., :3]
    del rgb_view
    alpha_view = pygame.surfarray.pixels_alpha(surface)
    alpha_view[...] = rgba[..., 3]
    del alpha_view
    return surface


class AssetLibrary:
    """Cache for frequently accessed render assets."""

    _SPRITE_CACHE_MAX_SIZE = 512

    def __init__(self, render_cfg: RenderCfg = RENDER_CFG) -> None:
        self._render_cfg = render_cfg
        self._disc_cache: OrderedDict[tuple[float, tuple[int, int, int]], pygame.Surface] = OrderedDict()
        self._background_cache: dict[tuple[int, int, int], pygame.Surface] = {}

    def get_disc_sprite(self, radius: float, color: tuple[int, int, int]) -> pygame.Surface:
        key = (float(radius), tuple(color))
        cached = self._disc_cache.get(key)
        if cached is not None:
            self._disc_cache.move_to_end(key)
            return cached
        sprite = surface_from_rgba(
            radial_gradient_rgba(radius, color, render_cfg=self._render_cfg)
        )
        self._disc_cache[key] = sprite
        if len(self._disc_cache) > self._SPRITE_CACHE_MAX_SIZE:
            self._disc_cache.popitem(last=False)
        return sprite

    def get_scaled_background(
        self, background: BackgroundImage, size: tuple[int, int]
    ) -> pygame.Surface:
        cache_key = (id(background.surface), size[0], size[1])
        cached = self._background_cache.get(cache_key)
        if cached is not None:
            return cached
        source = background.surface
        if source.get_bitsize() in (24, 32):
            scaled = pygame.transform.smoothscale(source, size)
        else:
            scaled = pygame.transform.scale(source, size)
        # Only the current backdrop is worth keeping.
        self._background_cache = {cache_key: scaled}
        return scaled


_TEXT_SURFACE_CACHE_MAX_SIZE = 128
_TEXT_SURFACE_CACHE: OrderedDict[tuple[int, str, Color], pygame.Surface] = OrderedDict()


def get_text_surface(font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
    """Return a cached rendered surface for the given font, text and color."""

    key = (id(font), text, color)
    cached = _TEXT_SURFACE_CACHE.get(key)
    if cached is not None:
        _TEXT_SURFACE_CACHE.move_to_end(key)
        return cached
    rendered = font.render(text, True, color)
    _TEXT_SURFACE_CACHE[key] = rendered
    if len(_TEXT_SURFACE_CACHE) > _TEXT_SURFACE_CACHE_MAX_SIZE:
        _TEXT_SURFACE_CACHE.popitem(last=False)
    return rendered


def load_font(preferred_names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font:
    names = list(preferred_names)
    for name in names:
        match = pygame.font.match_font(name, bold=bold)
        if match:
            return pygame.font.Font(match, size)
    return pygame.font.SysFont(names[0] if names else None, size, bold=bold)
