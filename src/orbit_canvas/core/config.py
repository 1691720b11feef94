"""Configuration dataclasses for the orbit canvas."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SceneCfg:
    moon_radius: float = 5.0
    orbit_gap: float = 10.0
    orbit_speed: float = 0.02
    min_radius: float = 10.0
    max_radius: float = 30.0
    hue_range: tuple[float, float] = (0.0, 360.0)
    saturation: float = 100.0
    lightness: float = 50.0


@dataclass(frozen=True)
class RenderCfg:
    width: int = 800
    height: int = 600
    fps: int = 60
    window_title: str = "Orbit Canvas"
    clear_color: tuple[int, int, int] = (14, 18, 28)
    moon_color: tuple[int, int, int] = (255, 255, 255)
    gradient_highlight_color: tuple[int, int, int] = (255, 255, 255)
    gradient_edge_color: tuple[int, int, int] = (0, 0, 0)
    gradient_stops: tuple[float, float, float] = (0.0, 0.3, 1.0)
    gradient_focus_ratio: float = 1.0 / 3.0
    button_size: tuple[int, int] = (150, 40)
    button_margin: int = 12
    button_spacing: int = 10
    button_color: tuple[int, int, int, int] = (8, 32, 64, int(255 * 0.78))
    button_hover_color: tuple[int, int, int, int] = (18, 52, 94, int(255 * 0.88))
    button_text_color: tuple[int, int, int] = (234, 241, 255)
    button_border_color: tuple[int, int, int, int] = (88, 140, 255, int(255 * 0.55))
    button_border_width: int = 1
    button_radius: int = 12
    hud_text_color: tuple[int, int, int] = (234, 241, 255)
    hud_text_alpha: int = int(255 * 0.6)
    font_names: tuple[str, ...] = ("consolas", "dejavusansmono", "couriernew")
    font_size: int = 16


SCENE_CFG = SceneCfg()
RENDER_CFG = RenderCfg()


__all__ = ["RENDER_CFG", "SCENE_CFG", "RenderCfg", "SceneCfg"]
