from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

from .assets import Color, get_text_surface


@dataclass(frozen=True)
class ButtonVisualStyle:
    base_color: Color
    hover_color: Color
    text_color: tuple[int, int, int]
    radius: int
    border_color: Color | None = None
    border_width: int = 0


class Button:
    """Rounded button with hover feedback that fires a callback on left click."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        callback: Callable[[], None],
        *,
        style: ButtonVisualStyle,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self._callback = callback
        self._style = style

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        mouse_pos: tuple[int, int] | None = None,
    ) -> None:
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()
        style = self._style
        hovered = self.rect.collidepoint(mouse_pos)
        color = style.hover_color if hovered else style.base_color
        button_surface = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(
            button_surface,
            color,
            button_surface.get_rect(),
            border_radius=style.radius,
        )
        if style.border_color is not None and style.border_width > 0:
            pygame.draw.rect(
                button_surface,
                style.border_color,
                button_surface.get_rect(),
                style.border_width,
                border_radius=style.radius,
            )
        surface.blit(button_surface, self.rect.topleft)
        text_surf = get_text_surface(font, self.text, style.text_color)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Run the callback on a left click inside the button. Returns ``True`` if consumed."""

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


def layout_buttons(
    labels: Sequence[tuple[str, Callable[[], None]]],
    *,
    origin: tuple[int, int],
    size: tuple[int, int],
    spacing: int,
    style: ButtonVisualStyle,
) -> list[Button]:
    """Stack buttons left to right starting at ``origin``."""

    x, y = origin
    width, height = size
    buttons = []
    for idx, (text, callback) in enumerate(labels):
        rect = (x + idx * (width + spacing), y, width, height)
        buttons.append(Button(rect, text, callback, style=style))
    return buttons


def draw_status_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    *,
    color: tuple[int, int, int],
    alpha: int = 255,
    margin: int = 10,
) -> None:
    if not text:
        return
    text_surf = get_text_surface(font, text, color)
    if alpha < 255:
        text_surf = text_surf.copy()
        text_surf.set_alpha(alpha)
    rect = text_surf.get_rect()
    rect.bottomleft = (margin, surface.get_height() - margin)
    surface.blit(text_surf, rect)
