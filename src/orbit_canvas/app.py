"""
Orbit Canvas - Interactive circles with orbiting moons
======================================================

Spawn shaded circles, drag them around with the mouse and put any image
behind them. Each circle carries a small moon that keeps orbiting while the
window is open.

Controls: Space or "Add circle" spawns, left drag moves a circle,
"Background..." or dropping a file on the window sets the backdrop,
C clears the canvas, Esc quits.
"""
from __future__ import annotations

import argparse
import random
import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import Sequence

import pygame
from pygame.locals import DOUBLEBUF, RESIZABLE

from orbit_canvas.core.config import RENDER_CFG, SCENE_CFG, RenderCfg
from orbit_canvas.core.logging_utils import SessionLogger
from orbit_canvas.core.scene import Scene
from orbit_canvas.render import (
    BACKGROUND_FAILED,
    BACKGROUND_LOADED,
    AssetLibrary,
    BackgroundLoader,
    Button,
    ButtonVisualStyle,
    CirclePainter,
    draw_background,
    draw_status_text,
    layout_buttons,
    load_font,
    prepare_background,
)


def ask_background_path() -> Path | None:
    """Open a native file dialog and return the chosen image, if any."""

    try:
        import tkinter as tk
        from tkinter import filedialog
    except ImportError as exc:
        print(f"File dialog unavailable: {exc}", file=sys.stderr)
        return None

    try:
        root = tk.Tk()
    except tk.TclError as exc:
        print(f"File dialog unavailable: {exc}", file=sys.stderr)
        return None
    try:
        root.withdraw()
        root.attributes("-topmost", True)
        file_path = filedialog.askopenfilename(
            title="Select background image",
            filetypes=[
                ("Image files", "*.png *.jpg *.jpeg *.bmp *.gif *.tga *.webp"),
                ("All files", "*.*"),
            ],
        )
    finally:
        root.destroy()
    if not file_path:
        return None
    return Path(file_path)


class RenderLoop:
    """Owns one frame of the canvas and the input that feeds it."""

    def __init__(
        self,
        scene: Scene,
        *,
        render_cfg: RenderCfg = RENDER_CFG,
        assets: AssetLibrary | None = None,
        loader: BackgroundLoader | None = None,
        logger: SessionLogger | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.scene = scene
        self.render_cfg = render_cfg
        self.assets = assets or AssetLibrary(render_cfg)
        self.loader = loader or BackgroundLoader()
        self.logger = logger
        self.rng = rng or random.Random()
        self.running = True
        self._painter = CirclePainter(self.assets, render_cfg)
        self._font: pygame.font.Font | None = None
        style = ButtonVisualStyle(
            base_color=render_cfg.button_color,
            hover_color=render_cfg.button_hover_color,
            text_color=render_cfg.button_text_color,
            radius=render_cfg.button_radius,
            border_color=render_cfg.button_border_color,
            border_width=render_cfg.button_border_width,
        )
        self.buttons: list[Button] = layout_buttons(
            [
                ("Add circle", self.spawn),
                ("Background...", self.choose_background),
            ],
            origin=(render_cfg.button_margin, render_cfg.button_margin),
            size=render_cfg.button_size,
            spacing=render_cfg.button_spacing,
            style=style,
        )

    def _log(self, event_type: str, x: float | None = None, y: float | None = None, details: object = "") -> None:
        if self.logger is not None:
            self.logger.log_event(event_type, x, y, details)

    # --- Actions ---
    def spawn(self) -> None:
        circle = self.scene.spawn(self.rng)
        self._log("spawn", circle.x, circle.y, f"r={circle.radius:.3f}")

    def clear(self) -> None:
        self._log("clear", details=len(self.scene.registry))
        self.scene.clear()

    def request_background(self, path: str | Path) -> None:
        self.loader.request(path)

    def choose_background(self) -> None:
        path = ask_background_path()
        if path is not None:
            self.request_background(path)

    # --- Input ---
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_SPACE:
                self.spawn()
            elif event.key == pygame.K_c:
                self.clear()

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:
                return
            if any(button.handle_event(event) for button in self.buttons):
                return
            circle = self.scene.pointer_down(*event.pos)
            if circle is not None:
                self._log("drag_start", circle.x, circle.y)

        elif event.type == pygame.MOUSEMOTION:
            self.scene.pointer_move(*event.pos)

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                released = self.scene.pointer_up()
                if released is not None:
                    self._log("drag_end", released.x, released.y)

        elif event.type == pygame.VIDEORESIZE:
            self.scene.resize(event.w, event.h)

        elif event.type == pygame.DROPFILE:
            self.request_background(event.file)

        elif event.type == BACKGROUND_LOADED:
            image = prepare_background(event.image)
            self.scene.set_background(image)
            self._log("background_loaded", image.width, image.height, image.source)

        elif event.type == BACKGROUND_FAILED:
            print(f"Could not load background {event.path}: {event.error}", file=sys.stderr)
            self._log("background_failed", details=f"{event.path}: {event.error}")

    # --- Frame ---
    def frame(
        self,
        surface: pygame.Surface,
        *,
        mouse_pos: tuple[int, int] | None = None,
        fps: float | None = None,
        show_ui: bool = True,
    ) -> None:
        cfg = self.render_cfg
        surface.fill(cfg.clear_color)
        draw_background(surface, self.scene.background, assets=self.assets)
        self.scene.registry.draw_all(surface, self._painter)

        if not show_ui:
            return
        font = self._get_font()
        for button in self.buttons:
            button.draw(surface, font, mouse_pos)
        status = f"Circles: {len(self.scene.registry)}"
        if fps is not None:
            status += f"   FPS: {fps:.0f}"
        draw_status_text(
            surface,
            font,
            status,
            color=cfg.hud_text_color,
            alpha=cfg.hud_text_alpha,
        )

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = load_font(self.render_cfg.font_names, self.render_cfg.font_size)
        return self._font

    def run(self, screen: pygame.Surface, clock: pygame.time.Clock) -> None:
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
                if not self.running:
                    break
            if not self.running:
                break
            self.frame(screen, fps=clock.get_fps())
            pygame.display.flip()
            clock.tick(self.render_cfg.fps)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive canvas of circles with orbiting moons.")
    parser.add_argument("--width", type=int, default=RENDER_CFG.width, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=RENDER_CFG.height, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=RENDER_CFG.fps, help="Target frame rate")
    parser.add_argument("--seed", type=int, default=None, help="Seed for circle placement and colors")
    parser.add_argument("--circles", type=int, default=0, help="Number of circles to spawn at startup")
    parser.add_argument("--background", type=Path, default=None, help="Image to load as the backdrop")
    parser.add_argument("--log-dir", type=Path, default=None, help="Write a session log under this folder")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("Window size must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.circles < 0:
        parser.error("--circles must not be negative")

    render_cfg = replace(RENDER_CFG, width=args.width, height=args.height, fps=args.fps)

    pygame.init()
    pygame.display.set_caption(render_cfg.window_title)
    screen = pygame.display.set_mode((render_cfg.width, render_cfg.height), RESIZABLE | DOUBLEBUF)
    clock = pygame.time.Clock()

    logger: SessionLogger | None = None
    if args.log_dir is not None:
        logger = SessionLogger(args.log_dir)
        logger.write_meta(
            {
                "width": render_cfg.width,
                "height": render_cfg.height,
                "fps": render_cfg.fps,
                "seed": args.seed,
                "scene_cfg": asdict(SCENE_CFG),
            }
        )

    scene = Scene(*screen.get_size())
    loop = RenderLoop(
        scene,
        render_cfg=render_cfg,
        logger=logger,
        rng=random.Random(args.seed),
    )
    for _ in range(args.circles):
        loop.spawn()
    if args.background is not None:
        loop.request_background(args.background)

    try:
        loop.run(screen, clock)
    finally:
        loop.loader.wait(1.0)
        if logger is not None:
            logger.close()
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
