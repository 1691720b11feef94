"""High level scene container shared by the frame loop and input handlers."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .config import SCENE_CFG, SceneCfg
from .interaction import DragController
from .model import Circle
from .registry import CircleRegistry
from .spawn import random_circle

if TYPE_CHECKING:  # pragma: no cover
    from orbit_canvas.render.assets import BackgroundImage


@dataclass
class Scene:
    """Everything the canvas shows: circles, the drag state and the backdrop."""

    width: int
    height: int
    cfg: SceneCfg = SCENE_CFG
    registry: CircleRegistry = field(default_factory=CircleRegistry)
    background: BackgroundImage | None = None
    drag: DragController = field(init=False)

    def __post_init__(self) -> None:
        self.drag = DragController(self.registry)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def add(self, circle: Circle) -> Circle:
        return self.registry.add(circle)

    def spawn(self, rng: random.Random | None = None) -> Circle:
        circle = random_circle(self.width, self.height, rng=rng, cfg=self.cfg)
        return self.registry.add(circle)

    def pointer_down(self, x: float, y: float) -> Circle | None:
        return self.drag.pointer_down(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        self.drag.pointer_move(x, y)

    def pointer_up(self) -> Circle | None:
        return self.drag.pointer_up()

    def set_background(self, image: BackgroundImage | None) -> None:
        self.background = image

    def clear(self) -> None:
        self.drag.pointer_up()
        self.registry.clear()


__all__ = ["Scene"]
