from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .model import Circle
from .registry import CircleRegistry


@dataclass(frozen=True)
class DragSession:
    target: Circle
    offset: np.ndarray


class DragController:
    """Pointer-driven drag state machine.

    Idle while :attr:`session` is ``None``, dragging otherwise. The target is
    always placed at ``pointer - offset`` with the offset captured on press,
    so repeated moves never accumulate error.
    """

    def __init__(self, registry: CircleRegistry) -> None:
        self._registry = registry
        self._session: DragSession | None = None

    @property
    def session(self) -> DragSession | None:
        return self._session

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def target(self) -> Circle | None:
        if self._session is None:
            return None
        return self._session.target

    def pointer_down(self, x: float, y: float) -> Circle | None:
        circle = self._registry.hit_test(x, y)
        if circle is None:
            self._session = None
            return None
        offset = np.array([x, y], dtype=float) - circle.position
        self._session = DragSession(target=circle, offset=offset)
        return circle

    def pointer_move(self, x: float, y: float) -> None:
        if self._session is None:
            return
        new_x, new_y = np.array([x, y], dtype=float) - self._session.offset
        self._session.target.move_to(new_x, new_y)

    def pointer_up(self) -> Circle | None:
        if self._session is None:
            return None
        released = self._session.target
        self._session = None
        return released


__all__ = ["DragController", "DragSession"]
