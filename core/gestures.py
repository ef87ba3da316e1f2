"""
Tap / horizontal drag recognition for the color fill.

Pointer travel below DRAG_MIN_DISTANCE is a tap; anything further is a
drag whose horizontal offset is forwarded to the controller.
"""

import math
from typing import Optional, Tuple

import config as cfg
import showlog


class GestureRecognizer:
    """Feeds press/move/release of one pointer into a LightPanelController."""

    def __init__(self, controller):
        self.controller = controller
        self._origin: Optional[Tuple[int, int]] = None
        self._dragging = False

    @property
    def active(self) -> bool:
        return self._origin is not None

    @property
    def dragging(self) -> bool:
        return self._dragging

    def press(self, pos) -> None:
        self._origin = (int(pos[0]), int(pos[1]))
        self._dragging = False

    def move(self, pos) -> None:
        if self._origin is None:
            return
        dx = pos[0] - self._origin[0]
        dy = pos[1] - self._origin[1]
        if not self._dragging:
            min_dist = float(getattr(cfg, "DRAG_MIN_DISTANCE", 10))
            if math.hypot(dx, dy) < min_dist:
                return
            self._dragging = True
        self.controller.on_drag_update(dx)

    def release(self, pos) -> None:
        if self._origin is None:
            return
        # release position may differ from the last motion event
        self.move(pos)
        dx = pos[0] - self._origin[0]
        was_drag = self._dragging
        self._origin = None
        self._dragging = False

        if was_drag:
            showlog.verbose(f"[GESTURE] drag end dx={dx}")
            self.controller.on_drag_end(dx)
        else:
            showlog.verbose("[GESTURE] tap")
            self.controller.toggle_panel()

    def cancel(self) -> None:
        """Abandon the current gesture without firing tap or drag end."""
        self._origin = None
        self._dragging = False
        self.controller.on_drag_update(0)
