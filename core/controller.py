"""
Light panel controller.

Every mutation of LightState goes through here. After an effective change
the controller publishes LIGHT_CHANGED or PANEL_TOGGLED on the event bus
so the page can redraw.

Unknown scene names and drags below the threshold change nothing and
publish nothing.
"""

from typing import Optional

import config as cfg
from core import scenes
from core.event_bus import LIGHT_CHANGED, PANEL_TOGGLED, EventBus
from core.light_state import LightState
from helper import clamp_unit, hsb_to_rgb


class LightPanelController:
    """Owns the LightState and applies scenes, gestures and slider input to it."""

    def __init__(self, state: Optional[LightState] = None, event_bus: Optional[EventBus] = None):
        self.state = state if state is not None else LightState()
        self.event_bus = event_bus if event_bus is not None else EventBus()

    # -------------------------------------------------
    # Scenes
    # -------------------------------------------------
    def apply_scene(self, name: str) -> None:
        """Overwrite brightness/saturation/hue with the scene's constants."""
        values = scenes.scene_values(name)
        if values is None:
            return
        s = self.state
        s.brightness, s.saturation, s.hue = values
        s.selected_scene = name
        self.event_bus.publish(LIGHT_CHANGED, s)

    def step_scene(self, delta: int) -> None:
        """Move the selection delta positions through the catalog, wrapping around."""
        current = scenes.index_of(self.state.selected_scene)
        if current is None:
            return
        count = scenes.scene_count()
        new_index = (current + delta + count) % count
        self.apply_scene(scenes.list_scenes()[new_index].name)

    def next_scene(self) -> None:
        self.step_scene(1)

    def previous_scene(self) -> None:
        self.step_scene(-1)

    # -------------------------------------------------
    # Gestures
    # -------------------------------------------------
    def toggle_panel(self) -> None:
        self.state.panel_visible = not self.state.panel_visible
        self.event_bus.publish(PANEL_TOGGLED, self.state.panel_visible)

    def on_drag_update(self, offset: float) -> None:
        """Record the live horizontal offset of the current drag."""
        self.state.drag_offset = float(offset)

    def on_drag_end(self, offset: float) -> None:
        """
        Finish a horizontal drag on the color fill.

        Rightward (offset > 0) selects the previous scene, leftward the next.
        Offsets within the threshold leave the selection alone.
        """
        threshold = float(getattr(cfg, "DRAG_THRESHOLD", 50))
        if abs(offset) > threshold:
            self.step_scene(-1 if offset > 0 else 1)
        self.state.drag_offset = 0.0

    # -------------------------------------------------
    # Sliders
    # -------------------------------------------------
    def set_brightness(self, value: float) -> None:
        self._set_param("brightness", value)

    def set_saturation(self, value: float) -> None:
        self._set_param("saturation", value)

    def set_hue(self, value: float) -> None:
        self._set_param("hue", value)

    def _set_param(self, name: str, value: float) -> None:
        # selected_scene stays as is; sliders may drift away from the scene values
        value = clamp_unit(value)
        if getattr(self.state, name) == value:
            return
        setattr(self.state, name, value)
        self.event_bus.publish(LIGHT_CHANGED, self.state)

    # -------------------------------------------------
    # Queries
    # -------------------------------------------------
    def rgb(self):
        """Current fill color as 8-bit RGB."""
        s = self.state
        return hsb_to_rgb(s.hue, s.saturation, s.brightness)

    def selected_index(self) -> Optional[int]:
        return scenes.index_of(self.state.selected_scene)
