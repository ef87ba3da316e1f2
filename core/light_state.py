"""
Light state dataclass.

The single mutable state of the panel. Owned and written only by
LightPanelController; the page reads it when drawing.
"""

from dataclasses import dataclass, field

import config as cfg
from core import scenes


@dataclass
class LightState:
    """Current color parameters, selected scene and overlay visibility."""

    brightness: float = field(default_factory=lambda: float(getattr(cfg, "DEFAULT_BRIGHTNESS", 0.5)))
    saturation: float = field(default_factory=lambda: float(getattr(cfg, "DEFAULT_SATURATION", 1.0)))
    hue: float = field(default_factory=lambda: float(getattr(cfg, "DEFAULT_HUE", 0.0)))
    selected_scene: str = field(default_factory=scenes.first_scene_name)
    panel_visible: bool = field(default_factory=lambda: bool(getattr(cfg, "DEFAULT_PANEL_VISIBLE", True)))

    # Live horizontal offset of an in-progress drag
    drag_offset: float = 0.0

    def values(self):
        """(brightness, saturation, hue) as a tuple."""
        return (self.brightness, self.saturation, self.hue)
