# /pages/light_panel.py
"""
The light panel page: full-screen color fill plus the control overlay.

Pointer routing:
  * overlay visible and pointer inside the panel → scene grid / sliders
  * anywhere else → GestureRecognizer (tap toggles the overlay,
    horizontal drag cycles scenes)

Redraws are driven by controller events published on the event bus.
"""

import pygame
from typing import Callable, Optional

import config as cfg
import helper
import showlog
from assets.scene_button import draw_scene_button
from assets.slider import Slider
from core import scenes
from core.event_bus import LIGHT_CHANGED, PANEL_TOGGLED
from core.gestures import GestureRecognizer
from core.page_base import Page
from utils import grid_layout


SLIDER_LABELS = (
    ("brightness", "暗", "亮"),
    ("saturation", "淡", "浓"),
    ("hue", "0°", "360°"),
)


class LightPanelPage(Page):
    id = "light_panel"
    label = "Light Panel"

    def __init__(self, controller, size, now_ms: Optional[Callable[[], int]] = None):
        self.controller = controller
        self.width, self.height = int(size[0]), int(size[1])
        self.gestures = GestureRecognizer(controller)
        self._now = now_ms or pygame.time.get_ticks

        # --- pointer ownership: None | "gesture" | "grid" | "slider" | "panel" ---
        self._pointer_owner = None
        self._pointer_id = None       # "mouse" or ("finger", finger_id) of the owning pointer
        self._active_slider: Optional[Slider] = None
        self._grid_press = None       # (x, y) where a grid press started
        self._grid_scrolling = False
        self._grid_last_y = 0
        self.scroll_offset = 0

        # --- color fade state ---
        self.displayed_rgb = controller.rgb()
        self._fade = {"active": False, "start_ms": 0, "from": self.displayed_rgb, "to": self.displayed_rgb}
        self._slider_input = False
        self._dirty = True

        self._build_layout()

        bus = controller.event_bus
        self._unsubscribers = [
            bus.subscribe(LIGHT_CHANGED, self._on_light_changed),
            bus.subscribe(PANEL_TOGGLED, self._on_panel_toggled),
        ]

    # -------------------------------------------------------
    # Layout
    # -------------------------------------------------------
    def _build_layout(self):
        margin = int(getattr(cfg, "PANEL_MARGIN", 8))
        pad = int(getattr(cfg, "PANEL_PADDING", 12))
        spacing = int(getattr(cfg, "PANEL_SPACING", 12))
        slider_h = int(getattr(cfg, "SLIDER_HEIGHT", 28))
        grid_h = int(self.height * float(getattr(cfg, "GRID_HEIGHT_RATIO", 0.25)))
        log_bar_h = int(getattr(cfg, "LOG_BAR_HEIGHT", 20)) if getattr(cfg, "SHOW_LOG_BAR", False) else 0

        sliders_h = len(SLIDER_LABELS) * slider_h + (len(SLIDER_LABELS) - 1) * spacing
        content_h = grid_h + spacing + sliders_h
        max_h = int(self.height * float(getattr(cfg, "PANEL_HEIGHT_RATIO", 0.5))) - 2 * margin
        panel_h = min(content_h + 2 * pad, max(max_h, 2 * pad + sliders_h))
        grid_h = max(0, panel_h - 2 * pad - spacing - sliders_h)

        bottom = self.height - margin - log_bar_h
        self.panel_rect = pygame.Rect(margin, bottom - panel_h, self.width - 2 * margin, panel_h)

        inner = self.panel_rect.inflate(-2 * pad, -2 * pad)
        grid_pad_x = int(getattr(cfg, "GRID_PADDING_X", 8))
        self.grid_rect = pygame.Rect(inner.left + grid_pad_x, inner.top,
                                     max(1, inner.width - 2 * grid_pad_x), grid_h)
        self.cell_rects = grid_layout.layout_cells(
            scenes.scene_count(),
            self.grid_rect,
            int(getattr(cfg, "GRID_CELL_MIN_WIDTH", 80)),
            int(getattr(cfg, "GRID_CELL_MAX_WIDTH", 100)),
            int(getattr(cfg, "GRID_CELL_HEIGHT", 70)),
            int(getattr(cfg, "GRID_SPACING", 8)),
        )
        self.max_scroll = max(0, grid_layout.content_height(self.cell_rects, self.grid_rect) - self.grid_rect.height)

        self.sliders = {}
        y = self.grid_rect.bottom + spacing
        state = self.controller.state
        for name, left, right in SLIDER_LABELS:
            rect = pygame.Rect(inner.left + 4, y, inner.width - 8, slider_h)
            self.sliders[name] = Slider(rect, left, right, initial=getattr(state, name),
                                        on_change=self._slider_callback(name))
            y += slider_h + spacing

    def _slider_callback(self, name):
        setter = getattr(self.controller, f"set_{name}")

        def _on_change(value):
            self._slider_input = True
            try:
                setter(value)
            finally:
                self._slider_input = False
        return _on_change

    # -------------------------------------------------------
    # Controller notifications
    # -------------------------------------------------------
    def _on_light_changed(self, state):
        for name, slider in self.sliders.items():
            slider.set_value(getattr(state, name))

        target = self.controller.rgb()
        duration = int(getattr(cfg, "SCENE_TRANSITION_MS", 0))
        if self._slider_input or duration <= 0:
            self.displayed_rgb = target
            self._fade["active"] = False
        else:
            self._fade.update({"active": True, "start_ms": self._now(),
                               "from": self.displayed_rgb, "to": target})
        self._dirty = True

    def _on_panel_toggled(self, visible):
        if not visible:
            self._release_overlay_pointer()
        self._dirty = True

    # -------------------------------------------------------
    # Frame hooks
    # -------------------------------------------------------
    def update(self):
        """Advance the color fade, if one is running."""
        if not self._fade["active"]:
            return
        duration = max(1, int(getattr(cfg, "SCENE_TRANSITION_MS", 1)))
        t = (self._now() - self._fade["start_ms"]) / duration
        if t >= 1.0:
            self.displayed_rgb = self._fade["to"]
            self._fade["active"] = False
        else:
            mode = str(getattr(cfg, "SCENE_TRANSITION_EASE", "ease_in_out")).lower()
            self.displayed_rgb = helper.lerp_rgb(self._fade["from"], self._fade["to"], helper.ease(t, mode))
        self._dirty = True

    def needs_redraw(self) -> bool:
        return self._dirty

    def is_animating(self) -> bool:
        return self._fade["active"] or self._pointer_owner is not None

    # -------------------------------------------------------
    # Events
    # -------------------------------------------------------
    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
            return

        if event.type == pygame.MOUSEWHEEL:
            if self.controller.state.panel_visible and self.grid_rect.collidepoint(pygame.mouse.get_pos()):
                self._scroll_by(-event.y * int(getattr(cfg, "GRID_CELL_HEIGHT", 70)) // 2)
            return

        # Touch also produces synthesized mouse events; FINGER* handles those
        if getattr(event, "touch", False):
            return
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP) and event.button != 1:
            return

        pos = helper.pointer_pos(event, (self.width, self.height))
        if pos is None:
            return
        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            pointer_id = ("finger", event.finger_id)
        else:
            pointer_id = "mouse"

        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
            self.pointer_down(pos, pointer_id)
        elif event.type in (pygame.MOUSEMOTION, pygame.FINGERMOTION):
            if event.type == pygame.MOUSEMOTION and not event.buttons[0]:
                return
            self.pointer_move(pos, pointer_id)
        elif event.type in (pygame.MOUSEBUTTONUP, pygame.FINGERUP):
            self.pointer_up(pos, pointer_id)

    def _handle_key(self, key):
        if key == pygame.K_SPACE:
            self.controller.toggle_panel()
        elif key == pygame.K_LEFT:
            self.controller.previous_scene()
        elif key == pygame.K_RIGHT:
            self.controller.next_scene()

    def pointer_down(self, pos, pointer_id="mouse"):
        # One pointer at a time; a second finger is ignored until the first lifts
        if self._pointer_owner is not None:
            return
        self._pointer_id = pointer_id
        if self.controller.state.panel_visible and self.panel_rect.collidepoint(pos):
            for slider in self.sliders.values():
                if slider.press(pos):
                    self._pointer_owner = "slider"
                    self._active_slider = slider
                    return
            if self.grid_rect.collidepoint(pos):
                self._pointer_owner = "grid"
                self._grid_press = pos
                self._grid_last_y = pos[1]
                self._grid_scrolling = False
                return
            # Panel background swallows the press
            self._pointer_owner = "panel"
            return

        self._pointer_owner = "gesture"
        self.gestures.press(pos)

    def pointer_move(self, pos, pointer_id="mouse"):
        if pointer_id != self._pointer_id:
            return
        owner = self._pointer_owner
        if owner == "gesture":
            self.gestures.move(pos)
        elif owner == "slider" and self._active_slider:
            self._active_slider.move(pos)
        elif owner == "grid":
            self._grid_drag(pos)

    def pointer_up(self, pos, pointer_id="mouse"):
        if pointer_id != self._pointer_id:
            return
        owner = self._pointer_owner
        self._pointer_owner = None
        self._pointer_id = None
        if owner == "gesture":
            self.gestures.release(pos)
        elif owner == "slider" and self._active_slider:
            self._active_slider.release(pos)
            self._active_slider = None
        elif owner == "grid":
            self._grid_drag(pos)
            if not self._grid_scrolling:
                name = self.scene_at(pos)
                if name is not None:
                    showlog.verbose(f"[PANEL] scene tapped: {name}")
                    self.controller.apply_scene(name)
            self._grid_press = None
            self._grid_scrolling = False

    def _release_overlay_pointer(self):
        if self._pointer_owner in ("slider", "grid", "panel"):
            if self._active_slider:
                self._active_slider.dragging = False
            self._active_slider = None
            self._grid_press = None
            self._grid_scrolling = False
            self._pointer_owner = None
            self._pointer_id = None

    # -------------------------------------------------------
    # Scene grid
    # -------------------------------------------------------
    def _grid_drag(self, pos):
        if self._grid_press is None:
            return
        if not self._grid_scrolling:
            min_dist = float(getattr(cfg, "DRAG_MIN_DISTANCE", 10))
            if abs(pos[1] - self._grid_press[1]) < min_dist:
                return
            self._grid_scrolling = True
        delta_y = pos[1] - self._grid_last_y
        self._grid_last_y = pos[1]
        self._scroll_by(-delta_y * float(getattr(cfg, "SCENE_GRID_SCROLL_SPEED", 1.0)))

    def _scroll_by(self, dy):
        new_offset = int(min(max(self.scroll_offset + dy, 0), self.max_scroll))
        if new_offset != self.scroll_offset:
            self.scroll_offset = new_offset
            self._dirty = True

    def scene_at(self, pos) -> Optional[str]:
        """Name of the scene cell under pos (screen coordinates), if any."""
        if not self.grid_rect.collidepoint(pos):
            return None
        catalog = scenes.list_scenes()
        for scene, rect in zip(catalog, self.cell_rects):
            if rect.move(0, -self.scroll_offset).collidepoint(pos):
                return scene.name
        return None

    # -------------------------------------------------------
    # Drawing
    # -------------------------------------------------------
    def draw(self, screen, fps=None):
        screen.fill(self.displayed_rgb)
        if self.controller.state.panel_visible:
            self._draw_overlay(screen)
        if getattr(cfg, "SHOW_LOG_BAR", False):
            showlog.draw_bar(screen, fps_value=fps)
        self._dirty = False

    def _draw_overlay(self, screen):
        radius = int(getattr(cfg, "PANEL_RADIUS", 15))
        panel = pygame.Surface(self.panel_rect.size, pygame.SRCALPHA)
        r, g, b = helper.hex_to_rgb(getattr(cfg, "PANEL_COLOR", "#1C1C1E"))
        alpha = int(getattr(cfg, "PANEL_ALPHA", 200))
        pygame.draw.rect(panel, (r, g, b, alpha), panel.get_rect(), border_radius=radius)
        screen.blit(panel, self.panel_rect.topleft)

        # --- scene grid (clipped to its viewport) ---
        selected = self.controller.state.selected_scene
        prev_clip = screen.get_clip()
        screen.set_clip(self.grid_rect)
        try:
            for scene, rect in zip(scenes.list_scenes(), self.cell_rects):
                cell = rect.move(0, -self.scroll_offset)
                if not cell.colliderect(self.grid_rect):
                    continue
                b_, s_, h_ = scenes.scene_values(scene.name)
                swatch = helper.hsb_to_rgb(h_, s_, b_)
                draw_scene_button(screen, cell, scene, swatch, selected=(scene.name == selected))
        finally:
            screen.set_clip(prev_clip)

        for slider in self.sliders.values():
            slider.draw(screen)

    def on_exit(self):
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
