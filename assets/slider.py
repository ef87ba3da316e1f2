# /assets/slider.py
import pygame
import config as cfg
import helper
from utils import font_helper


class Slider:
    """
    Horizontal slider over the unit range 0.0–1.0 with a text label at each end.
    Value changes are reported through on_change; the owner decides what to do
    with them (the light panel forwards them to the controller).
    """

    def __init__(self, rect, left_label="", right_label="", initial=0.0, on_change=None):
        self.rect = pygame.Rect(rect)
        self.left_label = left_label
        self.right_label = right_label
        self.value = helper.clamp_unit(initial)
        self.on_change = on_change
        self.dragging = False

        # --- colors ---
        self.track_color = helper.hex_to_rgb(getattr(cfg, "SLIDER_TRACK_COLOR", "#48484A"))
        self.fill_color  = helper.hex_to_rgb(getattr(cfg, "SLIDER_FILL_COLOR", "#0A84FF"))
        self.knob_color  = helper.hex_to_rgb(getattr(cfg, "SLIDER_KNOB_COLOR", "#FFFFFF"))
        self.label_color = helper.hex_to_rgb(getattr(cfg, "SLIDER_LABEL_COLOR", "#8E8E93"))

        # --- style ---
        self._label_w = int(getattr(cfg, "SLIDER_LABEL_WIDTH", 34))
        self._track_h = int(getattr(cfg, "SLIDER_TRACK_HEIGHT", 4))
        self._knob_r  = int(getattr(cfg, "SLIDER_KNOB_RADIUS", 10))

    # -------------------------------------------------
    # Geometry
    # -------------------------------------------------
    @property
    def track_rect(self) -> pygame.Rect:
        """Track area between the two end labels."""
        left = self.rect.left + self._label_w + self._knob_r
        right = self.rect.right - self._label_w - self._knob_r
        width = max(1, right - left)
        top = self.rect.centery - self._track_h // 2
        return pygame.Rect(left, top, width, self._track_h)

    def _val_to_x(self, val):
        """Map 0–1 → pixel position along the track."""
        track = self.track_rect
        return track.left + int(round(helper.clamp_unit(val) * track.width))

    def _x_to_val(self, x_pos):
        """Map pixel position back to 0–1 (clamped)."""
        track = self.track_rect
        return helper.clamp_unit((x_pos - track.left) / track.width)

    def hit_rect(self) -> pygame.Rect:
        """Touch area: the track plus knob overhang, full slider height."""
        track = self.track_rect
        return pygame.Rect(track.left - self._knob_r, self.rect.top,
                           track.width + 2 * self._knob_r, self.rect.height)

    # -------------------------------------------------
    # Drawing
    # -------------------------------------------------
    def draw(self, screen):
        track = self.track_rect
        knob_x = self._val_to_x(self.value)

        pygame.draw.rect(screen, self.track_color, track, border_radius=self._track_h // 2)
        filled = pygame.Rect(track.left, track.top, knob_x - track.left, track.height)
        if filled.width > 0:
            pygame.draw.rect(screen, self.fill_color, filled, border_radius=self._track_h // 2)
        pygame.draw.circle(screen, self.knob_color, (knob_x, track.centery), self._knob_r)

        font = font_helper.load_font(int(getattr(cfg, "SLIDER_FONT_SIZE", 14)))
        for text, cx in ((self.left_label, self.rect.left + self._label_w // 2),
                         (self.right_label, self.rect.right - self._label_w // 2)):
            if not text:
                continue
            surf = font.render(text, True, self.label_color)
            screen.blit(surf, surf.get_rect(center=(cx, self.rect.centery)))

    # -------------------------------------------------
    # Event handling
    # -------------------------------------------------
    def press(self, pos) -> bool:
        """Start dragging if pos is on the slider. Returns True when consumed."""
        if not self.hit_rect().collidepoint(pos):
            return False
        self.dragging = True
        self._update_from_pointer(pos[0])
        return True

    def move(self, pos) -> bool:
        if not self.dragging:
            return False
        self._update_from_pointer(pos[0])
        return True

    def release(self, pos) -> bool:
        if not self.dragging:
            return False
        self._update_from_pointer(pos[0])
        self.dragging = False
        return True

    def set_value(self, value):
        """Update the displayed value without firing on_change."""
        self.value = helper.clamp_unit(value)

    # -------------------------------------------------
    # State + Callbacks
    # -------------------------------------------------
    def _update_from_pointer(self, x_pos):
        new_val = self._x_to_val(x_pos)
        if new_val != self.value:
            self.value = new_val
            if callable(self.on_change):
                self.on_change(self.value)
