# helper.py
import colorsys
import math

import pygame


def hex_to_rgb(value):
    """Convert '#RRGGBB' hex string or RGB tuple to (r, g, b)."""
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return tuple(value)
    if isinstance(value, str):
        value = value.strip().lstrip('#')
        return tuple(int(value[i:i+2], 16) for i in (0, 2, 4))
    raise TypeError(f"Unsupported color format: {value!r}")


def clamp_unit(value: float) -> float:
    """Clamp value to the inclusive range [0.0, 1.0]. NaN maps to 0.0."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def hsb_to_rgb(hue: float, saturation: float, brightness: float):
    """
    Convert hue/saturation/brightness (each 0..1) to an 8-bit (r, g, b) tuple.
    Hue 1.0 is the same color as hue 0.0.
    """
    h = clamp_unit(hue) % 1.0
    r, g, b = colorsys.hsv_to_rgb(h, clamp_unit(saturation), clamp_unit(brightness))
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def lerp_rgb(a, b, t: float):
    """Blend two RGB tuples, t=0 → a, t=1 → b."""
    t = clamp_unit(t)
    return tuple(int(round(x + (y - x) * t)) for x, y in zip(a, b))


def ease(x: float, mode: str = "ease_in_out") -> float:
    """Easing curve on 0..1 (ease-in-out cubic, or ease-out cubic)."""
    x = clamp_unit(x)
    if mode == "ease_in_out":
        if x < 0.5:
            return 4 * x * x * x
        xr = (2 * x - 2)
        return 0.5 * xr * xr * xr + 1
    # default ease-out cubic
    return 1 - pow(1 - x, 3)


def render_text_fit(text, font, color, max_width):
    """Render text, trimming with an ellipsis until it fits max_width."""
    surf = font.render(text, True, color)
    if surf.get_width() <= max_width or not text:
        return surf
    trimmed = text
    while trimmed and font.size(trimmed + "…")[0] > max_width:
        trimmed = trimmed[:-1]
    return font.render(trimmed + "…", True, color)


def pointer_pos(event, size=None):
    """
    Resolve the pointer position of a mouse or finger event in screen pixels.
    Finger coordinates are normalized, so they are scaled by size (defaults
    to the display surface size). Returns None for other event types.
    """
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
        return event.pos
    if event.type in (pygame.FINGERDOWN, pygame.FINGERUP, pygame.FINGERMOTION):
        sw, sh = size or pygame.display.get_surface().get_size()
        return (int(event.x * sw), int(event.y * sh))
    return None
