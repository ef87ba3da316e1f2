"""Utilities for resolving and loading UI fonts.

Scene names mix CJK and Latin text, so fonts are resolved through
``pygame.font.SysFont`` with the CJK-capable families listed in
``config.FONT_FAMILIES`` (first installed one wins, pygame's default font
otherwise). Call sites ask for a size/weight and receive a cached
``pygame.font.Font`` instance.
"""

_FONT_CACHE = {}


def font_families():
    """Return the configured family list as a comma separated SysFont query."""
    try:
        import config as _cfg
        families = getattr(_cfg, "FONT_FAMILIES", [])
    except ImportError:
        families = []
    return ",".join(str(f).replace(" ", "").lower() for f in families)


def load_font(size, weight=None, *, cache=True):
    """Return a cached ``pygame.font.Font`` for the requested size/weight."""
    import pygame

    if not pygame.font.get_init():
        pygame.font.init()

    bold = str(weight or "").lower() in ("bold", "medium", "semibold")
    key = (int(size), bold)

    if cache and key in _FONT_CACHE:
        return _FONT_CACHE[key]

    query = font_families()
    font = pygame.font.SysFont(query, int(size), bold=bold) if query else pygame.font.Font(None, int(size))

    if cache:
        _FONT_CACHE[key] = font

    return font


def clear_cache():
    """Drop cached fonts (needed after pygame.quit())."""
    _FONT_CACHE.clear()
