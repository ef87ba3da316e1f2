# assets/scene_button.py
import pygame
import helper
import config as cfg
from utils import font_helper


def draw_scene_button(screen, rect, scene, swatch_color, selected=False):
    """
    Draw one scene cell: color swatch, name and description.
    The selected scene gets the accent fill and white swatch ring.
    """
    radius = int(getattr(cfg, "SCENE_CELL_RADIUS", 12))
    accent = helper.hex_to_rgb(getattr(cfg, "SCENE_ACCENT_COLOR", "#0A84FF"))
    outline = helper.hex_to_rgb(getattr(cfg, "SCENE_CELL_OUTLINE", "#3A3A3C"))
    text_col = helper.hex_to_rgb(getattr(cfg, "SCENE_TEXT_COLOR", "#F2F2F7"))
    desc_col = (255, 255, 255) if selected else helper.hex_to_rgb(getattr(cfg, "SCENE_DESC_COLOR", "#8E8E93"))

    # --- background + border ---
    if selected:
        pygame.draw.rect(screen, accent, rect, border_radius=radius)
    pygame.draw.rect(screen, outline, rect, width=1, border_radius=radius)

    name_font = font_helper.load_font(int(getattr(cfg, "SCENE_NAME_FONT_SIZE", 13)), "Medium")
    desc_font = font_helper.load_font(int(getattr(cfg, "SCENE_DESC_FONT_SIZE", 11)))
    max_w = rect.width - 6

    # --- swatch (stands in for the scene icon) ---
    swatch_r = int(getattr(cfg, "SCENE_SWATCH_RADIUS", 9))
    swatch_center = (rect.centerx, rect.top + 6 + swatch_r)
    pygame.draw.circle(screen, swatch_color, swatch_center, swatch_r)
    ring = (255, 255, 255) if selected else outline
    pygame.draw.circle(screen, ring, swatch_center, swatch_r, width=1)

    # --- name + description ---
    name_surf = helper.render_text_fit(scene.name, name_font, text_col, max_w)
    name_rect = name_surf.get_rect(midtop=(rect.centerx, swatch_center[1] + swatch_r + 4))
    screen.blit(name_surf, name_rect)

    desc_surf = helper.render_text_fit(scene.description, desc_font, desc_col, max_w)
    desc_rect = desc_surf.get_rect(midtop=(rect.centerx, name_rect.bottom + 2))
    screen.blit(desc_surf, desc_rect)
