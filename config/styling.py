"""
Visual Styling Configuration
Colors, fonts and geometry of the control overlay.
"""

# ================== FONTS ==================

# Tried in order by pygame.font.SysFont; CJK faces first so scene names render
FONT_FAMILIES = [
    "notosanscjksc",
    "notosanscjk",
    "sourcehansanssc",
    "wenquanyizenhei",
    "wenquanyimicrohei",
    "pingfangsc",
    "microsoftyahei",
    "simhei",
    "arialunicodems",
]
SCENE_NAME_FONT_SIZE = 13
SCENE_DESC_FONT_SIZE = 11
SLIDER_FONT_SIZE = 14

# ================== OVERLAY PANEL ==================

PANEL_HEIGHT_RATIO = 0.5       # overlay height / screen height
PANEL_MARGIN = 8
PANEL_PADDING = 12
PANEL_RADIUS = 15
PANEL_COLOR = "#1C1C1E"
PANEL_ALPHA = 200              # 0..255 translucency
PANEL_SPACING = 12

# ================== SCENE GRID ==================

GRID_HEIGHT_RATIO = 0.25       # grid viewport height / screen height
GRID_CELL_MIN_WIDTH = 80
GRID_CELL_MAX_WIDTH = 100
GRID_CELL_HEIGHT = 70
GRID_SPACING = 8
GRID_PADDING_X = 8

SCENE_CELL_RADIUS = 12
SCENE_CELL_OUTLINE = "#3A3A3C"
SCENE_ACCENT_COLOR = "#0A84FF"
SCENE_TEXT_COLOR = "#F2F2F7"
SCENE_DESC_COLOR = "#8E8E93"
SCENE_SWATCH_RADIUS = 9

# ================== SLIDERS ==================

SLIDER_HEIGHT = 28
SLIDER_TRACK_HEIGHT = 4
SLIDER_KNOB_RADIUS = 10
SLIDER_TRACK_COLOR = "#48484A"
SLIDER_FILL_COLOR = "#0A84FF"
SLIDER_KNOB_COLOR = "#FFFFFF"
SLIDER_LABEL_COLOR = "#8E8E93"
SLIDER_LABEL_WIDTH = 34
