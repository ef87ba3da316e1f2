"""
Light Configuration
Startup values of the light state and transition timing.
"""

# Initial parameters (intentionally not equal to the first scene's values)
DEFAULT_BRIGHTNESS = 0.5
DEFAULT_SATURATION = 1.0
DEFAULT_HUE = 0.0
DEFAULT_PANEL_VISIBLE = True

# Color fade when a scene is applied (0 disables)
SCENE_TRANSITION_MS = 350
SCENE_TRANSITION_EASE = "ease_in_out"   # or "ease_out"
