"""
Display Configuration
Window size, fullscreen mode and frame pacing.
"""

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 480
FULLSCREEN = True

# Window caption when not fullscreen
WINDOW_TITLE = "Cat Light"

# Hide the mouse cursor (touchscreens)
HIDE_CURSOR = False

# Frame pacing
FPS_LOW    = 12          # Idle
FPS_NORMAL = 60          # While animating or dragging
