"""
Safe Mode Profile - Minimal Features
For troubleshooting or low-resource scenarios.
"""

FPS_LOW    = 5
FPS_NORMAL = 20

# Minimal logging (errors only)
LOG_LEVEL = 0           # ERROR only
DEBUG = False
VERBOSE_LOG = False
DEBUG_LOG = False
SHOW_LOG_BAR = False

# No color fades
SCENE_TRANSITION_MS = 0
