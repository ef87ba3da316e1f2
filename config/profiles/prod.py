"""
Production Profile - Optimized Settings
Default configuration for the fullscreen light panel.
"""

FPS_LOW    = 12
FPS_NORMAL = 60

# Production logging (minimal)
LOG_LEVEL = 1
DEBUG = False
VERBOSE_LOG = False
DEBUG_LOG = False
SHOW_LOG_BAR = False
