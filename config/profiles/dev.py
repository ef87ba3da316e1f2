"""
Development Profile - Debug-Friendly Settings
Windowed, verbose logging and the on-screen log bar.
"""

FULLSCREEN = False

FPS_LOW    = 8
FPS_NORMAL = 30

# Verbose logging for development
LOG_LEVEL = 2           # INFO level
DEBUG = True
VERBOSE_LOG = True
DEBUG_LOG = True
SHOW_LOG_BAR = True
