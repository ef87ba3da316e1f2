"""
Logging Configuration
All logging-related settings for the light panel.
"""

# -------------------------------------------------------
# Logging configuration
# -------------------------------------------------------

# Verbosity levels:
#   0 = ERROR  → only critical errors
#   1 = WARN   → warnings and errors
#   2 = INFO   → normal info (default)
LOG_OFF = False

LOG_LEVEL = 2
VERBOSE_LOG = False
DEBUG_LOG = False

# Master debug flag
DEBUG = True

# Log file name (relative to the project root unless absolute)
LOG_FILE = "ui_log.txt"
LOG_QUEUE_SIZE = 512

# On-screen log bar along the bottom edge
SHOW_LOG_BAR = False
LOG_BAR_HEIGHT = 20
LOG_TEXT_COLOR = "#FFFFFF"
LOG_BAR_COLOR = "#0A0A0A"
LOG_FONT_SIZE = 14

# Shorten module names in the on-screen log bar (not in file)
LOG_SHORT_NAMES = True
