"""
Gesture Configuration
Thresholds for tap / drag recognition on the color fill.
"""

# Horizontal distance a drag must exceed to switch scene (strictly greater)
DRAG_THRESHOLD = 50

# Pointer travel before a press stops being a tap and becomes a drag
DRAG_MIN_DISTANCE = 10

# Scroll speed multiplier for the scene grid
SCENE_GRID_SCROLL_SPEED = 1.0
