"""
Adaptive grid layout for the scene picker.

Fits as many columns of at least ``min_width`` as the available width
allows, then stretches them (up to ``max_width``) to share the leftover
space. Rows are laid out top to bottom in catalog order.
"""

import pygame
from typing import List, Tuple


def adaptive_columns(available_w: int, min_width: int, max_width: int, spacing: int) -> Tuple[int, int]:
    """
    Return (column_count, column_width) for an adaptive grid.

    Args:
        available_w: Width of the grid area in pixels
        min_width: Minimum column width
        max_width: Maximum column width
        spacing: Gap between columns
    """
    available_w = max(0, int(available_w))
    count = max(1, (available_w + spacing) // (min_width + spacing))
    width = (available_w - (count - 1) * spacing) // count
    width = max(min_width, min(max_width, width))
    return int(count), int(width)


def layout_cells(n: int, area: pygame.Rect, min_width: int, max_width: int,
                 cell_h: int, spacing: int) -> List[pygame.Rect]:
    """
    Compute cell rects for n items inside area (unscrolled coordinates).
    Columns are centered horizontally when they do not fill the area.
    """
    cols, col_w = adaptive_columns(area.width, min_width, max_width, spacing)
    used_w = cols * col_w + (cols - 1) * spacing
    left = area.left + max(0, (area.width - used_w) // 2)

    rects = []
    for i in range(n):
        row, col = divmod(i, cols)
        x = left + col * (col_w + spacing)
        y = area.top + row * (cell_h + spacing)
        rects.append(pygame.Rect(x, y, col_w, cell_h))
    return rects


def content_height(rects: List[pygame.Rect], area: pygame.Rect) -> int:
    """Total scrollable height of the laid out cells relative to area.top."""
    if not rects:
        return 0
    return max(r.bottom for r in rects) - area.top
