"""
Display and screen management.

Handles pygame display setup and configuration.
"""

import pygame
from typing import Tuple


class DisplayManager:
    """Manages the pygame display and screen."""

    def __init__(self, width: int = 800, height: int = 480, fullscreen: bool = True,
                 title: str = "Cat Light", hide_cursor: bool = False):
        """
        Initialize the display manager.

        Args:
            width: Screen width in pixels
            height: Screen height in pixels
            fullscreen: Whether to use fullscreen mode
            title: Window caption (windowed mode)
            hide_cursor: Hide the mouse pointer (touchscreens)
        """
        self.width = width
        self.height = height
        self.fullscreen = fullscreen
        self.title = title
        self.hide_cursor = hide_cursor
        self.screen = None

    def initialize(self) -> pygame.Surface:
        """
        Initialize pygame and create the display surface.

        Returns:
            The pygame screen surface
        """
        pygame.init()

        flags = pygame.FULLSCREEN if self.fullscreen else 0
        self.screen = pygame.display.set_mode((self.width, self.height), flags)
        # Fullscreen may pick the native resolution
        self.width, self.height = self.screen.get_size()
        pygame.display.set_caption(self.title)
        pygame.mouse.set_visible(not self.hide_cursor)

        return self.screen

    def get_size(self) -> Tuple[int, int]:
        """Get the screen dimensions."""
        return (self.width, self.height)

    def cleanup(self):
        """Clean up pygame display."""
        pygame.quit()
