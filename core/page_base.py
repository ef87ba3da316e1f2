"""
Base class for UI pages.

Pages receive pointer/keyboard events and draw themselves onto the screen.
"""

from typing import Optional

import pygame


class Page:
    """Base class for UI pages."""

    # Class attributes (override in subclasses)
    id: str = "unnamed"
    label: str = "Unnamed Page"

    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Handle pygame events for this page.

        Args:
            event: Pygame event
        """
        pass

    def draw(self, screen: pygame.Surface, fps: Optional[float] = None) -> None:
        """
        Draw this page.

        Args:
            screen: Pygame screen surface
            fps: Measured frame rate, shown in the log bar when given
        """
        pass

    def update(self) -> None:
        """Update page state (called each frame)."""
        pass

    def needs_redraw(self) -> bool:
        """True when the next frame must be drawn."""
        return True

    def is_animating(self) -> bool:
        """True while the page wants the high frame rate."""
        return False

    def on_enter(self) -> None:
        """Called when page becomes active."""
        pass

    def on_exit(self) -> None:
        """Called when page becomes inactive."""
        pass

    def __repr__(self) -> str:
        """String representation."""
        return f"<Page id={self.id} label={self.label}>"
