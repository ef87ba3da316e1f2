"""
Main event loop coordinator.

Handles the pygame event loop, frame timing, and event delegation.
"""

import pygame
from typing import Callable, Union


class EventLoop:
    """Main application event loop."""

    def __init__(self):
        """Initialize the event loop."""
        self.running = False
        self.clock = pygame.time.Clock()
        self.event_handlers = []

    def add_handler(self, handler: Callable):
        """
        Add an event handler to the loop.

        Args:
            handler: A callable that takes a pygame event
        """
        self.event_handlers.append(handler)

    def dispatch(self, event) -> None:
        """Route one event: QUIT / ESC stop the loop, everything else goes to handlers."""
        if event.type == pygame.QUIT:
            self.stop()
            return

        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.stop()
            return

        for handler in self.event_handlers:
            handler(event)

    def run(self,
            update_callback: Callable,
            render_callback: Callable,
            target_fps: Union[int, Callable[[], int]] = 60):
        """
        Run the main event loop.

        Args:
            update_callback: Called each frame for updates
            render_callback: Called each frame for rendering
            target_fps: Target frames per second, or a callable returning it
        """
        self.running = True

        while self.running:
            for event in pygame.event.get():
                self.dispatch(event)

            # Update application state
            update_callback()

            # Render frame
            render_callback()

            # Control frame rate
            fps = target_fps() if callable(target_fps) else target_fps
            self.clock.tick(fps)

    def stop(self):
        """Stop the event loop."""
        self.running = False

    def get_fps(self) -> float:
        """Get current FPS."""
        return self.clock.get_fps()
