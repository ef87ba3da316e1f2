"""
Main application class.

Coordinates display, controller, page and event loop, and manages the
application lifecycle.
"""

import pygame
from typing import Optional

from .controller import LightPanelController
from .display import DisplayManager
from .event_bus import EventBus
from .light_state import LightState
from .loop import EventLoop
from pages.light_panel import LightPanelPage
from utils import font_helper
import config as cfg
import showlog


class LightPanelApp:
    """Main UI application coordinator."""

    def __init__(self):
        """Initialize the application."""
        self.event_bus = EventBus()
        self.controller = LightPanelController(LightState(), self.event_bus)

        # Core components
        self.display_manager: Optional[DisplayManager] = None
        self.event_loop: Optional[EventLoop] = None
        self.screen: Optional[pygame.Surface] = None
        self.page: Optional[LightPanelPage] = None

    def initialize(self):
        """Initialize all subsystems."""
        showlog.info("[INIT] Initializing display...")
        self._init_display()

        showlog.info("[INIT] Initializing logging...")
        self._init_logging()

        showlog.info("[INIT] Building light panel page...")
        self._init_page()

        showlog.info("[INIT] Initializing event handling...")
        self._init_event_handling()

        s = self.controller.state
        showlog.info(
            f"[INIT] Ready: scene={s.selected_scene} "
            f"b={s.brightness:.2f} s={s.saturation:.2f} h={s.hue:.2f}"
        )

    def _init_display(self):
        """Initialize display and screen."""
        self.display_manager = DisplayManager(
            width=int(getattr(cfg, "SCREEN_WIDTH", 800)),
            height=int(getattr(cfg, "SCREEN_HEIGHT", 480)),
            fullscreen=bool(getattr(cfg, "FULLSCREEN", True)),
            title=str(getattr(cfg, "WINDOW_TITLE", "Cat Light")),
            hide_cursor=bool(getattr(cfg, "HIDE_CURSOR", False)),
        )
        self.screen = self.display_manager.initialize()
        showlog.debug(f"[INIT] Display {self.screen.get_width()}x{self.screen.get_height()}")

    def _init_logging(self):
        """Attach the on-screen log bar when enabled."""
        if getattr(cfg, "SHOW_LOG_BAR", False):
            showlog.init(self.screen)

    def _init_page(self):
        self.page = LightPanelPage(self.controller, self.display_manager.get_size())
        self.page.on_enter()

    def _init_event_handling(self):
        self.event_loop = EventLoop()
        self.event_loop.add_handler(self.page.handle_event)

    def run(self):
        """Run the main application loop."""
        if not self.event_loop:
            raise RuntimeError("Application not initialized. Call initialize() first.")

        self.event_loop.run(self._update, self._render, self._target_fps)

    def _update(self):
        self.page.update()

    def _render(self):
        if not self.page.needs_redraw():
            return
        self.page.draw(self.screen, fps=self.event_loop.get_fps())
        pygame.display.flip()

    def _target_fps(self) -> int:
        if self.page.is_animating():
            return int(getattr(cfg, "FPS_NORMAL", 60))
        return int(getattr(cfg, "FPS_LOW", 12))

    def cleanup(self):
        """Clean up resources."""
        showlog.info("[EXIT] Cleaning up...")
        if self.page:
            self.page.on_exit()
        self.event_bus.clear()
        font_helper.clear_cache()
        if self.display_manager:
            self.display_manager.cleanup()
        showlog.info("[EXIT] Display closed")
        showlog.shutdown()
