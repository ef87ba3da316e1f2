"""Tests for the application render path."""

from __future__ import annotations

import unittest
from unittest.mock import patch

import pygame

import config as cfg
from core.app import LightPanelApp
from core.loop import EventLoop
from pages.light_panel import LightPanelPage


class RenderTests(unittest.TestCase):

    def setUp(self) -> None:
        self._saved_bar = getattr(cfg, "SHOW_LOG_BAR", False)
        cfg.SHOW_LOG_BAR = True

        self.app = LightPanelApp()
        self.app.screen = pygame.Surface((800, 480))
        self.app.page = LightPanelPage(self.app.controller, (800, 480))
        self.app.event_loop = EventLoop()

    def tearDown(self) -> None:
        cfg.SHOW_LOG_BAR = self._saved_bar
        self.app.page.on_exit()

    def test_render_passes_measured_fps_to_log_bar(self) -> None:
        with patch.object(self.app.event_loop, "get_fps", return_value=59.6), \
                patch("showlog.draw_bar") as draw_bar, \
                patch("pygame.display.flip") as flip:
            self.app._render()

        draw_bar.assert_called_once_with(self.app.screen, fps_value=59.6)
        flip.assert_called_once_with()
        self.assertFalse(self.app.page.needs_redraw())

    def test_render_skips_clean_frames(self) -> None:
        self.app.page.draw(self.app.screen)
        with patch("showlog.draw_bar") as draw_bar, patch("pygame.display.flip") as flip:
            self.app._render()
        draw_bar.assert_not_called()
        flip.assert_not_called()


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
