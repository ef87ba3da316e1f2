"""Tests for pointer routing and color fades on the light panel page."""

from __future__ import annotations

import unittest

import pygame

import config as cfg
from core import scenes
from core.controller import LightPanelController
from core.event_bus import EventBus
from core.light_state import LightState
from pages.light_panel import LightPanelPage


class FakeClock:
    def __init__(self):
        self.ms = 0

    def __call__(self):
        return self.ms


class LightPanelPageTests(unittest.TestCase):

    def setUp(self) -> None:
        self._saved = {
            "SCENE_TRANSITION_MS": getattr(cfg, "SCENE_TRANSITION_MS", 0),
            "SHOW_LOG_BAR": getattr(cfg, "SHOW_LOG_BAR", False),
        }
        cfg.SCENE_TRANSITION_MS = 300
        cfg.SHOW_LOG_BAR = False

        self.clock = FakeClock()
        self.controller = LightPanelController(LightState(), EventBus())
        self.state = self.controller.state
        self.page = LightPanelPage(self.controller, (800, 480), now_ms=self.clock)

    def tearDown(self) -> None:
        for key, value in self._saved.items():
            setattr(cfg, key, value)

    def tap(self, pos) -> None:
        self.page.pointer_down(pos)
        self.page.pointer_up(pos)

    def swipe(self, start, end) -> None:
        self.page.pointer_down(start)
        self.page.pointer_move(end)
        self.page.pointer_up(end)

    # --- layout ---

    def test_layout_fits_screen(self) -> None:
        screen = pygame.Rect(0, 0, 800, 480)
        self.assertTrue(screen.contains(self.page.panel_rect))
        self.assertTrue(self.page.panel_rect.contains(self.page.grid_rect))
        self.assertEqual(len(self.page.cell_rects), scenes.scene_count())
        self.assertLessEqual(self.page.panel_rect.height, 240)

    # --- color fill gestures ---

    def test_tap_on_fill_toggles_panel(self) -> None:
        self.tap((400, 20))
        self.assertFalse(self.state.panel_visible)
        # with the panel hidden the whole screen is color fill
        self.tap(self.page.panel_rect.center)
        self.assertTrue(self.state.panel_visible)

    def test_swipe_on_fill_cycles_scene(self) -> None:
        self.swipe((400, 20), (320, 20))
        self.assertEqual(self.state.selected_scene, "暖光")
        self.swipe((400, 20), (480, 20))
        self.assertEqual(self.state.selected_scene, "自然光")

    def test_short_swipe_on_fill_changes_nothing(self) -> None:
        self.swipe((400, 20), (430, 20))
        self.assertEqual(self.state.selected_scene, "自然光")
        self.assertTrue(self.state.panel_visible)

    def finger(self, kind, finger_id, x, y) -> None:
        self.page.handle_event(pygame.event.Event(
            kind, touch_id=0, finger_id=finger_id, x=x / 800, y=y / 480, dx=0.0, dy=0.0))

    def test_second_finger_does_not_end_swipe(self) -> None:
        self.finger(pygame.FINGERDOWN, 1, 400, 20)
        self.finger(pygame.FINGERDOWN, 2, 80, 20)
        self.finger(pygame.FINGERMOTION, 2, 60, 20)
        self.finger(pygame.FINGERUP, 2, 60, 20)
        self.assertEqual(self.state.selected_scene, "自然光")
        self.assertTrue(self.state.panel_visible)
        self.assertTrue(self.page.is_animating())

        self.finger(pygame.FINGERMOTION, 1, 480, 20)
        self.finger(pygame.FINGERUP, 1, 480, 20)
        self.assertEqual(self.state.selected_scene, "DeepSeek蓝")
        self.clock.ms = 1000
        self.page.update()
        self.assertFalse(self.page.is_animating())

    def test_mouse_release_does_not_end_finger_drag(self) -> None:
        track = self.page.sliders["hue"].track_rect
        self.finger(pygame.FINGERDOWN, 7, track.left + 2, track.centery)
        self.page.handle_event(pygame.event.Event(
            pygame.MOUSEBUTTONUP, pos=(400, 20), button=1, touch=False))
        self.finger(pygame.FINGERMOTION, 7, track.right + 50, track.centery)
        self.finger(pygame.FINGERUP, 7, track.right + 50, track.centery)
        self.assertEqual(self.state.hue, 1.0)
        self.assertTrue(self.state.panel_visible)

    # --- overlay ---

    def test_tap_on_scene_cell_applies_scene(self) -> None:
        self.tap(self.page.cell_rects[1].center)
        self.assertEqual(self.state.selected_scene, "暖光")
        self.assertEqual(self.state.values(), (0.6, 0.8, 0.08))
        self.assertTrue(self.state.panel_visible)

    def test_scene_at(self) -> None:
        self.assertEqual(self.page.scene_at(self.page.cell_rects[0].center), "自然光")
        self.assertIsNone(self.page.scene_at((400, 5)))

    def test_tap_on_panel_background_is_swallowed(self) -> None:
        panel = self.page.panel_rect
        self.tap((panel.left + 2, panel.bottom - 2))
        self.assertTrue(self.state.panel_visible)
        self.assertEqual(self.state.selected_scene, "自然光")

    def test_brightness_slider_drag(self) -> None:
        self.controller.apply_scene("冷光")
        track = self.page.sliders["brightness"].track_rect
        self.page.pointer_down((track.centerx, track.centery))
        self.page.pointer_move((track.right + 500, track.centery))
        self.page.pointer_up((track.right + 500, track.centery))

        self.assertEqual(self.state.brightness, 1.0)
        self.assertEqual(self.state.selected_scene, "冷光")
        self.assertTrue(self.state.panel_visible)

    def test_sliders_follow_scene_changes(self) -> None:
        self.controller.apply_scene("DeepSeek蓝")
        self.assertEqual(self.page.sliders["brightness"].value, 0.55)
        self.assertEqual(self.page.sliders["saturation"].value, 0.75)
        self.assertEqual(self.page.sliders["hue"].value, 0.65)

    def test_keyboard(self) -> None:
        self.page.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        self.assertEqual(self.state.selected_scene, "暖光")
        self.page.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
        self.page.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
        self.assertEqual(self.state.selected_scene, "DeepSeek蓝")
        self.page.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        self.assertFalse(self.state.panel_visible)

    # --- rendering ---

    def test_scene_change_fades_color(self) -> None:
        start = self.page.displayed_rgb
        self.controller.apply_scene("冷光")
        target = self.controller.rgb()
        self.assertEqual(self.page.displayed_rgb, start)
        self.assertTrue(self.page.is_animating())

        self.clock.ms = 150
        self.page.update()
        self.assertNotIn(self.page.displayed_rgb, (start, target))

        self.clock.ms = 1000
        self.page.update()
        self.assertEqual(self.page.displayed_rgb, target)
        self.assertFalse(self.page.is_animating())

    def test_slider_change_is_immediate(self) -> None:
        track = self.page.sliders["hue"].track_rect
        self.tap((track.left + track.width // 2, track.centery))
        self.assertEqual(self.page.displayed_rgb, self.controller.rgb())

    def test_draw_fills_screen_with_current_color(self) -> None:
        surface = pygame.Surface((800, 480))
        self.controller.toggle_panel()
        self.page.draw(surface)
        self.assertEqual(surface.get_at((400, 400))[:3], self.page.displayed_rgb)
        self.assertFalse(self.page.needs_redraw())

        self.controller.toggle_panel()
        self.assertTrue(self.page.needs_redraw())
        self.page.draw(surface)
        self.assertEqual(surface.get_at((400, 5))[:3], self.page.displayed_rgb)

    def test_on_exit_unsubscribes(self) -> None:
        self.page.on_exit()
        self.controller.apply_scene("冷光")
        self.assertEqual(self.page.sliders["saturation"].value, 1.0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
