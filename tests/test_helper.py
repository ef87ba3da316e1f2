"""Tests for color and math helpers."""

from __future__ import annotations

import unittest

import pygame

import helper


class ColorHelperTests(unittest.TestCase):

    def test_hex_to_rgb(self) -> None:
        self.assertEqual(helper.hex_to_rgb("#0A84FF"), (10, 132, 255))
        self.assertEqual(helper.hex_to_rgb((1, 2, 3)), (1, 2, 3))
        with self.assertRaises(TypeError):
            helper.hex_to_rgb(42)

    def test_clamp_unit(self) -> None:
        self.assertEqual(helper.clamp_unit(-1), 0.0)
        self.assertEqual(helper.clamp_unit(2), 1.0)
        self.assertEqual(helper.clamp_unit(0.3), 0.3)
        self.assertEqual(helper.clamp_unit(float("nan")), 0.0)

    def test_hsb_to_rgb_primaries(self) -> None:
        self.assertEqual(helper.hsb_to_rgb(0.0, 1.0, 1.0), (255, 0, 0))
        self.assertEqual(helper.hsb_to_rgb(1.0, 1.0, 1.0), (255, 0, 0))
        self.assertEqual(helper.hsb_to_rgb(1 / 3, 1.0, 1.0), (0, 255, 0))
        self.assertEqual(helper.hsb_to_rgb(0.5, 0.0, 1.0), (255, 255, 255))
        self.assertEqual(helper.hsb_to_rgb(0.7, 0.9, 0.0), (0, 0, 0))

    def test_hsb_to_rgb_scene_color(self) -> None:
        # 冷光: hue 0.6 is a blue
        r, g, b = helper.hsb_to_rgb(0.6, 0.6, 0.5)
        self.assertGreater(b, g)
        self.assertGreater(g, r)

    def test_lerp_and_ease(self) -> None:
        self.assertEqual(helper.lerp_rgb((0, 0, 0), (200, 100, 50), 0.5), (100, 50, 25))
        self.assertEqual(helper.lerp_rgb((0, 0, 0), (200, 100, 50), 2.0), (200, 100, 50))
        for mode in ("ease_in_out", "ease_out"):
            self.assertEqual(helper.ease(0.0, mode), 0.0)
            self.assertEqual(helper.ease(1.0, mode), 1.0)
        self.assertAlmostEqual(helper.ease(0.5, "ease_in_out"), 0.5)


class PointerHelperTests(unittest.TestCase):

    def test_pointer_pos_scales_fingers(self) -> None:
        finger = pygame.event.Event(pygame.FINGERDOWN, finger_id=0, x=0.5, y=0.25, touch_id=0)
        self.assertEqual(helper.pointer_pos(finger, (800, 480)), (400, 120))
        click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(7, 9), button=1)
        self.assertEqual(helper.pointer_pos(click, (800, 480)), (7, 9))
        self.assertIsNone(helper.pointer_pos(pygame.event.Event(pygame.KEYDOWN, key=0), (800, 480)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
