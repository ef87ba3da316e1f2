"""Tests for configuration loading and environment overrides."""

from __future__ import annotations

import os
import unittest
from unittest import mock

import config as cfg


class ConfigTests(unittest.TestCase):

    def test_profile_and_defaults_loaded(self) -> None:
        self.assertIn(cfg.ACTIVE_PROFILE, ("production", "development", "dev", "safe"))
        self.assertEqual(cfg.DRAG_THRESHOLD, 50)
        self.assertEqual(cfg.DEFAULT_BRIGHTNESS, 0.5)
        self.assertEqual(cfg.DEFAULT_SATURATION, 1.0)
        self.assertEqual(cfg.DEFAULT_HUE, 0.0)

    def test_screen_env_overrides(self) -> None:
        ns = {"SCREEN_WIDTH": 800, "SCREEN_HEIGHT": 480, "FULLSCREEN": True}
        env = {"LIGHT_WIDTH": "1280", "LIGHT_HEIGHT": "720", "LIGHT_FULLSCREEN": "0"}
        with mock.patch.dict(os.environ, env):
            cfg._apply_env_overrides(ns)
        self.assertEqual(ns, {"SCREEN_WIDTH": 1280, "SCREEN_HEIGHT": 720, "FULLSCREEN": False})

    def test_bad_env_values_ignored(self) -> None:
        ns = {"SCREEN_WIDTH": 800, "SCREEN_HEIGHT": 480, "FULLSCREEN": False}
        env = {"LIGHT_WIDTH": "wide", "LIGHT_HEIGHT": "-5", "LIGHT_FULLSCREEN": "yes"}
        with mock.patch.dict(os.environ, env):
            cfg._apply_env_overrides(ns)
        self.assertEqual(ns, {"SCREEN_WIDTH": 800, "SCREEN_HEIGHT": 480, "FULLSCREEN": True})


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
