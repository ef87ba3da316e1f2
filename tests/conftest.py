"""Shared test setup: headless SDL and project root on sys.path."""

import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import config as cfg  # noqa: E402

# Keep test runs out of ui_log.txt
cfg.LOG_OFF = True
