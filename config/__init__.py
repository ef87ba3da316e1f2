"""
Configuration Package with Profile Loading
Automatically loads the appropriate profile based on UI_ENV environment variable.

Usage:
    export UI_ENV=development  # or 'production', 'safe'
    python ui.py

    Or in code:
    import config
    print(config.FPS_NORMAL)
"""

import os
import sys
from typing import List, Tuple


_PENDING_LOGS: List[Tuple[str, str]] = []


def _queue_startup_log(level: str, message: str) -> None:
    logger = sys.modules.get("showlog")
    handler = getattr(logger, level, None) if logger else None
    if callable(handler):
        handler(message)
    else:
        _PENDING_LOGS.append((level, message))


def _flush_pending_logs() -> None:
    if not _PENDING_LOGS:
        return

    logger = sys.modules.get("showlog")
    if not logger:
        return

    remaining: List[Tuple[str, str]] = []
    for level, payload in _PENDING_LOGS:
        handler = getattr(logger, level, None)
        if callable(handler):
            handler(payload)
        else:
            remaining.append((level, payload))

    _PENDING_LOGS[:] = remaining


def _notify_showlog_ready() -> None:
    _flush_pending_logs()


def _log_debug(message: str) -> None:
    _queue_startup_log("debug", f"[CONFIG] {message}")


def _log_info(message: str) -> None:
    _queue_startup_log("info", f"[CONFIG] {message}")


def _log_warn(message: str) -> None:
    _queue_startup_log("warn", f"[CONFIG] {message}")

# Import all base configuration modules first
from .logging import *
from .display import *
from .gestures import *
from .light import *
from .styling import *

# Detect environment profile
_env = os.getenv("UI_ENV", "production").lower()

# Load profile-specific overrides
if _env == "development" or _env == "dev":
    _log_info("Loading DEVELOPMENT profile")
    from .profiles.dev import *
elif _env == "safe":
    _log_info("Loading SAFE MODE profile")
    from .profiles.safe import *
else:
    _log_info("Loading PRODUCTION profile")
    from .profiles.prod import *

# Export current profile name
ACTIVE_PROFILE = _env if _env in ("development", "dev", "safe") else "production"

_log_info(f"Active profile: {ACTIVE_PROFILE}")
_log_debug(f"FPS_NORMAL={FPS_NORMAL}, DEBUG={DEBUG}")


def _apply_env_overrides(ns):
    """Let LIGHT_WIDTH / LIGHT_HEIGHT / LIGHT_FULLSCREEN override the window setup."""
    for env_name, key in (("LIGHT_WIDTH", "SCREEN_WIDTH"), ("LIGHT_HEIGHT", "SCREEN_HEIGHT")):
        raw = os.getenv(env_name)
        if raw is None:
            continue
        try:
            value = int(raw)
        except ValueError:
            _log_warn(f"Ignoring {env_name}={raw!r} (not an integer)")
            continue
        if value <= 0:
            _log_warn(f"Ignoring {env_name}={raw!r} (must be positive)")
            continue
        ns[key] = value

    raw = os.getenv("LIGHT_FULLSCREEN")
    if raw is not None:
        ns["FULLSCREEN"] = raw.strip().lower() in ("1", "true", "yes", "on")

    _log_debug(
        f"Screen {ns.get('SCREEN_WIDTH')}x{ns.get('SCREEN_HEIGHT')} "
        f"fullscreen={ns.get('FULLSCREEN')}"
    )


_apply_env_overrides(globals())
