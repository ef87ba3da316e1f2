"""
Core application module.

Scene catalog, light state, controller and gesture recognition. The
application shell lives in core.app (import it explicitly; it pulls in
the page layer).
"""

from .controller import LightPanelController
from .display import DisplayManager
from .loop import EventLoop

__all__ = ["LightPanelController", "DisplayManager", "EventLoop"]
