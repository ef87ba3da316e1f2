"""
Cat Light - entry point.

Turns the screen into a colored light panel. All subsystem setup and the
event loop live in core.app.LightPanelApp.
"""

import showlog
from core.app import LightPanelApp


def main():
    """
    Application entry point.

    Initializes and runs the light panel; cleanup always runs.
    """
    app = LightPanelApp()
    try:
        # - Display/screen
        # - Controller + page
        # - Event handling
        app.initialize()

        # Process pygame events, update fades, render, control frame rate
        app.run()

    except KeyboardInterrupt:
        showlog.info("[EXIT] Interrupted by user")
    except Exception as e:
        showlog.error(f"[APP] Application error: {e}")
        raise
    finally:
        app.cleanup()


if __name__ == "__main__":
    main()
