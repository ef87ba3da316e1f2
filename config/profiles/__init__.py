"""Profile overrides selected by UI_ENV."""
