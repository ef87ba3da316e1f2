"""Drawable widgets: sliders and scene cells."""
