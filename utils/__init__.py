"""Layout and font utilities."""
