"""Code-shape checks."""
