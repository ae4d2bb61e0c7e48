"""Interactive runtime: terminal control, event loop, and browser bootstrap."""
