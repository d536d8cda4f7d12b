"""Blog page checks and word frequency reports, driven through a real browser."""

__version__ = "0.1.0"
