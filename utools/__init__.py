"""Command-line tools and helpers for memory, battery, temperature and a countdown timer."""

__version__ = "0.1.0"