"""djsh - a small line-oriented command interpreter."""

__version__ = "1.0.0"
