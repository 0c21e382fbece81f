"""Keep a pinned Go toolchain version current."""

__version__ = "0.1.0"
