"""Todo and label HTTP backend."""

__version__ = "0.1.0"
