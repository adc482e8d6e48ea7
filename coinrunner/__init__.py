"""A side-scrolling platformer where coins drain away while you run."""

__version__ = "0.1.0"