"""Curtain shop point-of-sale desktop client."""

__version__ = "0.1.0"
