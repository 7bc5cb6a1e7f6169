"""Read-only viewer for JSON Lines record files."""

__version__ = "0.1.0"
