"""Read, write and inspect REXPaint .xp image files."""

__version__ = "0.1.0"
__all__ = ["model", "loader", "cli"]