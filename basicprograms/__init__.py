"""Beginner exercises: number helpers, string helpers, text patterns and a command line."""

__version__ = "0.1.0"
__all__ = ["numbers", "text", "patterns", "cli"]