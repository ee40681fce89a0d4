"""Worked exercises in loops, number systems, patterns, recursion and sorting."""

__version__ = "0.1.0"
__all__ = ["basics", "patterns", "sorting", "recursion"]