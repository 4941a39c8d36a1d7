"""Small, self-contained programming exercises: text, number and data-structure drills."""

__version__ = "0.1.0"