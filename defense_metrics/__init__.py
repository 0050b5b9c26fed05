"""Defensive performance metrics engine for American football."""

__version__ = "1.0.0"
