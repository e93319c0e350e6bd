"""Fenrir Wastes: a turn-based desert survival text adventure."""

__version__ = "0.1.0"
