"""Skirmish: a turn-based battle simulator built around the Strategy pattern."""

__version__ = "0.1.0"
