"""Paddock - motorsport fan planner."""

__version__ = "0.1.0"
