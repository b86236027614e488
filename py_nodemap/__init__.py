"""Procedural settlement node maps: placement over a height mask and greedy connection."""

__version__ = "0.1.0"
