"""Tile-map loading and validation for a puzzle game, with string, buffer and formatting helpers."""

__version__ = "0.1.0"