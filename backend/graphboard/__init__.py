"""Lay out a module call graph as frames, notes and connectors on a canvas."""

__version__ = "0.1.0"
