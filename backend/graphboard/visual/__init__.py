# Colour palette shared by the board and SVG renderers

from graphboard.visual.visual_style import (
    NOTE_COLORS,
    frame_fill_hex,
    note_color,
    stroke_hex,
)

__all__ = [
    "NOTE_COLORS",
    "frame_fill_hex",
    "note_color",
    "stroke_hex",
]
