# Named sticky-note colours accepted by the canvas, with the hex code used
# wherever a raw colour is needed (connector strokes, frame fills).
NOTE_COLORS = {
    "gray": "#E6E6E6",
    "light_yellow": "#FFF9B1",
    "yellow": "#F5D128",
    "orange": "#FF9D48",
    "light_green": "#D5F692",
    "green": "#C9DF56",
    "dark_green": "#93D275",
    "cyan": "#67C6C0",
    "light_pink": "#FFCEE0",
    "pink": "#EA94BB",
    "violet": "#C6A2D2",
    "red": "#F0939D",
    "light_blue": "#A6CCF5",
    "blue": "#6CD8FA",
    "dark_blue": "#9EA9FF",
    "black": "#000000",
}

DEFAULT_COLOR = "gray"

# Strokes of pale colours vanish on a white board; darken those.
STROKE_OVERRIDES = {
    "gray": "#808080",
    "light_yellow": "#E2C800",
    "light_pink": "#E86A9A",
    "light_green": "#8FC93A",
}


def note_color(name: str) -> str:
    """Named colour the canvas accepts for a note; unknown names fall back."""
    return name if name in NOTE_COLORS else DEFAULT_COLOR


def stroke_hex(name: str) -> str:
    if name in STROKE_OVERRIDES:
        return STROKE_OVERRIDES[name]
    return NOTE_COLORS.get(name, STROKE_OVERRIDES[DEFAULT_COLOR])


def frame_fill_hex(name: str) -> str:
    return NOTE_COLORS.get(name, NOTE_COLORS[DEFAULT_COLOR])
