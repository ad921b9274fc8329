import math
from typing import List, Sequence, Tuple

from graphboard.compiler.types import Frame, Group, Node, PositionedNote

NOTE_WIDTH = 200
NOTE_HEIGHT = 230
NOTE_GAP_X = 30
NOTE_GAP_Y = 20

FRAME_WIDTH = 2000
FRAME_GAP_X = 200
FRAME_GAP_Y = 500

NOTES_PER_ROW = 8
FRAMES_PER_COLUMN = 3

# Positions are centre-anchored while the canvas measures from the
# frame's top-left corner, hence the half-note offset.
NOTE_ORIGIN_X = NOTE_WIDTH // 2
NOTE_ORIGIN_Y = NOTE_HEIGHT // 2 + NOTE_GAP_Y

ROW_HEIGHT = NOTE_HEIGHT + 2 * NOTE_GAP_Y


def frame_height(note_count: int) -> int:
    return math.ceil(note_count / NOTES_PER_ROW) * ROW_HEIGHT


def place_notes(nodes: Sequence[Node]) -> Tuple[PositionedNote, ...]:
    notes = []
    x, y = NOTE_ORIGIN_X, NOTE_ORIGIN_Y

    for k, node in enumerate(nodes, start=1):
        notes.append(PositionedNote(node=node, x=x, y=y, width=NOTE_WIDTH))

        if k % NOTES_PER_ROW == 0:
            x = NOTE_ORIGIN_X
            y += NOTE_HEIGHT + NOTE_GAP_Y
        else:
            x += NOTE_WIDTH + NOTE_GAP_X

    return tuple(notes)


def layout_frames(groups: Sequence[Group]) -> List[Frame]:
    """
    Grid-pack one frame per non-empty group.

    Frames stack top to bottom, three to a column; the fourth starts a
    new column to the right.
    """
    frames: List[Frame] = []
    col_x, row_y = 0, 0

    for group in sorted(groups, key=lambda g: g.index):
        if not group.nodes:
            continue

        height = frame_height(len(group.nodes))
        frames.append(
            Frame(
                group_index=group.index,
                title=group.rule.title,
                color=group.rule.color,
                x=col_x,
                y=row_y,
                width=FRAME_WIDTH,
                height=height,
                notes=place_notes(group.nodes),
            )
        )

        if len(frames) % FRAMES_PER_COLUMN == 0:
            col_x += FRAME_WIDTH + FRAME_GAP_X
            row_y = 0
        else:
            row_y += height + FRAME_GAP_Y

    return frames
