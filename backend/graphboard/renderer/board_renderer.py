from dataclasses import dataclass, field, replace
from typing import List, Tuple

from graphboard.compiler.connectors import resolve_connectors
from graphboard.compiler.types import Connector, DiagramLayout, Frame
from graphboard.logging_config import get_logger
from graphboard.visual.visual_style import stroke_hex

logger = get_logger(__name__)


@dataclass
class BoardResult:
    frames: Tuple[Frame, ...]
    connectors: List[Connector] = field(default_factory=list)
    connector_ids: List[str] = field(default_factory=list)


def create_frames(layout: DiagramLayout, client, board_id: str) -> Tuple[Frame, ...]:
    """
    Stage one: create every frame, then its notes. Returns new Frame
    values carrying the remote ids; the layout itself is left untouched.
    """
    placed = []
    for frame in layout.frames:
        frame_id = client.create_frame(
            board_id,
            frame.title,
            frame.color,
            frame.x,
            frame.y,
            frame.width,
            frame.height,
        )

        notes = tuple(
            replace(
                note,
                remote_id=client.create_note(
                    board_id,
                    frame_id,
                    note.node.name,
                    frame.color,
                    note.x,
                    note.y,
                    note.width,
                ),
            )
            for note in frame.notes
        )
        placed.append(replace(frame, notes=notes, remote_id=frame_id))

        logger.info(
            "frame created",
            title=frame.title,
            frame_id=frame_id,
            notes=len(notes),
        )

    return tuple(placed)


def render_to_board(layout: DiagramLayout, client, board_id: str) -> BoardResult:
    frames = create_frames(layout, client, board_id)

    # Stage two: only once every note has a remote id
    connectors = resolve_connectors(layout.graph, frames)
    connector_ids = [
        client.create_connector(
            board_id,
            c.source_remote_id,
            c.target_remote_id,
            stroke_hex(c.color),
        )
        for c in connectors
    ]

    logger.info(
        "board rendered",
        board_id=board_id,
        frames=len(frames),
        connectors=len(connector_ids),
    )
    return BoardResult(frames=frames, connectors=connectors, connector_ids=connector_ids)
