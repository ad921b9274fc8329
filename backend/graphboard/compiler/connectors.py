from typing import Dict, List, Sequence, Tuple

from graphboard.compiler.types import Connector, Frame, Graph, PositionedNote
from graphboard.errors import IntegrityError
from graphboard.logging_config import get_logger

logger = get_logger(__name__)


def index_notes(frames: Sequence[Frame]) -> Dict[int, Tuple[PositionedNote, str]]:
    """Map node id -> (note, owning frame colour)."""
    index: Dict[int, Tuple[PositionedNote, str]] = {}

    for frame in frames:
        for note in frame.notes:
            if note.node.id in index:
                raise IntegrityError(
                    f"Node {note.node.name!r} (id {note.node.id}) "
                    f"is placed in more than one frame"
                )
            index[note.node.id] = (note, frame.color)

    return index


def resolve_connectors(
    graph: Graph,
    frames: Sequence[Frame],
    require_remote_ids: bool = True,
) -> List[Connector]:
    """
    One connector per graph edge, coloured with the source note's frame.

    Must run after every note has been placed (and, when
    require_remote_ids is set, created remotely).
    """
    index = index_notes(frames)

    missing = [node.name for node in graph if node.id not in index]
    if missing:
        raise IntegrityError(f"Nodes without a placement: {missing}")

    connectors: List[Connector] = []
    for node in graph:
        source, color = index[node.id]
        for target_id in node.calls:
            if target_id not in index:
                raise IntegrityError(
                    f"Edge {node.name!r} -> id {target_id} has no placed target"
                )
            target, _ = index[target_id]

            if require_remote_ids and (
                source.remote_id is None or target.remote_id is None
            ):
                raise IntegrityError(
                    f"Edge {node.name!r} -> {target.node.name!r} "
                    f"references a note that was never created"
                )

            connectors.append(
                Connector(
                    source_id=node.id,
                    target_id=target_id,
                    source_remote_id=source.remote_id,
                    target_remote_id=target.remote_id,
                    color=color,
                )
            )

    logger.info("connectors resolved", connectors=len(connectors))
    return connectors
