from typing import Iterable

from graphboard.compiler.connectors import resolve_connectors
from graphboard.compiler.types import Connector, DiagramLayout, Frame


def serialize_frame(frame: Frame) -> dict:
    return {
        "group_index": frame.group_index,
        "title": frame.title,
        "color": frame.color,
        "x": frame.x,
        "y": frame.y,
        "width": frame.width,
        "height": frame.height,
        "remote_id": frame.remote_id,
        "notes": [
            {
                "id": note.node.id,
                "name": note.node.name,
                "x": note.x,
                "y": note.y,
                "width": note.width,
                "remote_id": note.remote_id,
            }
            for note in frame.notes
        ],
    }


def serialize_connector(connector: Connector) -> dict:
    return {
        "source": connector.source_id,
        "target": connector.target_id,
        "source_remote_id": connector.source_remote_id,
        "target_remote_id": connector.target_remote_id,
        "color": connector.color,
    }


def serialize_frames(frames: Iterable[Frame]) -> list:
    return [serialize_frame(f) for f in frames]


def serialize_layout(layout: DiagramLayout) -> dict:
    """
    JSON-ready view of a computed layout. Connectors are resolved
    without remote ids: nothing has been created yet.
    """
    connectors = resolve_connectors(
        layout.graph, layout.frames, require_remote_ids=False
    )
    return {
        "frames": serialize_frames(layout.frames),
        "connectors": [serialize_connector(c) for c in connectors],
        "skipped_lines": [
            {"line_no": line_no, "line": line}
            for line_no, line in layout.graph.skipped_lines
        ],
    }
