from html import escape

from graphboard.compiler.connectors import resolve_connectors
from graphboard.compiler.layout import NOTE_HEIGHT
from graphboard.compiler.types import DiagramLayout
from graphboard.visual.visual_style import frame_fill_hex, stroke_hex

MARGIN = 50


def render_svg(layout: DiagramLayout) -> str:
    """
    Offline preview of a computed layout. Frames are drawn from their
    top-left corner, notes around their centre, like the canvas does.
    """
    frames = layout.frames
    w = max((f.x + f.width for f in frames), default=0) + 2 * MARGIN
    h = max((f.y + f.height for f in frames), default=0) + 2 * MARGIN

    svg = [
        f'<svg width="{w}" height="{h}" '
        f'viewBox="{-MARGIN} {-MARGIN} {w} {h}" '
        f'xmlns="http://www.w3.org/2000/svg">'
    ]

    placed = {}
    for f in frames:
        svg.append(
            f'<rect x="{f.x}" y="{f.y}" width="{f.width}" height="{f.height}" '
            f'fill="{frame_fill_hex(f.color)}" fill-opacity="0.3" stroke="#555"/>'
        )
        svg.append(
            f'<text x="{f.x + 10}" y="{f.y - 10}" '
            f'font-family="Arial" font-size="24">{escape(f.title)}</text>'
        )
        for n in f.notes:
            placed[n.node.id] = (f.x + n.x, f.y + n.y, n, f.color)

    # Draw edges first so notes sit on top
    for c in resolve_connectors(layout.graph, frames, require_remote_ids=False):
        x1, y1 = placed[c.source_id][:2]
        x2, y2 = placed[c.target_id][:2]
        svg.append(
            f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
            f'stroke="{stroke_hex(c.color)}" stroke-width="2"/>'
        )

    for cx, cy, note, color in placed.values():
        svg.append(
            f'<rect x="{cx - note.width / 2}" y="{cy - NOTE_HEIGHT / 2}" '
            f'width="{note.width}" height="{NOTE_HEIGHT}" '
            f'fill="{frame_fill_hex(color)}" stroke="#333"/>'
        )
        svg.append(
            f'<text x="{cx}" y="{cy}" '
            f'text-anchor="middle" dominant-baseline="middle" '
            f'font-family="Arial" font-size="14">'
            f'{escape(note.node.name)}</text>'
        )

    svg.append("</svg>")
    return "\n".join(svg)
