from typing import Optional, Sequence

from graphboard.compiler import build_layout
from graphboard.compiler.parser import ParsePolicy, parse_graph, read_graph_source
from graphboard.compiler.types import DiagramLayout, GroupRule
from graphboard.logging_config import get_logger
from graphboard.renderer.board_renderer import BoardResult, render_to_board

logger = get_logger(__name__)


def build_layout_from_text(
    text: str,
    rules: Sequence[GroupRule],
    on_error: ParsePolicy = ParsePolicy.SKIP,
    dedupe_edges: bool = False,
) -> DiagramLayout:
    """text -> Graph -> groups -> frames. Pure; no network."""
    graph = parse_graph(text, on_error=on_error, dedupe_edges=dedupe_edges)
    layout = build_layout(graph, rules)
    logger.info(
        "layout built",
        nodes=len(graph),
        frames=len(layout.frames),
    )
    return layout


def render_graph_file(
    path=None,
    rules: Optional[Sequence[GroupRule]] = None,
    board_id: Optional[str] = None,
    client=None,
    on_error: Optional[ParsePolicy] = None,
    dedupe_edges: bool = False,
) -> BoardResult:
    """
    Read a graph file and draw it on the board. Anything not passed in
    comes from the environment configuration. The layout is fully
    computed before the first canvas call is made.
    """
    from graphboard import config

    path = path or config.GRAPH_SOURCE_PATH
    if not path:
        raise ValueError("No graph source path given or configured")
    board_id = board_id or config.CANVAS_BOARD_ID
    if not board_id:
        raise ValueError("No board id given or configured")
    if rules is None:
        rules = config.load_group_rules()
    if client is None:
        from graphboard.canvas.config import get_canvas_client
        client = get_canvas_client()

    text = read_graph_source(path)
    layout = build_layout_from_text(
        text,
        rules,
        on_error=on_error or ParsePolicy(config.PARSE_POLICY),
        dedupe_edges=dedupe_edges,
    )
    return render_to_board(layout, client, board_id)
