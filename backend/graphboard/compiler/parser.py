import re
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from graphboard.compiler.types import Graph, Node
from graphboard.errors import ParseError
from graphboard.logging_config import get_logger

logger = get_logger(__name__)

EDGE_SEPARATOR = "->"
STRIP_RE = re.compile(r"[\s\"']")
HEADER_RE = re.compile(r"^\s*(strict\s+)?(di)?graph\b.*\{\s*$", re.IGNORECASE)
CLOSER_RE = re.compile(r"^\s*\}\s*;?\s*$")


class ParsePolicy(str, Enum):
    SKIP = "skip"      # log the malformed line and continue
    RAISE = "raise"    # abort on the first malformed line


def read_graph_source(path) -> str:
    """
    Read the raw graph description. OSError propagates to the caller;
    nothing here retries.
    """
    return Path(path).read_text(encoding="utf-8")


def parse_line(line: str) -> Optional[Tuple[str, Optional[str]]]:
    """
    Tokenize one content line.

    Returns None for a blank line, (name, None) for a lone node
    declaration and (source, target) for an edge.
    """
    cleaned = STRIP_RE.sub("", line).rstrip(";")
    if not cleaned:
        return None

    parts = cleaned.split(EDGE_SEPARATOR)
    if len(parts) > 2:
        raise ParseError(line, f"more than one '{EDGE_SEPARATOR}'")
    if any(not p for p in parts):
        raise ParseError(line, "empty node name")

    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


def _content_lines(text: str):
    lines = list(enumerate(text.splitlines(), start=1))

    # header and closer are only recognised at the edges of the text
    while lines and not lines[0][1].strip():
        lines.pop(0)
    while lines and not lines[-1][1].strip():
        lines.pop()

    if lines and HEADER_RE.match(lines[0][1]):
        lines.pop(0)
    if lines and CLOSER_RE.match(lines[-1][1]):
        lines.pop()

    return lines


class _GraphBuilder:
    """Mutable scratch state for parse_graph; frozen into a Graph at the end."""

    def __init__(self, dedupe_edges: bool = False):
        self.dedupe_edges = dedupe_edges
        self.names: List[str] = []
        self.calls: List[List[int]] = []
        self.skipped: List[Tuple[int, str]] = []
        self._ids: Dict[str, int] = {}

    def ensure_node(self, name: str) -> int:
        node_id = self._ids.get(name)
        if node_id is None:
            node_id = len(self.names)
            self._ids[name] = node_id
            self.names.append(name)
            self.calls.append([])
        return node_id

    def add_edge(self, source: str, target: str) -> None:
        # source before target: ids follow the order endpoints appear
        src = self.ensure_node(source)
        dst = self.ensure_node(target)
        if self.dedupe_edges and dst in self.calls[src]:
            return
        self.calls[src].append(dst)

    def build(self) -> Graph:
        nodes = (
            Node(id=i, name=name, calls=tuple(calls))
            for i, (name, calls) in enumerate(zip(self.names, self.calls))
        )
        return Graph(nodes, skipped_lines=self.skipped)


def parse_graph(
    text: str,
    on_error: ParsePolicy = ParsePolicy.SKIP,
    dedupe_edges: bool = False,
) -> Graph:
    on_error = ParsePolicy(on_error)
    builder = _GraphBuilder(dedupe_edges=dedupe_edges)

    for line_no, line in _content_lines(text):
        try:
            parsed = parse_line(line)
        except ParseError as e:
            if on_error is ParsePolicy.RAISE:
                raise ParseError(line, e.reason, line_no) from None
            logger.warning(
                "skipping unparseable line",
                line_no=line_no,
                line=line,
                reason=e.reason,
            )
            builder.skipped.append((line_no, line))
            continue

        if parsed is None:
            continue

        source, target = parsed
        if target is None:
            builder.ensure_node(source)
        else:
            builder.add_edge(source, target)

    graph = builder.build()
    logger.info(
        "graph parsed",
        nodes=len(graph),
        edges=graph.edge_count,
        skipped=len(graph.skipped_lines),
    )
    return graph
