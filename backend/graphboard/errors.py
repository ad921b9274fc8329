class GraphboardError(Exception):
    """Base class for every error raised by graphboard."""


class ParseError(GraphboardError):
    def __init__(self, line: str, reason: str, line_no: int | None = None):
        self.line = line
        self.reason = reason
        self.line_no = line_no
        where = f"line {line_no}" if line_no is not None else "line"
        super().__init__(f"Cannot parse {where} {line!r}: {reason}")


class ClassificationError(GraphboardError):
    def __init__(self, node_name: str):
        self.node_name = node_name
        super().__init__(
            f"Node {node_name!r} matches no group rule (missing catch-all?)"
        )


class IntegrityError(GraphboardError):
    """Placed graph is inconsistent: a logic bug, never retried."""


class CanvasError(GraphboardError):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
