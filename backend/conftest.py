import pytest

from graphboard.compiler.types import GroupRule

SAMPLE_GRAPH = 'digraph{\n"A" -> "B"\n"B" -> "C"\n"D"\n}'


class FakeCanvas:
    """Records canvas calls and hands out sequential ids."""

    def __init__(self):
        self.calls = []
        self._counter = 0

    def _next(self, kind):
        self._counter += 1
        return f"{kind}-{self._counter}"

    def create_frame(self, board_id, title, color, x, y, width, height):
        self.calls.append(("frame", board_id, title, color, x, y, width, height))
        return self._next("frame")

    def create_note(self, board_id, frame_id, text, color, x, y, width):
        self.calls.append(("note", board_id, frame_id, text, color, x, y, width))
        return self._next("note")

    def create_connector(self, board_id, source_id, target_id, stroke_color):
        self.calls.append(("connector", board_id, source_id, target_id, stroke_color))
        return self._next("connector")


@pytest.fixture
def sample_text():
    return SAMPLE_GRAPH


@pytest.fixture
def sample_rules():
    return [
        GroupRule.from_strings("^A", "red"),
        GroupRule.from_strings(".", "gray"),
    ]


@pytest.fixture
def fake_canvas():
    return FakeCanvas()
