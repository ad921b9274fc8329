from typing import Sequence

from graphboard.compiler.classify import classify
from graphboard.compiler.layout import layout_frames
from graphboard.compiler.types import DiagramLayout, Graph, GroupRule


def build_layout(graph: Graph, rules: Sequence[GroupRule]) -> DiagramLayout:
    groups = classify(graph, rules)
    frames = layout_frames(groups)
    return DiagramLayout(graph=graph, groups=tuple(groups), frames=tuple(frames))
