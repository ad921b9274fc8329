import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Node:
    id: int
    name: str
    calls: Tuple[int, ...] = ()  # target ids, edge order


class Graph:
    """
    Call graph with stable integer identities.

    Nodes are held in an explicit tuple indexed by id, plus a name
    index for lookups. A Graph is never changed after construction;
    the parser assembles one through its own builder.
    """

    def __init__(
        self,
        nodes: Iterable[Node] = (),
        skipped_lines: Iterable[Tuple[int, str]] = (),
    ):
        self._nodes: Tuple[Node, ...] = tuple(nodes)
        self._skipped: Tuple[Tuple[int, str], ...] = tuple(skipped_lines)
        self._ids: Dict[str, int] = {n.name: n.id for n in self._nodes}

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def skipped_lines(self) -> Tuple[Tuple[int, str], ...]:
        return self._skipped

    def get(self, name: str) -> Optional[Node]:
        node_id = self._ids.get(name)
        return None if node_id is None else self.nodes[node_id]

    @property
    def edge_count(self) -> int:
        return sum(len(n.calls) for n in self.nodes)

    def edges(self) -> Iterator[Tuple[int, int]]:
        for node in self.nodes:
            for target in node.calls:
                yield node.id, target

    def __getitem__(self, node_id: int) -> Node:
        return self.nodes[node_id]

    def __contains__(self, name: str) -> bool:
        return name in self._ids

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True)
class GroupRule:
    pattern: "re.Pattern[str]"
    color: str

    @classmethod
    def from_strings(cls, pattern: str, color: str) -> "GroupRule":
        return cls(pattern=re.compile(pattern), color=color)

    @property
    def title(self) -> str:
        return self.pattern.pattern

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None


@dataclass(frozen=True)
class Group:
    index: int
    rule: GroupRule
    nodes: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class PositionedNote:
    node: Node
    x: int          # relative to the owning frame
    y: int
    width: int
    remote_id: Optional[str] = None


@dataclass(frozen=True)
class Frame:
    group_index: int
    title: str
    color: str
    x: int
    y: int
    width: int
    height: int
    notes: Tuple[PositionedNote, ...] = ()
    remote_id: Optional[str] = None


@dataclass(frozen=True)
class Connector:
    source_id: int
    target_id: int
    source_remote_id: Optional[str]
    target_remote_id: Optional[str]
    color: str


@dataclass(frozen=True)
class DiagramLayout:
    graph: Graph
    groups: Tuple[Group, ...]
    frames: Tuple[Frame, ...]
