import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from road_router.domain.errors import RoadNotFoundError


class NodeKind(Enum):
    NORMAL = "normal"
    HOSPITAL = "hospital"
    FIRE_STATION = "fire_station"
    POLICE = "police"


@dataclass(frozen=True)
class Node:
    id: str
    x: float  # map units, only used by the A* heuristic and renderers
    y: float
    kind: NodeKind = NodeKind.NORMAL
    label: str = ""


@dataclass
class Edge:
    """One direction of a road. Weight is the base cost, traffic in [0, 1]."""

    src: str
    dst: str
    weight: float
    traffic: float = 0.0
    blocked: bool = False

    def __post_init__(self):
        check_traffic(self.traffic)


def check_traffic(value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"traffic must be in [0, 1], got {value!r}")


def edge_key(a: str, b: str) -> str:
    return f"{a}-{b}"


@dataclass
class Graph:
    """
    Directed road graph: node id -> Node, node id -> ordered outgoing edges.

    Roads are conventionally stored as two mirrored directed edges; the
    search code treats every directed edge on its own and never relies on it.
    """

    nodes: dict[str, Node] = field(default_factory=dict)
    edges: dict[str, list[Edge]] = field(default_factory=dict)

    # ------------- construction --------------------

    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise ValueError(f"duplicate node id {node.id!r}")
        self.nodes[node.id] = node
        self.edges.setdefault(node.id, [])
        return node

    def add_edge(self, edge: Edge) -> Edge:
        self.edges.setdefault(edge.src, []).append(edge)
        return edge

    def add_road(
        self,
        a: str,
        b: str,
        weight: float,
        *,
        traffic: tuple[float, float] = (0.0, 0.0),
        blocked: bool = False,
    ) -> tuple[Edge, Edge]:
        t_ab, t_ba = traffic
        return (
            self.add_edge(Edge(a, b, weight, t_ab, blocked)),
            self.add_edge(Edge(b, a, weight, t_ba, blocked)),
        )

    # ------------- reads --------------------

    def node(self, node_id: str) -> Node | None:
        return self.nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def neighbors(self, node_id: str) -> list[Edge]:
        return self.edges.get(node_id, [])

    def edge(self, a: str, b: str) -> Edge | None:
        return next((e for e in self.neighbors(a) if e.dst == b), None)

    def iter_edges(self) -> Iterator[Edge]:
        for out in self.edges.values():
            yield from out

    def roads(self) -> set[frozenset[str]]:
        return {frozenset((e.src, e.dst)) for e in self.iter_edges()}

    def blocked_roads(self) -> set[frozenset[str]]:
        return {frozenset((e.src, e.dst)) for e in self.iter_edges() if e.blocked}

    def has_negative_weights(self) -> bool:
        return any(e.weight < 0 for e in self.iter_edges())

    def snapshot(self) -> "Graph":
        return copy.deepcopy(self)

    # ------------- mutation --------------------

    def _road(self, a: str, b: str) -> list[Edge]:
        found: list[Edge] = []
        for e in (self.edge(a, b), self.edge(b, a)):
            if e is not None and not any(e is f for f in found):  # self-loop: a == b
                found.append(e)
        if not found:
            raise RoadNotFoundError(a, b)
        return found

    def toggle_blocked(self, a: str, b: str) -> bool:
        """Flip each direction of the a<->b road; returns the new state of the first one found."""
        road = self._road(a, b)
        for e in road:
            e.blocked = not e.blocked
        return road[0].blocked

    def set_traffic(self, a: str, b: str, value: float) -> None:
        check_traffic(value)
        for e in self._road(a, b):
            e.traffic = value
