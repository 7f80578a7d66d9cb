import math

from road_router.domain.cost import TRAFFIC_COEFFICIENT, effective_weight
from road_router.domain.entities.graph import Graph, Node
from road_router.search.hooks import NoopHooks, SearchHooks
from road_router.search.paths import reconstruct_path
from road_router.search.priority_queue import PriorityQueue
from road_router.search.results import PathResult

NAME = "astar"


def euclidean(a: Node, b: Node) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def admissible_heuristic_scale(graph: Graph) -> float:
    """
    Largest scale s <= 1 with s * euclidean(u, v) <= weight(u, v) on every edge.

    Traffic only raises edge costs, so by the triangle inequality the scaled
    straight-line distance then never overestimates the remaining cost.
    """
    scale = 1.0
    for edge in graph.iter_edges():
        a, b = graph.node(edge.src), graph.node(edge.dst)
        if a is None or b is None:
            continue
        d = euclidean(a, b)
        if d > 0:
            scale = min(scale, max(edge.weight, 0.0) / d)
    return scale


def astar(
    graph: Graph,
    source: str,
    destination: str,
    emergency: bool = False,
    *,
    heuristic_scale: float | None = None,
    traffic_coefficient: float = TRAFFIC_COEFFICIENT,
    hooks: SearchHooks | None = None,
) -> PathResult:
    """
    A* with f = g + scale * euclidean(n, destination).

    By default (``heuristic_scale=None``) the scale is calibrated from the
    graph so the heuristic never overestimates. A fixed scale such as 1.0,
    the plain straight-line heuristic, is only admissible when coordinate
    distance is a lower bound on edge weight.
    Settling, stale-entry handling and the result mirror ``dijkstra``.
    """
    hooks = hooks or NoopHooks()
    goal = graph.node(destination)
    if source not in graph or goal is None:
        return PathResult.unreachable(NAME)
    if heuristic_scale is None:
        heuristic_scale = admissible_heuristic_scale(graph)

    def h(nid: str) -> float:
        return heuristic_scale * euclidean(graph.nodes[nid], goal)

    g: dict[str, float] = {nid: math.inf for nid in graph.nodes}
    prev: dict[str, str | None] = {nid: None for nid in graph.nodes}
    g[source] = 0.0
    closed: set[str] = set()
    visited: list[str] = []

    open_set: PriorityQueue[str] = PriorityQueue()
    open_set.insert(source, h(source))

    while open_set:
        current, _ = open_set.extract_min()
        if current in closed:
            continue
        closed.add(current)
        visited.append(current)
        hooks.node_settled(current, distance=g[current], qsize=len(open_set))
        if current == destination:
            break

        for edge in graph.neighbors(current):
            w = effective_weight(edge, emergency, traffic_coefficient=traffic_coefficient)
            if w is None or edge.dst not in g:
                continue
            tentative = g[current] + w
            if tentative < g[edge.dst]:
                g[edge.dst] = tentative
                prev[edge.dst] = current
                open_set.insert(edge.dst, tentative + h(edge.dst))

    path = reconstruct_path(prev, source, destination)
    if not path:
        return PathResult.unreachable(NAME, visited=visited)
    return PathResult(path, g[destination], visited, algorithm=NAME)
