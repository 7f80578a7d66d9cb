"""
Label-setting Dijkstra over the road graph.

Uses the shared PriorityQueue with lazy deletion: a node may be queued
several times and only its first extraction counts. Requires non-negative
effective weights; graphs with negative weights belong to Bellman-Ford.
"""

import math

from road_router.domain.cost import TRAFFIC_COEFFICIENT, effective_weight
from road_router.domain.entities.graph import Graph
from road_router.search.hooks import NoopHooks, SearchHooks
from road_router.search.paths import reconstruct_path
from road_router.search.priority_queue import PriorityQueue
from road_router.search.results import PathResult

NAME = "dijkstra"


def dijkstra(
    graph: Graph,
    source: str,
    destination: str,
    emergency: bool = False,
    *,
    traffic_coefficient: float = TRAFFIC_COEFFICIENT,
    hooks: SearchHooks | None = None,
) -> PathResult:
    hooks = hooks or NoopHooks()
    if source not in graph or destination not in graph:
        return PathResult.unreachable(NAME)

    dist: dict[str, float] = {nid: math.inf for nid in graph.nodes}
    prev: dict[str, str | None] = {nid: None for nid in graph.nodes}
    dist[source] = 0.0
    settled: set[str] = set()
    visited: list[str] = []

    pq: PriorityQueue[str] = PriorityQueue()
    pq.insert(source, 0.0)

    while pq:
        u, _ = pq.extract_min()
        if u in settled:
            continue  # stale entry
        settled.add(u)
        visited.append(u)
        hooks.node_settled(u, distance=dist[u], qsize=len(pq))
        if u == destination:
            break

        for edge in graph.neighbors(u):
            w = effective_weight(edge, emergency, traffic_coefficient=traffic_coefficient)
            if w is None or edge.dst not in dist:
                continue
            alt = dist[u] + w
            if alt < dist[edge.dst]:
                dist[edge.dst] = alt
                prev[edge.dst] = u
                pq.insert(edge.dst, alt)

    path = reconstruct_path(prev, source, destination)
    if not path:
        return PathResult.unreachable(NAME, visited=visited)
    return PathResult(path, dist[destination], visited, algorithm=NAME)
