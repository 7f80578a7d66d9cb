"""
Bellman-Ford over the flattened edge list.

Tolerates negative weights and reports a negative cycle reachable from the
source through ``PathResult.has_negative_cycle``. No settle order exists, so
the visited trace is always empty.
"""

import math

from road_router.domain.cost import TRAFFIC_COEFFICIENT, effective_weight
from road_router.domain.entities.graph import Graph
from road_router.search.hooks import NoopHooks, SearchHooks
from road_router.search.paths import reconstruct_path
from road_router.search.results import PathResult

NAME = "bellmanford"


def traversable_edges(
    graph: Graph, emergency: bool, *, traffic_coefficient: float = TRAFFIC_COEFFICIENT
) -> list[tuple[str, str, float]]:
    """Flat (u, v, w) list of usable edges; edges touching unknown nodes are dropped."""
    out = []
    for u, edges in graph.edges.items():
        if u not in graph:
            continue
        for edge in edges:
            w = effective_weight(edge, emergency, traffic_coefficient=traffic_coefficient)
            if w is None or edge.dst not in graph:
                continue
            out.append((u, edge.dst, w))
    return out


def bellman_ford(
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
    edges = traversable_edges(graph, emergency, traffic_coefficient=traffic_coefficient)

    for i in range(len(graph) - 1):
        updated = 0
        for u, v, w in edges:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                prev[v] = u
                updated += 1
        hooks.relax_pass(iteration=i, updated=updated)

    has_negative_cycle = any(dist[u] + w < dist[v] for u, v, w in edges)

    path = reconstruct_path(prev, source, destination)
    if not path:
        return PathResult.unreachable(NAME, has_negative_cycle=has_negative_cycle)
    return PathResult(
        path, dist[destination], has_negative_cycle=has_negative_cycle, algorithm=NAME
    )
