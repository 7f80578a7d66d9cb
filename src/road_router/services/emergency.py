from dataclasses import dataclass

import numpy as np

from road_router.domain.entities.graph import Graph, Node, NodeKind
from road_router.runtime.types import Algorithm
from road_router.search.results import PathResult
from road_router.services.routing import RoutingService


@dataclass(frozen=True)
class EmergencyDispatch:
    origin: Node
    destination: Node
    result: PathResult


def dispatch_emergency(
    graph: Graph,
    rng: np.random.Generator,
    *,
    origin_kind: NodeKind = NodeKind.HOSPITAL,
    router: RoutingService | None = None,
) -> EmergencyDispatch | None:
    """
    Send a vehicle from the first ``origin_kind`` node (by id) to a random
    normal node. Routing ignores traffic and blocks and goes through
    ``router``, so its hooks, deadline and snapshot settings apply. None when
    the graph has no such origin or no normal destination.
    """
    origins = sorted(
        (n for n in graph.nodes.values() if n.kind is origin_kind), key=lambda n: n.id
    )
    targets = sorted(
        (n for n in graph.nodes.values() if n.kind is NodeKind.NORMAL), key=lambda n: n.id
    )
    if not origins or not targets:
        return None
    router = router or RoutingService()
    origin = origins[0]
    destination = targets[int(rng.integers(len(targets)))]
    result = router.find_path(
        graph, origin.id, destination.id, Algorithm.DIJKSTRA, emergency=True
    )
    return EmergencyDispatch(origin, destination, result)
