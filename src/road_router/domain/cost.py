# domain/cost.py
from road_router.domain.entities.graph import Edge

# weight * (1 + traffic * TRAFFIC_COEFFICIENT); traffic 1.0 triples the cost
TRAFFIC_COEFFICIENT = 2.0


def effective_weight(
    edge: Edge, emergency: bool, *, traffic_coefficient: float = TRAFFIC_COEFFICIENT
) -> float | None:
    """
    Traversal cost of ``edge`` for the current mode, or None if it cannot be used.

    Emergency mode drives through blocked roads at base weight. Otherwise a
    blocked edge is excluded and traffic inflates the base weight.
    """
    if emergency:
        return edge.weight
    if edge.blocked:
        return None
    return edge.weight * (1 + edge.traffic * traffic_coefficient)
