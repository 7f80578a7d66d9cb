# io/generator.py
import numpy as np

from road_router.domain.entities.graph import Graph, Node, NodeKind, check_traffic

# Reference city: a 4x4 block grid with a hospital, fire station and police HQ.
CITY_NODES: list[tuple[str, float, float, str, NodeKind]] = [
    ("A", 100, 80, "Downtown", NodeKind.NORMAL),
    ("B", 250, 60, "Market St", NodeKind.NORMAL),
    ("C", 400, 80, "Tech Park", NodeKind.NORMAL),
    ("D", 550, 60, "Airport Rd", NodeKind.NORMAL),
    ("E", 80, 180, "Hospital", NodeKind.HOSPITAL),
    ("F", 220, 160, "City Hall", NodeKind.NORMAL),
    ("G", 380, 180, "University", NodeKind.NORMAL),
    ("H", 540, 160, "Mall", NodeKind.NORMAL),
    ("I", 100, 280, "Fire Station", NodeKind.FIRE_STATION),
    ("J", 250, 260, "Stadium", NodeKind.NORMAL),
    ("K", 400, 280, "Police HQ", NodeKind.POLICE),
    ("L", 550, 260, "Industrial", NodeKind.NORMAL),
    ("M", 80, 380, "Suburbs W", NodeKind.NORMAL),
    ("N", 220, 360, "Park", NodeKind.NORMAL),
    ("O", 380, 380, "Station", NodeKind.NORMAL),
    ("P", 540, 360, "Suburbs E", NodeKind.NORMAL),
]

# fmt: off
CITY_ROADS: list[tuple[str, str, float]] = [
    # horizontal
    ("A", "B", 15), ("B", "C", 18), ("C", "D", 20),
    ("E", "F", 14), ("F", "G", 16), ("G", "H", 18),
    ("I", "J", 15), ("J", "K", 17), ("K", "L", 19),
    ("M", "N", 14), ("N", "O", 16), ("O", "P", 18),
    # vertical
    ("A", "E", 12), ("B", "F", 11), ("C", "G", 13), ("D", "H", 12),
    ("E", "I", 11), ("F", "J", 12), ("G", "K", 13), ("H", "L", 11),
    ("I", "M", 12), ("J", "N", 11), ("K", "O", 13), ("L", "P", 12),
    # diagonal shortcuts
    ("A", "F", 18), ("B", "G", 19), ("C", "H", 20),
    ("E", "J", 17), ("F", "K", 18), ("G", "L", 19),
    ("I", "N", 16), ("J", "O", 17), ("K", "P", 18),
]
# fmt: on


def generate_graph(rng: np.random.Generator, *, max_initial_traffic: float = 0.5) -> Graph:
    """
    Build the reference city. Every direction of every road draws its own
    traffic uniformly from [0, max_initial_traffic); nothing starts blocked.
    """
    g = Graph()
    for nid, x, y, label, kind in CITY_NODES:
        g.add_node(Node(nid, float(x), float(y), kind, label))
    for a, b, w in CITY_ROADS:
        t_ab, t_ba = rng.uniform(0.0, max_initial_traffic, size=2)
        g.add_road(a, b, float(w), traffic=(float(t_ab), float(t_ba)))
    return g


def randomize_traffic(graph: Graph, rng: np.random.Generator, *, high: float = 1.0) -> int:
    """Redraw traffic on every directed edge from [0, high); returns the edge count."""
    check_traffic(high)
    edges = list(graph.iter_edges())
    draws = rng.uniform(0.0, high, size=len(edges))
    for edge, t in zip(edges, draws):
        edge.traffic = float(t)
    return len(edges)
