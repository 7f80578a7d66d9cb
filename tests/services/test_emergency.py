import itertools
from functools import partial

import numpy as np
import pytest

from road_router.config.models import RoutingModel
from road_router.domain.entities.graph import Graph, Node, NodeKind
from road_router.domain.errors import SearchTimeout
from road_router.io.generator import generate_graph
from road_router.search.dijkstra import dijkstra
from road_router.search.hooks import DeadlineHooks, NoopHooks
from road_router.services import routing
from road_router.services.emergency import dispatch_emergency
from road_router.services.routing import RoutingService


def test_dispatch_starts_at_the_hospital_and_ignores_blocks():
    g = generate_graph(np.random.default_rng(0))
    for e in g.iter_edges():
        e.blocked = True

    d = dispatch_emergency(g, np.random.default_rng(1))
    assert d.origin.id == "E"
    assert d.destination.kind is NodeKind.NORMAL
    assert d.result.found
    assert d.result.path[0] == "E" and d.result.path[-1] == d.destination.id
    assert d.result == dijkstra(g, "E", d.destination.id, True)


def test_dispatch_from_other_services():
    g = generate_graph(np.random.default_rng(0))
    d = dispatch_emergency(g, np.random.default_rng(1), origin_kind=NodeKind.POLICE)
    assert d.origin.id == "K"
    assert d.result.found


def test_destination_draw_is_reproducible():
    g = generate_graph(np.random.default_rng(0))
    a = [dispatch_emergency(g, np.random.default_rng(7)).destination.id for _ in range(3)]
    assert len(set(a)) == 1


def test_no_hospital_means_no_dispatch():
    g = Graph()
    g.add_node(Node("A", 0.0, 0.0))
    g.add_node(Node("B", 1.0, 0.0))
    g.add_road("A", "B", 1.0)
    assert dispatch_emergency(g, np.random.default_rng(0)) is None


def test_dispatch_routes_through_the_service_deadline(monkeypatch):
    ticks = itertools.count()  # each clock read advances one second
    monkeypatch.setattr(
        routing, "DeadlineHooks", partial(DeadlineHooks, clock=lambda: float(next(ticks)))
    )
    router = RoutingService(cfg=RoutingModel(deadline_s=0.5))
    g = generate_graph(np.random.default_rng(0))
    with pytest.raises(SearchTimeout):
        dispatch_emergency(g, np.random.default_rng(1), router=router)


def test_dispatch_uses_router_hooks_in_emergency_mode():
    class Starts(NoopHooks):
        def __init__(self):
            self.starts = []

        def search_start(self, *, algorithm, source, destination, emergency):
            self.starts.append((algorithm, source, destination, emergency))

    hooks = Starts()
    g = generate_graph(np.random.default_rng(0))
    d = dispatch_emergency(g, np.random.default_rng(1), router=RoutingService(hooks=hooks))
    assert hooks.starts == [("dijkstra", "E", d.destination.id, True)]
