# services/routing.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from road_router.config.models import RoutingModel, SearchUnion
from road_router.domain.cost import TRAFFIC_COEFFICIENT
from road_router.domain.entities.graph import Graph
from road_router.runtime.registries import make_search, search_model
from road_router.runtime.types import Algorithm
from road_router.search.hooks import DeadlineHooks, NoopHooks, SearchHooks
from road_router.search.results import PathResult

log = logging.getLogger(__name__)


def find_path(
    graph: Graph,
    source: str,
    destination: str,
    algorithm: Algorithm | str | SearchUnion = Algorithm.DIJKSTRA,
    emergency: bool = False,
    *,
    traffic_coefficient: float = TRAFFIC_COEFFICIENT,
    hooks: SearchHooks | None = None,
    snapshot: bool = False,
) -> PathResult:
    """
    Route ``source`` -> ``destination`` with the selected algorithm.

    The graph is only read. With ``snapshot`` the search runs on a deep copy,
    so callers mutating the live graph concurrently cannot affect it.
    Raises UnknownAlgorithmError for an unregistered tag.
    """
    cfg = search_model(algorithm)
    search = make_search(cfg)
    hooks = hooks or NoopHooks()

    if snapshot:
        graph = graph.snapshot()
    if cfg.kind != Algorithm.BELLMAN_FORD.value and graph.has_negative_weights():
        log.warning("%s on a graph with negative weights; distances may be wrong", cfg.kind)

    t0 = time.perf_counter()
    hooks.search_start(
        algorithm=cfg.kind, source=source, destination=destination, emergency=emergency
    )
    result = search(
        graph,
        source,
        destination,
        emergency,
        traffic_coefficient=traffic_coefficient,
        hooks=hooks,
    )
    hooks.search_end(result, wall_ms=(time.perf_counter() - t0) * 1000)
    return result


@dataclass
class RoutingService:
    """Routing defaults from config bound to a set of hooks."""

    cfg: RoutingModel = field(default_factory=RoutingModel)
    hooks: SearchHooks = field(default_factory=NoopHooks)

    def _hooks(self) -> SearchHooks:
        if self.cfg.deadline_s is None:
            return self.hooks
        return DeadlineHooks(self.cfg.deadline_s, inner=self.hooks)

    def _search(self, algorithm: Algorithm | str | SearchUnion | None) -> SearchUnion:
        # a bare tag naming the configured kind keeps the configured options
        if algorithm is None:
            return self.cfg.search
        model = search_model(algorithm)
        if isinstance(algorithm, (Algorithm, str)) and model.kind == self.cfg.search.kind:
            return self.cfg.search
        return model

    def find_path(
        self,
        graph: Graph,
        source: str,
        destination: str,
        algorithm: Algorithm | str | SearchUnion | None = None,
        emergency: bool = False,
    ) -> PathResult:
        return find_path(
            graph,
            source,
            destination,
            self._search(algorithm),
            emergency,
            traffic_coefficient=self.cfg.cost.traffic_coefficient,
            hooks=self._hooks(),
            snapshot=self.cfg.snapshot,
        )
