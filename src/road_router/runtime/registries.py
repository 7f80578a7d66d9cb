# runtime/registries.py
from __future__ import annotations

from collections.abc import Callable
from functools import partial

from road_router.config.models import (
    AStarModel,
    BellmanFordModel,
    DijkstraModel,
    SearchUnion,
)
from road_router.domain.errors import UnknownAlgorithmError
from road_router.runtime.types import Algorithm
from road_router.search.astar import astar
from road_router.search.bellman_ford import bellman_ford
from road_router.search.dijkstra import dijkstra
from road_router.search.results import PathResult

# (graph, source, destination, emergency, *, traffic_coefficient, hooks) -> PathResult
SearchFn = Callable[..., PathResult]
SearchFactory = Callable[[SearchUnion], SearchFn]

_search_registry: dict[str, SearchFactory] = {}
_default_models: dict[str, type[SearchUnion]] = {}


def register_algorithm(kind: str, model: type[SearchUnion]):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        _default_models[kind] = model
        return fn

    return deco


def registered_algorithms() -> list[str]:
    return sorted(_search_registry)


def search_model(algorithm: Algorithm | str | SearchUnion) -> SearchUnion:
    """Normalize an enum member, a tag string or a config model into a config model."""
    if isinstance(algorithm, Algorithm):
        algorithm = algorithm.value
    if isinstance(algorithm, str):
        try:
            return _default_models[algorithm]()
        except KeyError:
            raise UnknownAlgorithmError(
                f"Unknown algorithm {algorithm!r}; expected one of {registered_algorithms()}"
            ) from None
    return algorithm


def make_search(cfg: SearchUnion) -> SearchFn:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise UnknownAlgorithmError(f"Unknown algorithm {cfg.kind!r}") from None
    return factory(cfg)


@register_algorithm(Algorithm.DIJKSTRA.value, DijkstraModel)
def _make_dijkstra(cfg: DijkstraModel) -> SearchFn:
    return dijkstra


@register_algorithm(Algorithm.ASTAR.value, AStarModel)
def _make_astar(cfg: AStarModel) -> SearchFn:
    scale = None if cfg.heuristic_scale == "auto" else cfg.heuristic_scale
    return partial(astar, heuristic_scale=scale)


@register_algorithm(Algorithm.BELLMAN_FORD.value, BellmanFordModel)
def _make_bellman_ford(cfg: BellmanFordModel) -> SearchFn:
    return bellman_ford
