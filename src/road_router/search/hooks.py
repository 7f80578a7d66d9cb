# search/hooks.py
import time
from typing import Protocol

from road_router.domain.errors import SearchTimeout
from road_router.search.results import PathResult


class SearchHooks(Protocol):
    def search_start(self, *, algorithm, source, destination, emergency): ...
    def node_settled(self, node_id: str, *, distance, qsize): ...
    def relax_pass(self, *, iteration, updated): ...
    def search_end(self, result: PathResult, *, wall_ms): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def node_settled(self, *_, **__):
        pass

    def relax_pass(self, **_):
        pass

    def search_end(self, *_, **__):
        pass


class DeadlineHooks(NoopHooks):
    """
    Cancels a search once ``budget_s`` has elapsed.

    Checked between queue extractions (Dijkstra, A*) and between relaxation
    passes (Bellman-Ford); other calls are forwarded to ``inner``.
    """

    def __init__(self, budget_s: float, inner: SearchHooks | None = None, clock=time.perf_counter):
        self.budget_s = budget_s
        self.inner = inner or NoopHooks()
        self._clock = clock
        self._t0 = None
        self._algorithm = ""

    def _check(self):
        if self._t0 is None:
            return
        elapsed = self._clock() - self._t0
        if elapsed > self.budget_s:
            raise SearchTimeout(self._algorithm, elapsed, self.budget_s)

    def search_start(self, *, algorithm, source, destination, emergency):
        self._t0 = self._clock()
        self._algorithm = algorithm
        self.inner.search_start(
            algorithm=algorithm, source=source, destination=destination, emergency=emergency
        )

    def node_settled(self, node_id, *, distance, qsize):
        self.inner.node_settled(node_id, distance=distance, qsize=qsize)
        self._check()

    def relax_pass(self, *, iteration, updated):
        self.inner.relax_pass(iteration=iteration, updated=updated)
        self._check()

    def search_end(self, result, *, wall_ms):
        self._t0 = None
        self.inner.search_end(result, wall_ms=wall_ms)
