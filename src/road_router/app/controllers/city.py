# app/controllers/city.py
import math
from collections.abc import Callable

from road_router.domain.entities.graph import Graph, NodeKind
from road_router.io.generator import randomize_traffic
from road_router.io.recorder import Recorder
from road_router.io.route_events import (
    EmergencyDispatched,
    GraphReset,
    RoadToggled,
    RouteComputed,
    TrafficUpdated,
)
from road_router.runtime.types import Algorithm
from road_router.search.results import PathResult
from road_router.services.emergency import EmergencyDispatch, dispatch_emergency
from road_router.services.routing import RoutingService
from road_router.sim.rng import RNGRegistry


def _distance(result: PathResult) -> float | None:
    return result.distance if math.isfinite(result.distance) else None


class CityController:
    """
    Caller-side operations on the live city map.

    Owns the graph between searches: mutations happen here, searches only
    read it. Every operation is recorded as a RouteEvent.
    """

    def __init__(
        self,
        *,
        graph_factory: Callable[[], Graph],
        router: RoutingService,
        rng: RNGRegistry,
        recorder: Recorder,
        run_id: str = "local",
    ):
        self.graph_factory = graph_factory
        self.graph = graph_factory()
        self.router = router
        self.rng = rng
        self.recorder = recorder
        self.run_id = run_id

    def _seq(self) -> int:
        return self.recorder.next_seq()

    # ------------- map mutations --------------------

    def toggle_road(self, a: str, b: str) -> bool:
        blocked = self.graph.toggle_blocked(a, b)
        self.recorder.emit(
            RoadToggled(
                self.run_id,
                self._seq(),
                "RoadToggled",
                src=a,
                dst=b,
                blocked=blocked,
                blocked_roads=len(self.graph.blocked_roads()),
            )
        )
        return blocked

    def set_traffic(self, a: str, b: str, value: float) -> None:
        self.graph.set_traffic(a, b, value)
        self.recorder.emit(
            TrafficUpdated(
                self.run_id, self._seq(), "TrafficUpdated", edges=2, src=a, dst=b, traffic=value
            )
        )

    def simulate_traffic(self) -> int:
        n = randomize_traffic(self.graph, self.rng.stream("traffic"))
        self.recorder.emit(TrafficUpdated(self.run_id, self._seq(), "TrafficUpdated", edges=n))
        return n

    def reset(self) -> Graph:
        self.graph = self.graph_factory()
        self.recorder.emit(
            GraphReset(
                self.run_id,
                self._seq(),
                "GraphReset",
                nodes=len(self.graph),
                roads=len(self.graph.roads()),
            )
        )
        return self.graph

    # ------------- routing --------------------

    def find_path(
        self,
        source: str,
        destination: str,
        algorithm: Algorithm | str | None = None,
        emergency: bool = False,
    ) -> PathResult:
        result = self.router.find_path(self.graph, source, destination, algorithm, emergency)
        self.recorder.emit(
            RouteComputed(
                self.run_id,
                self._seq(),
                "RouteComputed",
                source=source,
                destination=destination,
                algorithm=result.algorithm,
                emergency=emergency,
                found=result.found,
                path=list(result.path),
                distance=_distance(result),
                visited=len(result.visited),
                negative_cycle=result.has_negative_cycle,
            )
        )
        return result

    def trigger_emergency(
        self, origin_kind: NodeKind = NodeKind.HOSPITAL
    ) -> EmergencyDispatch | None:
        dispatch = dispatch_emergency(
            self.graph,
            self.rng.stream("emergency"),
            origin_kind=origin_kind,
            router=self.router,
        )
        if dispatch is None:
            return None
        self.recorder.emit(
            EmergencyDispatched(
                self.run_id,
                self._seq(),
                "EmergencyDispatched",
                origin=dispatch.origin.id,
                destination=dispatch.destination.id,
                found=dispatch.result.found,
                path=list(dispatch.result.path),
                distance=_distance(dispatch.result),
            )
        )
        return dispatch
