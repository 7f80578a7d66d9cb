# road_router/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial

from road_router.app.controllers.city import CityController
from road_router.config.models import ScenarioModel
from road_router.io.generator import generate_graph
from road_router.io.recorder import JsonlSink, MemorySink, Recorder
from road_router.io.search_logging import SearchLogging  # JSON logs
from road_router.search.hooks import NoopHooks
from road_router.services.routing import RoutingService
from road_router.sim.rng import RNGRegistry


@dataclass
class App:
    cfg: ScenarioModel
    rng: RNGRegistry
    recorder: Recorder
    router: RoutingService
    city: CityController


def build(
    cfg: ScenarioModel | Mapping, *, use_logging: bool = True, record_to_memory: bool = False
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) RNG
    rng_registry = RNGRegistry(model.seed, scenario=model.name)

    # 2) Event recorder and search hooks
    recorder = Recorder(MemorySink() if record_to_memory else JsonlSink())
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Routing service
    router = RoutingService(cfg=model.routing, hooks=hooks)

    # 4) Map; regenerated from the start of the "graph" stream on every reset
    graph_factory = partial(
        _make_graph, rng_registry, max_initial_traffic=model.generator.max_initial_traffic
    )
    city = CityController(
        graph_factory=graph_factory,
        router=router,
        rng=rng_registry,
        recorder=recorder,
        run_id=model.run_id,
    )
    return App(model, rng_registry, recorder, router, city)


def _make_graph(rng_registry: RNGRegistry, *, max_initial_traffic: float):
    return generate_graph(rng_registry.fresh("graph"), max_initial_traffic=max_initial_traffic)
