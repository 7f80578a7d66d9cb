# tests/app/test_build_and_run.py
import itertools
import logging
import math
from functools import partial

import pytest

from road_router.app.build import build
from road_router.domain.errors import RoadNotFoundError, SearchTimeout
from road_router.search.hooks import DeadlineHooks
from road_router.services import routing


def _cfg(**routing):
    return {"name": "test", "run_id": "t-1", "seed": 1, "routing": routing}


def test_build_runs():
    app = build(_cfg(), use_logging=False, record_to_memory=True)
    res = app.city.find_path("A", "P")
    assert res.found
    assert res.algorithm == "dijkstra"
    assert app.recorder.sinks[0].names() == ["RouteComputed"]


def test_toggle_then_route_records_events():
    app = build(_cfg(), use_logging=False, record_to_memory=True)
    city, sink = app.city, app.recorder.sinks[0]

    before = city.find_path("A", "B")
    assert before.path == ["A", "B"]
    assert city.toggle_road("A", "B") is True
    after = city.find_path("A", "B")
    assert "B" in after.path and after.path != ["A", "B"]
    assert after.distance > before.distance

    toggled = sink.events[1]
    assert toggled.name == "RoadToggled"
    assert (toggled.src, toggled.dst, toggled.blocked) == ("A", "B", True)
    assert toggled.blocked_roads == 1
    assert [ev.seq for ev in sink.events] == [1, 2, 3]


def test_unknown_road_raises_and_records_nothing():
    app = build(_cfg(), use_logging=False, record_to_memory=True)
    with pytest.raises(RoadNotFoundError):
        app.city.toggle_road("A", "P")
    assert app.recorder.sinks[0].events == []


def test_unreachable_route_event_has_no_distance():
    app = build(_cfg(), use_logging=False, record_to_memory=True)
    for nbr in ("L", "O", "K"):
        app.city.toggle_road("P", nbr)
    res = app.city.find_path("A", "P", "astar")
    assert res.path == [] and math.isinf(res.distance)
    ev = app.recorder.sinks[0].events[-1]
    assert ev.found is False and ev.distance is None


def test_emergency_and_traffic_events():
    app = build(_cfg(), use_logging=False, record_to_memory=True)
    assert app.city.simulate_traffic() == 66
    d = app.city.trigger_emergency()
    assert d.origin.id == "E" and d.result.found
    assert app.recorder.sinks[0].names() == ["TrafficUpdated", "EmergencyDispatched"]


def test_reset_regenerates_the_same_city():
    app = build(_cfg(), use_logging=False, record_to_memory=True)
    first = app.city.graph.snapshot()
    app.city.toggle_road("A", "B")
    app.city.set_traffic("C", "D", 1.0)
    fresh = app.city.reset()
    assert fresh == first
    assert app.recorder.sinks[0].events[-1].roads == 33


def test_config_selects_algorithm_and_deadline():
    app = build(
        _cfg(search={"kind": "astar", "heuristic_scale": "auto"}, deadline_s=10.0),
        use_logging=False,
        record_to_memory=True,
    )
    res = app.city.find_path("M", "D")
    ref = app.city.find_path("M", "D", "dijkstra")
    assert res.algorithm == "astar"
    assert res.distance == pytest.approx(ref.distance)


def test_build_with_logging(caplog):
    app = build(_cfg(), record_to_memory=True)
    with caplog.at_level(logging.INFO, logger="road_router"):
        app.city.find_path("A", "C")
    recs = [r for r in caplog.records if r.name == "road_router"]
    assert [r.getMessage() for r in recs] == ["search_start", "search_end"]
    assert recs[-1].extra["found"] is True


@pytest.mark.parametrize("search", [{"kind": "astar", "heuristic_scale": "auto"}, {}])
def test_astar_by_tag_matches_dijkstra_on_every_city_pair(search):
    cfg = _cfg(search=search) if search else _cfg()
    app = build(cfg, use_logging=False, record_to_memory=True)
    ids = sorted(app.city.graph.nodes)
    for s, d in itertools.permutations(ids, 2):
        a = app.city.find_path(s, d, "astar")
        ref = app.city.find_path(s, d, "dijkstra")
        assert a.algorithm == "astar"
        assert a.distance == pytest.approx(ref.distance), (s, d)


def test_emergency_respects_the_configured_deadline(monkeypatch):
    ticks = itertools.count()  # each clock read advances one second
    monkeypatch.setattr(
        routing, "DeadlineHooks", partial(DeadlineHooks, clock=lambda: float(next(ticks)))
    )
    app = build(_cfg(deadline_s=0.5), use_logging=False, record_to_memory=True)
    with pytest.raises(SearchTimeout) as exc:
        app.city.trigger_emergency()
    assert exc.value.algorithm == "dijkstra"
    assert app.recorder.sinks[0].events == []
