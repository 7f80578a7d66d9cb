import pytest

from road_router.domain.cost import TRAFFIC_COEFFICIENT, effective_weight
from road_router.domain.entities.graph import Edge


def test_traffic_inflates_weight():
    e = Edge("A", "B", 10.0, traffic=0.5)
    assert effective_weight(e, False) == pytest.approx(20.0)
    assert TRAFFIC_COEFFICIENT == 2.0


def test_zero_traffic_is_base_weight():
    assert effective_weight(Edge("A", "B", 7.0), False) == 7.0


def test_blocked_edge_not_traversable():
    assert effective_weight(Edge("A", "B", 10.0, blocked=True), False) is None


def test_emergency_ignores_traffic_and_blocking():
    e = Edge("A", "B", 10.0, traffic=1.0, blocked=True)
    assert effective_weight(e, True) == 10.0


def test_configurable_coefficient():
    e = Edge("A", "B", 10.0, traffic=0.5)
    assert effective_weight(e, False, traffic_coefficient=0.0) == 10.0
    assert effective_weight(e, False, traffic_coefficient=4.0) == pytest.approx(30.0)
