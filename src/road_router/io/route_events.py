# io/route_events.py
from dataclasses import dataclass


# Base type for caller-level events (what happened to the map and its routes)
@dataclass
class RouteEvent:
    run_id: str
    seq: int  # emission order within the run
    name: str  # stable event name


@dataclass
class RoadToggled(RouteEvent):
    src: str
    dst: str
    blocked: bool
    blocked_roads: int


@dataclass
class TrafficUpdated(RouteEvent):
    edges: int
    src: str | None = None  # None => every edge was redrawn
    dst: str | None = None
    traffic: float | None = None


@dataclass
class RouteComputed(RouteEvent):
    source: str
    destination: str
    algorithm: str
    emergency: bool
    found: bool
    path: list[str]
    distance: float | None  # None when unreachable
    visited: int
    negative_cycle: bool = False


@dataclass
class EmergencyDispatched(RouteEvent):
    origin: str
    destination: str
    found: bool
    path: list[str]
    distance: float | None


@dataclass
class GraphReset(RouteEvent):
    nodes: int
    roads: int
