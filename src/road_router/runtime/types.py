from enum import Enum


class Algorithm(Enum):
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BELLMAN_FORD = "bellmanford"
