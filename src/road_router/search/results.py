import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PathResult:
    """
    Common result shape of every search.

    ``visited`` is the settle order for Dijkstra and A* and stays empty for
    Bellman-Ford. When ``has_negative_cycle`` is set the path and distance
    must not be trusted.
    """

    path: list[str]
    distance: float
    visited: list[str] = field(default_factory=list)
    has_negative_cycle: bool = False
    algorithm: str = ""

    @classmethod
    def unreachable(cls, algorithm: str = "", *, visited=(), has_negative_cycle=False):
        return cls([], math.inf, list(visited), has_negative_cycle, algorithm)

    @property
    def found(self) -> bool:
        return bool(self.path) and not self.has_negative_cycle

    @property
    def hops(self) -> int:
        return max(0, len(self.path) - 1)
