# io/search_logging.py
import json
import logging
import math
import sys

from road_router.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def default_json_logger(name="road_router", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


def _finite(x: float) -> float | None:
    return x if math.isfinite(x) else None


class SearchLogging(NoopHooks):
    """
    Structured JSON records for each search: start/end at INFO, per-node
    settles and Bellman-Ford passes at DEBUG when ``debug`` is on.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or default_json_logger(level=level)
        self._settled = 0
        self._search: dict = {}

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **self._search}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def search_start(self, *, algorithm, source, destination, emergency):
        self._settled = 0
        self._search = {"algorithm": algorithm, "source": source, "destination": destination}
        self._emit("INFO", "search_start", emergency=emergency)

    def node_settled(self, node_id, *, distance, qsize):
        self._settled += 1
        if self.debug and (self._settled % self.sample_every) == 0:
            self._emit("DEBUG", "node_settled", node=node_id, distance=distance, qsize=qsize)

    def relax_pass(self, *, iteration, updated):
        if self.debug:
            self._emit("DEBUG", "relax_pass", iteration=iteration, updated=updated)

    def search_end(self, result, *, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            found=result.found,
            distance=_finite(result.distance),
            hops=result.hops,
            visited=len(result.visited),
            negative_cycle=result.has_negative_cycle,
            wall_ms=round(wall_ms, 3),
        )
        self._search = {}
