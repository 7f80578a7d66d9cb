# sim/rng.py
from __future__ import annotations

from zlib import crc32

import numpy as np


def _tag(s: str) -> int:
    return crc32(s.encode("utf-8")) & 0xFFFFFFFF


class RNGRegistry:
    """
    Named, reproducible numpy Generators.

    Each stream is seeded from (seed, scenario, name), so the draws of the
    "traffic" stream do not depend on whether "emergency" was used first.
    """

    def __init__(self, seed: int, *, scenario: str = ""):
        self.seed = seed & 0xFFFFFFFF
        self.scenario = scenario
        self._scenario_tag = _tag(scenario)
        self._streams: dict[str, np.random.Generator] = {}

    def fresh(self, name: str) -> np.random.Generator:
        """Uncached generator positioned at the start of ``name``."""
        ss = np.random.SeedSequence(entropy=[self.seed, self._scenario_tag, _tag(name)])
        return np.random.Generator(np.random.PCG64(ss))

    def stream(self, name: str) -> np.random.Generator:
        if name not in self._streams:
            self._streams[name] = self.fresh(name)
        return self._streams[name]
