# Raised at caller-facing seams only; searches degrade to an unreachable result instead.


class RoadNotFoundError(KeyError):
    def __init__(self, a: str, b: str):
        super().__init__(f"no road between {a!r} and {b!r}")
        self.a, self.b = a, b


class UnknownAlgorithmError(ValueError):
    pass


class SearchTimeout(RuntimeError):
    def __init__(self, algorithm: str, elapsed_s: float, budget_s: float):
        super().__init__(f"{algorithm} exceeded {budget_s:.3f}s (elapsed {elapsed_s:.3f}s)")
        self.algorithm = algorithm
        self.elapsed_s = elapsed_s
        self.budget_s = budget_s
