from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # per-node settle records
    sample_every: int = Field(default=1, ge=1)


class CostModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    traffic_coefficient: float = Field(default=2.0, ge=0.0)


# ----------------- GENERATORS ---------------------


class CityGeneratorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["city"] = "city"
    max_initial_traffic: float = 0.5

    @field_validator("max_initial_traffic")
    @classmethod
    def _unit_interval(cls, v: float, info: ValidationInfo) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"{info.field_name} must be in [0, 1]")
        return v


# ----------------- SEARCH ALGORITHMS ---------------------


class DijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class AStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    # "auto" = largest admissible scale for the graph; 1.0 = raw straight-line distance
    heuristic_scale: Annotated[float, Field(ge=0.0)] | Literal["auto"] = "auto"


class BellmanFordModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bellmanford"] = "bellmanford"


SearchUnion = Annotated[
    DijkstraModel | AStarModel | BellmanFordModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class RoutingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    cost: CostModel = Field(default_factory=CostModel)
    search: SearchUnion = Field(default_factory=DijkstraModel)
    deadline_s: float | None = Field(default=None, gt=0.0)
    snapshot: bool = False  # deep-copy the graph before each search


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str
    seed: int
    log: LogModel = LogModel()
    generator: CityGeneratorModel = Field(default_factory=CityGeneratorModel)
    routing: RoutingModel = Field(default_factory=RoutingModel)
