# main.py
from road_router.app.build import build


def run(seed: int = 7):
    app = build(
        {
            "name": "city",
            "run_id": "demo",
            "seed": seed,
            "routing": {"search": {"kind": "astar", "heuristic_scale": "auto"}},
        }
    )
    city = app.city

    # Same trip under each policy, then again with the Market St link closed
    for algo in ("dijkstra", "astar", "bellmanford"):
        city.find_path("A", "P", algo)
    city.toggle_road("A", "B")
    city.find_path("A", "P")

    city.simulate_traffic()
    city.find_path("A", "P")
    city.trigger_emergency()


if __name__ == "__main__":
    run()
