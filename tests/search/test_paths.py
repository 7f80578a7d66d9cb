from road_router.search.paths import reconstruct_path


def test_walks_predecessors_to_source():
    prev = {"A": None, "B": "A", "C": "B", "D": "C"}
    assert reconstruct_path(prev, "A", "D") == ["A", "B", "C", "D"]


def test_chain_not_reaching_source_is_empty():
    prev = {"A": None, "B": None, "C": "B"}
    assert reconstruct_path(prev, "A", "C") == []


def test_source_equals_destination():
    assert reconstruct_path({"A": None}, "A", "A") == ["A"]


def test_unknown_destination_is_empty():
    assert reconstruct_path({"A": None}, "A", "Z") == []


def test_predecessor_cycle_is_empty():
    prev = {"A": "C", "B": "A", "C": "B"}
    assert reconstruct_path(prev, "A", "C") == []
