import pytest

from road_router.search.priority_queue import PriorityQueue


def test_extracts_in_priority_order():
    pq = PriorityQueue()
    for value, prio in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0), ("e", 0.5)]:
        pq.insert(value, prio)
    assert len(pq) == 5
    out = [pq.extract_min() for _ in range(5)]
    assert out == [("e", 0.5), ("a", 1.0), ("b", 2.0), ("c", 3.0), ("d", 4.0)]
    assert pq.is_empty()


def test_duplicates_are_kept():
    # re-insert with a better priority instead of decrease-key
    pq = PriorityQueue()
    pq.insert("x", 5.0)
    pq.insert("x", 2.0)
    assert pq.extract_min() == ("x", 2.0)
    assert pq.extract_min() == ("x", 5.0)
    assert not pq


def test_values_need_not_be_comparable():
    pq = PriorityQueue()
    pq.insert({"id": 1}, 1.0)
    pq.insert({"id": 2}, 1.0)
    assert {pq.extract_min()[0]["id"], pq.extract_min()[0]["id"]} == {1, 2}


def test_extract_from_empty_raises():
    pq = PriorityQueue()
    assert pq.is_empty()
    with pytest.raises(IndexError):
        pq.extract_min()
