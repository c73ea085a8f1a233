import pytest

from isolated.spatial_index import SpatialIndex


@pytest.fixture
def index():
    idx = SpatialIndex(10, 8)
    idx.insert("a", 1, 1)
    idx.insert("b", 1, 1)
    idx.insert("c", 5, 3)
    idx.insert("d", 9, 7)
    return idx


def test_get_entities_at(index):
    assert index.get_entities_at(1, 1) == ["a", "b"]
    assert index.get_entities_at(5, 3) == ["c"]
    assert index.get_entities_at(0, 0) == []


def test_out_of_bounds_insert_ignored(index):
    index.insert("x", 10, 0)
    index.insert("y", -1, 2)
    index.insert("z", 3, 8)
    assert index.query_range(-100, -100, 100, 100) == ["a", "b", "c", "d"]


def test_out_of_bounds_lookup_empty(index):
    assert index.get_entities_at(-1, 0) == []
    assert index.get_entities_at(0, 8) == []


def test_clear(index):
    index.clear()
    assert index.query_range(0, 0, 9, 7) == []
    index.insert("e", 1, 1)
    assert index.get_entities_at(1, 1) == ["e"]


def test_query_range_subset(index):
    assert index.query_range(0, 0, 5, 3) == ["a", "b", "c"]
    assert index.query_range(2, 2, 4, 4) == []


def test_query_range_row_major_order():
    idx = SpatialIndex(4, 4)
    idx.insert("lower_left", 0, 2)
    idx.insert("upper_right", 3, 0)
    assert idx.query_range(0, 0, 3, 3) == ["upper_right", "lower_left"]


def test_inverted_range_is_empty(index):
    assert index.query_range(5, 5, 2, 2) == []


def test_returned_list_is_a_copy(index):
    cell = index.get_entities_at(1, 1)
    cell.append("intruder")
    assert index.get_entities_at(1, 1) == ["a", "b"]


def test_empty_index():
    idx = SpatialIndex()
    idx.insert("a", 0, 0)
    assert idx.get_entities_at(0, 0) == []
    assert idx.query_range(0, 0, 5, 5) == []