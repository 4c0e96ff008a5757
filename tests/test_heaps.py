from collections import Counter

import pytest

from dsaworks.heaps import MaxHeap, build_min_heap, heap_sort, merge_max_heaps


def _is_heap(items, above_or_equal):
    return all(
        above_or_equal(items[(i - 1) // 2], items[i]) for i in range(1, len(items))
    )


def _is_max_heap(items):
    return _is_heap(items, lambda parent, child: parent >= child)


def _is_min_heap(items):
    return _is_heap(items, lambda parent, child: parent <= child)


def test_insert_keeps_source_example_order():
    heap = MaxHeap()
    for value in (50, 55, 53, 52, 54):
        heap.insert(value)
    assert list(heap) == [55, 54, 53, 50, 52]


def test_pop_returns_largest_and_keeps_heap():
    heap = MaxHeap()
    for value in (50, 55, 53, 52, 54):
        heap.insert(value)
    assert heap.pop() == 55
    assert len(heap) == 4
    assert _is_max_heap(list(heap))
    assert sorted(heap) == [50, 52, 53, 54]


def test_pop_sequence_is_descending():
    values = [7, 3, 9, 1, 9, 4, 6, 2, 8]
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values, reverse=True)
    assert len(heap) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().pop()


def test_insert_beyond_capacity_raises():
    heap = MaxHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(IndexError):
        heap.insert(3)
    assert len(heap) == 2


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MaxHeap(-1)


@pytest.mark.parametrize(
    "values",
    [[], [1], [54, 53, 55, 52, 50], [5, 5, 1, 9, -3, 0, 7, 7], list(range(20, 0, -1))],
)
def test_heap_sort_matches_sorted(values):
    assert heap_sort(values) == sorted(values)


def test_heap_sort_leaves_input_untouched():
    values = [3, 1, 2]
    heap_sort(values)
    assert values == [3, 1, 2]


def test_build_min_heap_source_example():
    assert build_min_heap([4, 10, 3, 5, 1]) == [1, 4, 3, 5, 10]


@pytest.mark.parametrize("values", [[], [2], [9, 8, 7, 6, 5, 4, 3], [3, 3, 1, 2, 1]])
def test_build_min_heap_invariants(values):
    result = build_min_heap(values)
    assert _is_min_heap(result)
    assert Counter(result) == Counter(values)
    if values:
        assert result[0] == min(values)


def test_merge_source_example():
    assert merge_max_heaps([10, 7, 5, 2], [12, 9, 6, 3]) == [12, 10, 9, 3, 7, 5, 6, 2]


@pytest.mark.parametrize(
    "a, b", [([], []), ([5, 3], []), ([], [8, 1]), ([9, 4, 6], [10, 2, 1, 0])]
)
def test_merge_invariants(a, b):
    merged = merge_max_heaps(a, b)
    assert _is_max_heap(merged)
    assert sorted(merged) == sorted(a + b)