import random

import pytest

from algonotes.sorting import (
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
)


def _samples(low, high):
    rng = random.Random(99)
    yield []
    yield [low]
    yield list(range(low, low + 20))
    yield list(range(low + 20, low, -1))
    yield [high] * 7
    for size in (2, 3, 10, 57, 200):
        yield [rng.randint(low, high) for _ in range(size)]


def test_insertion_sort_matches_builtin_sorted():
    for data in _samples(-50, 50):
        assert insertion_sort(data) == sorted(data)


def test_selection_sort_matches_builtin_sorted():
    for data in _samples(-50, 50):
        assert selection_sort(data) == sorted(data)


def test_merge_sort_matches_builtin_sorted():
    for data in _samples(-50, 50):
        assert merge_sort(data) == sorted(data)


def test_quick_sort_matches_builtin_sorted():
    for data in _samples(-50, 50):
        assert quick_sort(data) == sorted(data)


def test_input_is_not_modified():
    data = [3, 1, 2, 10, 0]
    assert insertion_sort(data) == [0, 1, 2, 3, 10]
    assert selection_sort(data) == [0, 1, 2, 3, 10]
    assert merge_sort(data) == [0, 1, 2, 3, 10]
    assert quick_sort(data) == [0, 1, 2, 3, 10]
    assert radix_sort(data) == [0, 1, 2, 3, 10]
    assert data == [3, 1, 2, 10, 0]


def test_result_is_a_permutation():
    data = [5, 3, 5, 1, 3, 3]
    results = [
        insertion_sort(data),
        selection_sort(data),
        merge_sort(data),
        quick_sort(data),
    ]
    for result in results:
        assert sorted(result) == sorted(data)
        assert all(a <= b for a, b in zip(result, result[1:]))


def test_accepts_any_iterable():
    assert insertion_sort(iter((4, 2, 3))) == [2, 3, 4]
    assert selection_sort(iter((4, 2, 3))) == [2, 3, 4]
    assert merge_sort(iter((4, 2, 3))) == [2, 3, 4]
    assert quick_sort(iter((4, 2, 3))) == [2, 3, 4]


def test_merge_sort_is_stable():
    records = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Keyed:
        def __init__(self, record):
            self.record = record

        def __lt__(self, other):
            return self.record[0] < other.record[0]

        def __le__(self, other):
            return self.record[0] <= other.record[0]

    result = [item.record for item in merge_sort(Keyed(r) for r in records)]
    assert result == sorted(records, key=lambda r: r[0])


def test_quick_sort_handles_long_sorted_input():
    data = list(range(5000))
    assert quick_sort(data) == data


def test_radix_sort_matches_sorted():
    for data in _samples(0, 100000):
        assert radix_sort(data) == sorted(data)


def test_radix_sort_with_zeros():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])