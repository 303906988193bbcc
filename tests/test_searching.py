import random

import pytest

from algonotes.searching import (
    binary_search,
    binary_search_recursive,
    deterministic_select,
    linear_search,
    randomized_select,
)

SOURCE_ARRAY = [1, 3, 7, 15, 18, 20, 25, 33, 36, 40]


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_source_examples(search):
    assert search(SOURCE_ARRAY, 20) == 5
    assert search(SOURCE_ARRAY, 33) == 7


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_prefix_and_odd_examples(search):
    even = [2, 4, 6, 8, 12, 18, 19, 58]
    assert search(even[:6], 8) == 3
    assert search([3, 4, 5, 6, 7], 5) == 2


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_every_element_is_found_at_its_index(search):
    for index, value in enumerate(SOURCE_ARRAY):
        assert search(SOURCE_ARRAY, value) == index


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
@pytest.mark.parametrize("missing", [0, 2, 19, 41])
def test_missing_values(search, missing):
    assert search(SOURCE_ARRAY, missing) is None


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_empty_sequence(search):
    assert search([], 1) is None


def test_linear_search():
    data = [5, -2, 9, 9, 0]
    assert linear_search(data, 9) is True
    assert linear_search(data, 0) is True
    assert linear_search(data, 4) is False
    assert linear_search([], 4) is False


def _random_lists():
    rng = random.Random(1234)
    for size in (1, 2, 5, 6, 11, 25, 60):
        yield [rng.randint(-20, 20) for _ in range(size)]


def test_deterministic_select_matches_sorted():
    for data in _random_lists():
        ordered = sorted(data)
        for rank in range(1, len(data) + 1):
            assert deterministic_select(data, rank) == ordered[rank - 1]


def test_randomized_select_matches_sorted():
    rng = random.Random(7)
    for data in _random_lists():
        ordered = sorted(data)
        for rank in range(1, len(data) + 1):
            assert randomized_select(data, rank, rng) == ordered[rank - 1]


def test_randomized_select_default_rng():
    data = [9, 1, 8, 2, 7, 3]
    assert randomized_select(data, 1) == min(data)
    assert randomized_select(data, len(data)) == max(data)


def test_select_leaves_input_untouched():
    data = [4, 1, 3, 2]
    deterministic_select(data, 2)
    randomized_select(data, 2, random.Random(0))
    assert data == [4, 1, 3, 2]


@pytest.mark.parametrize("rank", [0, 4, -1])
def test_rank_out_of_range(rank):
    with pytest.raises(ValueError):
        deterministic_select([1, 2, 3], rank)
    with pytest.raises(ValueError):
        randomized_select([1, 2, 3], rank, random.Random(0))


def test_select_on_empty():
    with pytest.raises(ValueError):
        deterministic_select([], 1)