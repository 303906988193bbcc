"""Searching a sequence and selecting its k-th smallest element."""

from __future__ import annotations

import random


def binary_search(items, target):
    """Return the index of ``target`` in the sorted sequence ``items``, or None."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            start = mid + 1
        else:
            end = mid - 1
    return None


def binary_search_recursive(items, target):
    """Return the index of ``target`` in the sorted sequence ``items``, or None.

    The range is halved by recursion instead of a loop.
    """

    def search(start, end):
        if start > end:
            return None
        mid = (start + end) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(items) - 1)


def linear_search(items, target):
    """Tell whether ``target`` occurs anywhere in ``items``."""
    return any(item == target for item in items)


def _check_rank(rank, size):
    if not 1 <= rank <= size:
        raise ValueError(f"rank {rank} is outside 1..{size}")


def _partition(values, low, high):
    """Partition ``values[low:high + 1]`` around its last element; return the pivot's index."""
    pivot = values[high]
    boundary = low - 1
    for index in range(low, high):
        if values[index] < pivot:
            boundary += 1
            values[boundary], values[index] = values[index], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def randomized_select(items, rank, rng=None):
    """Return the ``rank``-th smallest element (1-based) using random pivots."""
    values = list(items)
    _check_rank(rank, len(values))
    chooser = rng if rng is not None else random.Random()
    low, high = 0, len(values) - 1
    while low < high:
        pivot_index = chooser.randint(low, high)
        values[pivot_index], values[high] = values[high], values[pivot_index]
        split = _partition(values, low, high)
        left_size = split - low + 1
        if rank == left_size:
            return values[split]
        if rank < left_size:
            high = split - 1
        else:
            low = split + 1
            rank -= left_size
    return values[low]


def _median_of_group(group):
    return sorted(group)[len(group) // 2]


def _select(values, rank):
    if len(values) <= 5:
        return sorted(values)[rank - 1]
    medians = [_median_of_group(values[start:start + 5]) for start in range(0, len(values), 5)]
    pivot = _select(medians, (len(medians) + 1) // 2)
    lower = [value for value in values if value < pivot]
    higher = [value for value in values if value > pivot]
    equal = len(values) - len(lower) - len(higher)
    if rank <= len(lower):
        return _select(lower, rank)
    if rank <= len(lower) + equal:
        return pivot
    return _select(higher, rank - len(lower) - equal)


def deterministic_select(items, rank):
    """Return the ``rank``-th smallest element (1-based) using the median of medians."""
    values = list(items)
    _check_rank(rank, len(values))
    return _select(values, rank)