"""Comparison sorts and a least-significant-digit radix sort."""

from __future__ import annotations


def insertion_sort(items):
    """Return a sorted copy of ``items`` built by insertion."""
    result = list(items)
    for position in range(1, len(result)):
        element = result[position]
        slot = position
        while slot > 0 and result[slot - 1] > element:
            result[slot] = result[slot - 1]
            slot -= 1
        result[slot] = element
    return result


def selection_sort(items):
    """Return a sorted copy of ``items`` built by repeatedly selecting the minimum."""
    result = list(items)
    for position in range(len(result) - 1):
        smallest = min(range(position, len(result)), key=result.__getitem__)
        if result[smallest] < result[position]:
            result[position], result[smallest] = result[smallest], result[position]
    return result


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items):
    """Return a sorted copy of ``items`` by top-down merge sort; the sort is stable."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _partition(values, low, high):
    pivot = values[high]
    boundary = low - 1
    for index in range(low, high):
        if values[index] < pivot:
            boundary += 1
            values[boundary], values[index] = values[index], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items):
    """Return a sorted copy of ``items`` by quicksort with the last element as pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(values, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return values


def radix_sort(items):
    """Return a sorted copy of non-negative integers by decimal radix sort."""
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError("radix sort handles non-negative integers only")
    if not values:
        return values
    largest = max(values)
    exponent = 1
    while largest // exponent > 0:
        buckets = [[] for _ in range(10)]
        for value in values:
            buckets[(value // exponent) % 10].append(value)
        values = [value for bucket in buckets for value in bucket]
        exponent *= 10
    return values