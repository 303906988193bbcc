"""Array problems: maximum subarrays, profits, rotations, heaps and celebrities."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from itertools import accumulate


@dataclass(frozen=True)
class Subarray:
    """A contiguous run ``values[low:high + 1]`` and the sum of its elements."""

    low: int
    high: int
    total: int


def _require_values(values):
    if not values:
        raise ValueError("at least one value is required")


def kadane(values):
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    values = list(values)
    _require_values(values)
    best = -math.inf
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def max_subarray_sum_or_zero(values):
    """Return the largest contiguous sum, where the empty run counts as 0."""
    values = list(values)
    if not values:
        return 0
    return max(0, kadane(values))


def max_subarray_naive(values):
    """Find the maximum subarray by trying every start and end position."""
    values = list(values)
    _require_values(values)
    best = None
    for start in range(len(values)):
        for end, total in enumerate(accumulate(values[start:]), start=start):
            if best is None or total > best.total:
                best = Subarray(start, end, total)
    return best


def _max_crossing(values, low, mid, high):
    left_total = -math.inf
    running = 0
    max_left = mid
    for index in range(mid, low - 1, -1):
        running += values[index]
        if running > left_total:
            left_total = running
            max_left = index
    right_total = -math.inf
    running = 0
    max_right = mid + 1
    for index in range(mid + 1, high + 1):
        running += values[index]
        if running > right_total:
            right_total = running
            max_right = index
    return Subarray(max_left, max_right, left_total + right_total)


def _divide_conquer(values, low, high):
    if low == high:
        return Subarray(low, high, values[low])
    mid = (low + high) // 2
    left = _divide_conquer(values, low, mid)
    right = _divide_conquer(values, mid + 1, high)
    cross = _max_crossing(values, low, mid, high)
    if left.total >= right.total and left.total >= cross.total:
        return left
    if right.total >= cross.total:
        return right
    return cross


def max_subarray_divide_conquer(values):
    """Find the maximum subarray by splitting the range in halves."""
    values = list(values)
    _require_values(values)
    return _divide_conquer(values, 0, len(values) - 1)


def max_profit(prices):
    """Return the profit from buying before every rise and selling after it."""
    prices = list(prices)
    return sum(max(0, later - earlier) for earlier, later in zip(prices, prices[1:]))


def push_zeroes_to_end(values):
    """Return ``values`` with its zeroes moved to the end, other elements kept in order."""
    values = list(values)
    kept = [value for value in values if value != 0]
    return kept + [0] * (len(values) - len(kept))


def rotate(values, k):
    """Return ``values`` rotated ``k`` places to the right."""
    values = list(values)
    if not values:
        return values
    k %= len(values)
    return values[len(values) - k:] + values[: len(values) - k]


def furthest_building(heights, bricks, ladders):
    """Return the index of the furthest building reachable with the bricks and ladders given.

    Ladders cover the largest climbs; bricks pay for the rest.
    """
    heights = list(heights)
    climbs = []
    for index, (here, there) in enumerate(zip(heights, heights[1:])):
        jump = there - here
        if jump <= 0:
            continue
        heapq.heappush(climbs, jump)
        if len(climbs) > ladders:
            bricks -= heapq.heappop(climbs)
        if bricks < 0:
            return index
    return max(len(heights) - 1, 0)


def three_sum_closest(nums, target):
    """Return the sum of three elements of ``nums`` closest to ``target``."""
    nums = sorted(nums)
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    best = None
    best_gap = math.inf
    for first in range(len(nums)):
        left, right = first + 1, len(nums) - 1
        while left < right:
            total = nums[first] + nums[left] + nums[right]
            if total == target:
                return total
            gap = abs(total - target)
            if gap < best_gap:
                best, best_gap = total, gap
            if total > target:
                right -= 1
            else:
                left += 1
    return best


def find_celebrity(matrix):
    """Return the index of the person everyone knows and who knows no one, or None.

    ``matrix[a][b]`` is 1 when person ``a`` knows person ``b``.
    """
    size = len(matrix)
    if size == 0:
        return None
    candidates = list(range(size))
    while len(candidates) > 1:
        first = candidates.pop()
        second = candidates.pop()
        candidates.append(second if matrix[first][second] == 1 else first)
    candidate = candidates[0]
    knows_nobody = all(value == 0 for value in matrix[candidate])
    known_by_all = sum(row[candidate] == 1 for row in matrix) == size - 1
    return candidate if knows_nobody and known_by_all else None