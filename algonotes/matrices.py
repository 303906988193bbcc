"""Dense matrix routines: determinants, identity and saddle checks, spirals and shortest paths."""

from __future__ import annotations

import math

# Marks a missing edge in a distance matrix.
INF = math.inf

_CELL_GAP = "     "


def _require_square(matrix):
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _require_rectangular(matrix):
    if matrix and any(len(row) != len(matrix[0]) for row in matrix):
        raise ValueError("all rows must have the same length")


def _det(matrix):
    if len(matrix) == 1:
        return matrix[0][0]
    if len(matrix) == 2:
        return matrix[0][0] * matrix[1][1] - matrix[1][0] * matrix[0][1]
    total = 0
    for col, value in enumerate(matrix[0]):
        minor = [row[:col] + row[col + 1:] for row in matrix[1:]]
        sign = -1 if col % 2 else 1
        total += sign * value * _det(minor)
    return total


def determinant(matrix):
    """Return the determinant of a square matrix by cofactor expansion along the first row."""
    size = _require_square(matrix)
    if size == 0:
        raise ValueError("matrix is empty")
    return _det([list(row) for row in matrix])


def is_identity(matrix):
    """Tell whether ``matrix`` is square with ones on the diagonal and zeroes elsewhere."""
    size = len(matrix)
    return all(
        len(row) == size
        and all(value == (1 if i == j else 0) for j, value in enumerate(row))
        for i, row in enumerate(matrix)
    )


def saddle_point(matrix):
    """Return the first value that is the minimum of its row and the maximum of its column.

    Rows are scanned from the top; None is returned when there is no such value.
    """
    _require_rectangular(matrix)
    for row in matrix:
        if not row:
            continue
        smallest = min(row)
        col = row.index(smallest)
        if all(other[col] <= smallest for other in matrix):
            return smallest
    return None


def spiral_order(matrix):
    """Return the elements of ``matrix`` read clockwise from the top-left corner inwards."""
    _require_rectangular(matrix)
    result = []
    if not matrix or not matrix[0]:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def transpose(matrix):
    """Return the transpose of a rectangular matrix as a new list of rows."""
    _require_rectangular(matrix)
    return [list(column) for column in zip(*matrix)]


def floyd_warshall(graph):
    """Return the shortest distance between every pair of vertices.

    ``graph[i][j]`` is the weight of the edge from ``i`` to ``j``, or ``INF`` without one.
    """
    size = _require_square(graph)
    dist = [list(row) for row in graph]
    for k in range(size):
        for i in range(size):
            via = dist[i][k]
            if via == INF:
                continue
            for j in range(size):
                onward = dist[k][j]
                if onward != INF and via + onward < dist[i][j]:
                    dist[i][j] = via + onward
    return dist


def format_distances(dist):
    """Render a distance matrix one row per line, writing missing paths as ``INF``."""
    return "".join(
        "".join(("INF" if value == INF else str(value)) + _CELL_GAP for value in row) + "\n"
        for row in dist
    )