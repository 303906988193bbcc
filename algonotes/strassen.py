"""Square matrix multiplication by quadrant recursion and by Strassen's method."""

from __future__ import annotations


def _shape(matrix):
    cols = len(matrix[0]) if matrix else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("all rows must have the same length")
    return len(matrix), cols


def _require_same_shape(a, b):
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")


def add_matrices(a, b):
    """Return the element-wise sum of two matrices of the same shape."""
    _require_same_shape(a, b)
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def subtract_matrices(a, b):
    """Return the element-wise difference of two matrices of the same shape."""
    _require_same_shape(a, b)
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _check_operands(a, b):
    rows, cols = _shape(a)
    if rows != cols:
        raise ValueError("matrices must be square")
    if _shape(b) != (rows, cols):
        raise ValueError("matrices must have the same size")
    if rows == 0 or rows & (rows - 1):
        raise ValueError("the size must be a power of two")


def _split(matrix):
    half = len(matrix) // 2
    top, bottom = matrix[:half], matrix[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _join(c11, c12, c21, c22):
    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def _quadrant_product(a, b):
    if len(a) == 1:
        return [[a[0][0] * b[0][0]]]
    a11, a12, a21, a22 = _split(a)
    b11, b12, b21, b22 = _split(b)
    return _join(
        add_matrices(_quadrant_product(a11, b11), _quadrant_product(a12, b21)),
        add_matrices(_quadrant_product(a11, b12), _quadrant_product(a12, b22)),
        add_matrices(_quadrant_product(a21, b11), _quadrant_product(a22, b21)),
        add_matrices(_quadrant_product(a21, b12), _quadrant_product(a22, b22)),
    )


def divide_and_conquer_multiply(a, b):
    """Multiply two square matrices whose size is a power of two, with eight half-size products."""
    _check_operands(a, b)
    return _quadrant_product(a, b)


def _strassen(a, b):
    if len(a) == 1:
        return [[a[0][0] * b[0][0]]]
    a11, a12, a21, a22 = _split(a)
    b11, b12, b21, b22 = _split(b)
    p1 = _strassen(a11, subtract_matrices(b12, b22))
    p2 = _strassen(add_matrices(a11, a12), b22)
    p3 = _strassen(add_matrices(a21, a22), b11)
    p4 = _strassen(a22, subtract_matrices(b21, b11))
    p5 = _strassen(add_matrices(a11, a22), add_matrices(b11, b22))
    p6 = _strassen(subtract_matrices(a12, a22), add_matrices(b21, b22))
    p7 = _strassen(subtract_matrices(a11, a21), add_matrices(b11, b12))
    return _join(
        subtract_matrices(add_matrices(p5, p4), subtract_matrices(p2, p6)),
        add_matrices(p1, p2),
        add_matrices(p3, p4),
        subtract_matrices(add_matrices(p1, p5), add_matrices(p3, p7)),
    )


def strassen_multiply(a, b):
    """Multiply two square matrices whose size is a power of two, with seven half-size products."""
    _check_operands(a, b)
    return _strassen(a, b)