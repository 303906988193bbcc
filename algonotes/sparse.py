"""Sparse matrices stored as sorted (row, column, value) triples."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass


@dataclass(frozen=True)
class SparseMatrix:
    """A ``rows`` by ``cols`` matrix that keeps only its non-zero entries.

    ``entries`` may be given in any order and may repeat a position; repeated
    positions are summed, zero values dropped, and the result kept sorted by
    row and then column.
    """

    rows: int
    cols: int
    entries: tuple = ()

    def __post_init__(self):
        if self.rows < 0 or self.cols < 0:
            raise ValueError("dimensions must not be negative")
        merged = {}
        for row, col, value in self.entries:
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise ValueError(
                    f"entry ({row}, {col}) is outside a {self.rows}x{self.cols} matrix"
                )
            merged[(row, col)] = merged.get((row, col), 0) + value
        normalised = tuple(
            (row, col, value) for (row, col), value in sorted(merged.items()) if value != 0
        )
        object.__setattr__(self, "entries", normalised)

    @classmethod
    def from_dense(cls, dense):
        """Build a sparse matrix from a list of equally long rows."""
        rows = len(dense)
        cols = len(dense[0]) if dense else 0
        if any(len(row) != cols for row in dense):
            raise ValueError("all rows must have the same length")
        entries = tuple(
            (i, j, value)
            for i, row in enumerate(dense)
            for j, value in enumerate(row)
            if value != 0
        )
        return cls(rows, cols, entries)

    def to_dense(self):
        """Return the matrix as a list of rows, zeroes filled in."""
        dense = [[0] * self.cols for _ in range(self.rows)]
        for row, col, value in self.entries:
            dense[row][col] = value
        return dense

    def transpose(self):
        """Return the transpose: rows become columns."""
        return SparseMatrix(
            self.cols, self.rows, tuple((col, row, value) for row, col, value in self.entries)
        )

    def __add__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("dimensions don't match")
        return SparseMatrix(self.rows, self.cols, self.entries + other.entries)

    def __matmul__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError("dimensions don't match")
        by_row = defaultdict(list)
        for row, col, value in other.entries:
            by_row[row].append((col, value))
        products = tuple(
            (row, col, left * right)
            for row, inner, left in self.entries
            for col, right in by_row[inner]
        )
        return SparseMatrix(self.rows, other.cols, products)