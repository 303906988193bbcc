"""Dynamic programming and backtracking: grid paths, rod cutting and N queens."""

from __future__ import annotations


def min_path_cost(cost, m, n):
    """Return the cheapest cost from cell (0, 0) to cell (m, n).

    A step moves right, down or diagonally down-right; every visited cell's cost is paid.
    """
    if not cost or not cost[0]:
        raise ValueError("the cost grid is empty")
    if not (0 <= m < len(cost) and 0 <= n < len(cost[0])):
        raise ValueError(f"cell ({m}, {n}) is outside the grid")
    total = [[0] * (n + 1) for _ in range(m + 1)]
    for row in range(m + 1):
        for col in range(n + 1):
            if row == 0 and col == 0:
                previous = 0
            elif row == 0:
                previous = total[0][col - 1]
            elif col == 0:
                previous = total[row - 1][0]
            else:
                previous = min(total[row - 1][col], total[row][col - 1], total[row - 1][col - 1])
            total[row][col] = previous + cost[row][col]
    return total[m][n]


def rod_cutting(lengths, values, total):
    """Return the best value from cutting a rod of length ``total`` into the given pieces.

    Each piece length may be used any number of times.
    """
    lengths = list(lengths)
    values = list(values)
    if len(lengths) != len(values):
        raise ValueError("lengths and values must have the same size")
    if any(length <= 0 for length in lengths):
        raise ValueError("piece lengths must be positive")
    if total <= 0:
        return 0
    best = [0] * (total + 1)
    for capacity in range(1, total + 1):
        best[capacity] = max(
            (best[capacity - length] + value
             for length, value in zip(lengths, values) if length <= capacity),
            default=0,
        )
    return best[total]


def solve_n_queens(n):
    """Place ``n`` queens on an ``n`` by ``n`` board; return each row's column, or None.

    Boards of size 3 or less are reported as having no solution.
    """
    if n <= 3:
        return None
    columns = []
    used_columns = set()
    used_diagonals = set()
    used_anti = set()

    def place(row):
        if row == n:
            return True
        for col in range(n):
            if col in used_columns or row - col in used_diagonals or row + col in used_anti:
                continue
            columns.append(col)
            used_columns.add(col)
            used_diagonals.add(row - col)
            used_anti.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used_columns.discard(col)
            used_diagonals.discard(row - col)
            used_anti.discard(row + col)
        return False

    return list(columns) if place(0) else None