"""Star patterns drawn as text."""

from __future__ import annotations


def butterfly(n):
    """Return a butterfly of ``2 * n`` lines of stars, each line ending in a newline."""
    widths = list(range(1, n + 1)) + list(range(n, 0, -1))
    return "".join(
        "* " * width + "  " * (2 * n - 2 * width) + "* " * width + "\n" for width in widths
    )