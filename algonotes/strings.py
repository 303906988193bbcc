"""String routines: vowels, digit runs, frequency ordering and subsequences."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache

_VOWELS = frozenset("aeiouAEIOU")

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def remove_vowels(text):
    """Return ``text`` without its ASCII vowels."""
    return "".join(char for char in text if char not in _VOWELS)


def count_vowels(text):
    """Return how many ASCII vowels ``text`` holds."""
    return sum(char in _VOWELS for char in text)


def sum_of_integers(text):
    """Add up every run of decimal digits in ``text``."""
    total = 0
    run = ""
    for char in text:
        if "0" <= char <= "9":
            run += char
        else:
            total += int(run) if run else 0
            run = ""
    return total + (int(run) if run else 0)


def frequency_sort(s):
    """Order the characters of ``s`` by descending frequency, ties by descending character."""
    counts = sorted(Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(char * count for char, count in counts)


def precedence(op):
    """Return the binding strength of an operator, or -1 for anything else."""
    return _PRECEDENCE.get(op, -1)


def infix_to_postfix(expr):
    """Convert an infix expression over single letters to postfix notation."""
    stack = []
    output = []
    for char in expr:
        if char.isascii() and char.isalpha():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


@lru_cache(maxsize=None)
def _scramble(a, b):
    if len(a) != len(b):
        return False
    if a == b:
        return True
    if len(a) <= 1:
        return False
    n = len(a)
    return any(
        (_scramble(a[:i], b[n - i:]) and _scramble(a[i:], b[: n - i]))
        or (_scramble(a[:i], b[:i]) and _scramble(a[i:], b[i:]))
        for i in range(1, n)
    )


def is_scramble(a, b):
    """Tell whether ``b`` is a scrambled form of ``a``."""
    if sorted(a) != sorted(b):
        return False
    return _scramble(a, b)


def lcs_length(x, y):
    """Return the length of the longest common subsequence of ``x`` and ``y``."""
    previous = [0] * (len(y) + 1)
    for char_x in x:
        current = [0]
        for column, char_y in enumerate(y, start=1):
            if char_x == char_y:
                current.append(previous[column - 1] + 1)
            else:
                current.append(max(previous[column], current[column - 1]))
        previous = current
    return previous[-1]


def shortest_common_supersequence_length(x, y):
    """Return the length of the shortest string holding both ``x`` and ``y`` as subsequences."""
    return len(x) + len(y) - lcs_length(x, y)