"""Elementary number routines: sequences, factorials, primes and arithmetic."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass

# The memo table for ``fibonacci`` holds this many entries.
_MEMO_SIZE = 32767

_fib_memo: list[int] = [0, 1]


@dataclass(frozen=True)
class ComplexNumber:
    """A complex number with integer real and imaginary parts."""

    real: int = 0
    imaginary: int = 0

    def __add__(self, other):
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def __str__(self):
        return f"{self.real} + i{self.imaginary}"


def fibonacci_series(n):
    """Return the first ``n`` Fibonacci terms, starting 0, 1."""
    terms = []
    current, following = 0, 1
    for _ in range(n):
        terms.append(current)
        current, following = following, current + following
    return terms


def fib(n):
    """Return the ``n``-th Fibonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci(num):
    """Return the ``num``-th Fibonacci number from a shared memo table."""
    if not 0 <= num < _MEMO_SIZE:
        raise ValueError(f"index {num} is outside the memo table (0..{_MEMO_SIZE - 1})")
    while len(_fib_memo) <= num:
        _fib_memo.append(_fib_memo[-1] + _fib_memo[-2])
    return _fib_memo[num]


def factorial(n):
    """Return ``n!``; a negative ``n`` has no factorial."""
    if n < 0:
        raise ValueError("factorial of a negative number doesn't exist")
    return math.prod(range(1, n + 1))


def power(base, exponent):
    """Return ``base`` multiplied by itself ``exponent`` times."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return base**exponent


def is_leap_year(year):
    """Tell whether ``year`` is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def is_prime(n):
    """Tell whether ``n`` has exactly two positive divisors."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def armstrong_numbers(limit):
    """Return the numbers from 1 to ``limit`` equal to the sum of the cubes of their digits."""
    return [
        number
        for number in range(1, limit + 1)
        if sum(int(digit) ** 3 for digit in str(number)) == number
    ]


def reverse_digits(n):
    """Return ``n`` with its decimal digits reversed, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def karatsuba(x, y):
    """Multiply two integers with Karatsuba's divide-and-conquer scheme."""
    if x < 0 or y < 0:
        sign = -1 if (x < 0) != (y < 0) else 1
        return sign * karatsuba(abs(x), abs(y))
    if x < 10 and y < 10:
        return x * y
    half = max(len(str(x)), len(str(y))) // 2
    scale = 10**half
    x_high, x_low = divmod(x, scale)
    y_high, y_low = divmod(y, scale)
    high = karatsuba(x_high, y_high)
    low = karatsuba(x_low, y_low)
    cross = high + low - karatsuba(x_high - x_low, y_high - y_low)
    return high * scale * scale + cross * scale + low


_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def calculate(op, a, b):
    """Apply one of ``+ - * /`` to ``a`` and ``b``.

    Division by zero follows floating-point rules and yields an infinity or NaN.
    """
    if op == "/":
        if b == 0:
            return math.nan if a == 0 else math.copysign(math.inf, a)
        return a / b
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError(f"operator is not correct: {op!r}") from None
    return operation(a, b)