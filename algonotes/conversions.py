"""Conversions between number bases, words, Roman numerals and colours."""

from __future__ import annotations

_SINGLE_DIGITS = ["zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]
_TEENS = [
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "ninteen",
]
_TENS_MULTIPLES = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninty"]
_TENS_POWERS = ["hundred", "thousand"]

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _check_bits(bits):
    stray = set(bits) - {"0", "1"}
    if stray:
        raise ValueError(f"not a binary string: {bits!r}")


def binary_to_decimal(bits):
    """Return the value of a string of binary digits; an empty string is 0."""
    _check_bits(bits)
    return sum(1 << place for place, bit in enumerate(reversed(bits)) if bit == "1")


def binary_to_octal(bits):
    """Return the octal digits of a binary string, taken three bits at a time."""
    _check_bits(bits)
    padded = "0" * (-len(bits) % 3) + bits
    groups = zip(*[iter(padded)] * 3)
    return "".join(str(4 * int(a) + 2 * int(b) + int(c)) for a, b, c in groups)


def decimal_to_binary(n):
    """Return the binary digits of a non-negative integer; zero has no digits."""
    if n < 0:
        raise ValueError("number must not be negative")
    return format(n, "b") if n else ""


def decimal_to_octal(n):
    """Return an integer whose decimal digits are the octal digits of ``n``."""
    sign = -1 if n < 0 else 1
    return sign * int(format(abs(n), "o"))


def octal_to_decimal(octal):
    """Read an integer whose decimal digits are octal digits and return its value."""
    sign = -1 if octal < 0 else 1
    digits = str(abs(octal))
    if any(digit in "89" for digit in digits):
        raise ValueError(f"not an octal number: {octal}")
    return sign * int(digits, 8)


def octal_to_binary(octal):
    """Return an integer whose decimal digits are the binary digits of an octal number."""
    decimal = octal_to_decimal(octal)
    sign = -1 if decimal < 0 else 1
    return sign * int(format(abs(decimal), "b"))


def number_to_words(digits):
    """Spell out a number of up to four digits given as a string."""
    if not digits.isdigit() and digits:
        raise ValueError(f"not a string of digits: {digits!r}")
    if len(digits) > 4:
        raise ValueError("at most four digits are supported")
    if not digits:
        return ""
    if len(digits) == 1:
        return _SINGLE_DIGITS[int(digits)]

    words = []
    for position, char in enumerate(digits):
        remaining = len(digits) - position
        digit = int(char)
        if remaining > 2:
            if digit:
                words += [_SINGLE_DIGITS[digit], _TENS_POWERS[remaining - 3]]
            continue
        units = int(digits[position + 1])
        if digit == 1:
            words.append(_TEENS[units])
        else:
            if digit:
                words.append(_TENS_MULTIPLES[digit])
            if units:
                words.append(_SINGLE_DIGITS[units])
        break
    return " ".join(words)


def roman_to_int(s):
    """Return the value of a Roman numeral."""
    try:
        values = [_ROMAN[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral digit: {exc.args[0]!r}") from None
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def invert_color(rgb):
    """Return the complement of each 0-255 channel."""
    return [255 - channel for channel in rgb]