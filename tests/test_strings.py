from collections import Counter
from itertools import groupby

import pytest

from algonotes.strings import (
    count_vowels,
    frequency_sort,
    infix_to_postfix,
    is_scramble,
    lcs_length,
    precedence,
    remove_vowels,
    shortest_common_supersequence_length,
    sum_of_integers,
)

TEXTS = ["take u forward", "AEIOU aeiou", "rhythm", "", "Programming In Style"]


def test_remove_vowels_source_example():
    assert remove_vowels("take u forward") == "tk  frwrd"


@pytest.mark.parametrize("text", TEXTS)
def test_remove_vowels_leaves_no_vowels(text):
    result = remove_vowels(text)
    assert count_vowels(result) == 0
    assert len(text) - len(result) == count_vowels(text)


def test_count_vowels_all_vowels():
    assert count_vowels("AEIOUaeiou") == len("AEIOUaeiou")


def test_sum_of_integers_source_example():
    assert sum_of_integers("1a30z67") == 98


@pytest.mark.parametrize("n", [0, 7, 1234, 98765])
def test_sum_of_integers_single_run(n):
    assert sum_of_integers(str(n)) == n


def test_sum_of_integers_without_digits_is_zero():
    assert sum_of_integers("abc def") == 0


def test_sum_of_integers_is_additive_over_separator():
    assert sum_of_integers("12x34") == sum_of_integers("12") + sum_of_integers("34")


@pytest.mark.parametrize("s", ["tree", "cccaaa", "Aabb", "mississippi", ""])
def test_frequency_sort_is_grouped_permutation(s):
    result = frequency_sort(s)
    assert Counter(result) == Counter(s)
    runs = [(char, len(list(group))) for char, group in groupby(result)]
    lengths = [length for _, length in runs]
    assert lengths == sorted(lengths, reverse=True)
    assert len({char for char, _ in runs}) == len(runs)


def test_frequency_sort_ties_by_descending_character():
    assert frequency_sort("ab") == "ba"


def test_precedence_ordering():
    assert precedence("^") > precedence("*") == precedence("/")
    assert precedence("/") > precedence("+") == precedence("-")
    assert precedence("+") > precedence("(") == -1


def test_infix_to_postfix_source_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


@pytest.mark.parametrize("expr", ["a+b*(c^d-e)^(f+g*h)-i", "(a+b)*c", "x/y-z"])
def test_infix_to_postfix_keeps_operands_and_drops_parentheses(expr):
    result = infix_to_postfix(expr)
    assert [c for c in result if c.isalpha()] == [c for c in expr if c.isalpha()]
    assert "(" not in result and ")" not in result
    assert len(result) == len([c for c in expr if c not in "()"])


@pytest.mark.parametrize("s", ["great", "abcde", "a", ""])
def test_string_is_scramble_of_itself(s):
    assert is_scramble(s, s) is True


@pytest.mark.parametrize("s", ["great", "abcdefg", "ab"])
def test_reverse_is_scramble(s):
    assert is_scramble(s, s[::-1]) is True


def test_scramble_needs_same_letters():
    assert is_scramble("abc", "abd") is False
    assert is_scramble("abc", "ab") is False


@pytest.mark.parametrize("a, b", [("great", "rgeat"), ("abcde", "caebd"), ("abcd", "bdac")])
def test_scramble_is_symmetric(a, b):
    assert is_scramble(a, b) == is_scramble(b, a)


@pytest.mark.parametrize("x", ["AGGTAB", "GXTXAYB", "abc"])
def test_lcs_with_itself_and_empty(x):
    assert lcs_length(x, x) == len(x)
    assert lcs_length(x, "") == 0


@pytest.mark.parametrize("x, y", [("AGGTAB", "GXTXAYB"), ("abcdef", "acf"), ("abc", "xyz")])
def test_lcs_bounds_and_symmetry(x, y):
    assert lcs_length(x, y) == lcs_length(y, x)
    assert 0 <= lcs_length(x, y) <= min(len(x), len(y))


def test_lcs_of_subsequence_is_its_length():
    x = "AGGTABGXTXAYB"
    assert lcs_length(x, x[::2]) == len(x[::2])


@pytest.mark.parametrize("x, y", [("AGGTAB", "GXTXAYB"), ("geek", "eke"), ("abc", "")])
def test_supersequence_bounds(x, y):
    length = shortest_common_supersequence_length(x, y)
    assert max(len(x), len(y)) <= length <= len(x) + len(y)
    assert length == len(x) + len(y) - lcs_length(x, y)


def test_supersequence_of_identical_strings():
    assert shortest_common_supersequence_length("AGGTAB", "AGGTAB") == len("AGGTAB")