import math

import pytest

from verveling.combinatorics import (
    balanced_parentheses,
    is_valid,
    subsets,
    sum_of_squares,
    sum_to,
)


def test_subsets_order():
    assert list(subsets("ABC")) == ["", "A", "AB", "ABC", "AC", "B", "BC", "C"]


@pytest.mark.parametrize("text", ["", "X", "ABCD", "abcdefg"])
def test_subsets_count_and_uniqueness(text):
    result = list(subsets(text))
    assert len(result) == 2 ** len(text)
    assert len(set(result)) == len(result)


def test_subsets_are_subsequences():
    text = "PQRST"
    for sub in subsets(text):
        remaining = iter(text)
        assert all(ch in remaining for ch in sub)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5])
def test_balanced_count_is_catalan(n):
    assert len(list(balanced_parentheses(n))) == math.comb(2 * n, n) // (n + 1)


def test_balanced_three_pairs():
    assert list(balanced_parentheses(3)) == [
        "((()))",
        "(()())",
        "(())()",
        "()(())",
        "()()()",
    ]


def test_generated_strings_are_valid_and_sorted():
    result = list(balanced_parentheses(4))
    assert all(is_valid(s) and len(s) == 8 for s in result)
    assert result == sorted(result)


def test_invalid_strings():
    assert not is_valid(")(")
    assert not is_valid("(()")


def test_balanced_rejects_negative():
    with pytest.raises(ValueError):
        list(balanced_parentheses(-1))


def test_sum_to_ten():
    assert sum_to(10) == 55


@pytest.mark.parametrize("n", [0, 1, 2, 17, 1000])
def test_sum_to_matches_sum(n):
    assert sum_to(n) == sum(range(n + 1))


@pytest.mark.parametrize("n", [0, 1, 2, 10, 99, 1000])
def test_sum_of_squares_matches_sum(n):
    assert sum_of_squares(n) == sum(k * k for k in range(n + 1))