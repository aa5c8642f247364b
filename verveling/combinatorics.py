"""Subsets, balanced parentheses and closed-form sums."""

from collections.abc import Iterator
from itertools import product


def subsets(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text`` in depth-first order, starting with ''."""

    def extend(prefix: str, start: int) -> Iterator[str]:
        yield prefix
        for i, ch in enumerate(text[start:], start):
            yield from extend(prefix + ch, i + 1)

    yield from extend("", 0)


def is_valid(text: str) -> bool:
    """Return whether ``text`` is balanced; every character other than ')' opens."""
    depth = 0
    for ch in text:
        if ch == ")":
            if depth == 0:
                return False
            depth -= 1
        else:
            depth += 1
    return depth == 0


def balanced_parentheses(n: int) -> Iterator[str]:
    """Yield every balanced string of ``n`` pairs, '(' ordered before ')'."""
    if n < 0:
        raise ValueError("number of pairs must be non-negative")
    for chars in product("()", repeat=2 * n):
        candidate = "".join(chars)
        if is_valid(candidate):
            yield candidate


def sum_to(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    return n * (n + 1) // 2


def sum_of_squares(n: int) -> int:
    """Return ``1^2 + 2^2 + ... + n^2``."""
    return n * (2 * n + 1) * (n + 1) // 6