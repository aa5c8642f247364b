"""Arbitrary-length decimal multiplication on digit strings."""

from functools import reduce

_DIGITS = frozenset("0123456789")


def multiply_digits(factor: int, digits: str) -> str:
    """Multiply the decimal number in ``digits`` by ``factor``, digit by digit."""
    if factor < 0:
        raise ValueError("factor must be non-negative")
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"not a decimal number: {digits!r}")
    result = []
    carry = 0
    for ch in reversed(digits):
        carry += int(ch) * factor
        result.append(carry % 10)
        carry //= 10
    while carry:
        result.append(carry % 10)
        carry //= 10
    text = "".join(str(d) for d in reversed(result)).lstrip("0")
    return text or "0"


def factorial_digits(n: int) -> str:
    """Return ``n!`` as a decimal string."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return reduce(lambda acc, k: multiply_digits(k, acc), range(1, n + 1), "1")