"""Factorisation and divisor-function problems from Project Euler."""

from fractions import Fraction
from math import gcd, prod


def _factorize(n: int) -> dict[int, int]:
    if n < 1:
        raise ValueError("number must be positive")
    factors: dict[int, int] = {}
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            n //= divisor
        divisor += 1
    if n > 1:
        factors[n] = factors.get(n, 0) + 1
    return factors


def largest_prime_factor(n: int) -> int:
    """Return the largest prime factor of ``n``."""
    if n < 2:
        raise ValueError("number must be at least 2")
    return max(_factorize(n))


def divisor_count(n: int) -> int:
    """Return the number of positive divisors of ``n``."""
    return prod(exponent + 1 for exponent in _factorize(n).values())


def triangular_number(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    return n * (n + 1) // 2


def first_triangle_with_divisors(minimum: int = 500) -> int:
    """Return the first triangular number with more than ``minimum`` divisors."""
    index = 1
    while divisor_count(triangular_number(index)) <= minimum:
        index += 1
    return triangular_number(index)


def proper_divisor_sum(n: int) -> int:
    """Return the sum of the divisors of ``n`` smaller than ``n``."""
    sigma = prod(
        (prime ** (exponent + 1) - 1) // (prime - 1)
        for prime, exponent in _factorize(n).items()
    )
    return sigma - n


def amicable_sum(limit: int = 10000) -> int:
    """Return the sum of the amicable partners of the numbers ``1..limit``."""
    total = 0
    for n in range(1, limit + 1):
        partner = proper_divisor_sum(n)
        if partner and partner != n and proper_divisor_sum(partner) == n:
            total += partner
    return total


def non_abundant_sum(limit: int = 28123) -> int:
    """Return the sum of ``0..limit`` that are not the sum of two abundant numbers."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    abundant = [n for n in range(1, limit + 1) if proper_divisor_sum(n) > n]
    expressible = bytearray(limit + 1)
    for i, first in enumerate(abundant):
        for second in abundant[i:]:
            total = first + second
            if total > limit:
                break
            expressible[total] = 1
    return sum(n for n, flag in enumerate(expressible) if not flag)


def _cancelled(i: int, j: int) -> tuple[int, int] | None:
    ti, ui = divmod(i, 10)
    tj, uj = divmod(j, 10)
    if ti == tj and ti and uj:
        return ui, uj
    if ui == tj and ui and uj:
        return ti, uj
    if ui == uj and ui and tj:
        return ti, tj
    if uj == ti and ti and tj:
        return ui, tj
    return None


def curious_fraction_denominator() -> int:
    """Return the reduced denominator of the product of the digit-cancelling fractions."""
    numerator = denominator = 1
    for i in range(10, 100):
        for j in range(i + 1, 100):
            cancelled = _cancelled(i, j)
            if cancelled and Fraction(*cancelled) == Fraction(i, j):
                numerator *= cancelled[0]
                denominator *= cancelled[1]
    return denominator // gcd(denominator, numerator)


def radical(n: int) -> int:
    """Return the product of the distinct prime factors of ``n``."""
    return prod(_factorize(n))


def sorted_radicals(limit: int = 100000) -> list[tuple[int, int]]:
    """Return ``(n, radical(n))`` for ``1..limit``, ordered by radical then by ``n``."""
    pairs = [(n, radical(n)) for n in range(1, limit + 1)]
    return sorted(pairs, key=lambda pair: pair[1])


def equal_divisor_neighbours(limit: int = 10**7) -> int:
    """Count ``1 <= n < limit`` for which ``n`` and ``n + 1`` have equally many divisors."""
    if limit < 1:
        return 0
    counts = [0] * (limit + 1)
    for divisor in range(1, limit + 1):
        for multiple in range(divisor, limit + 1, divisor):
            counts[multiple] += 1
    return sum(1 for a, b in zip(counts[1:limit], counts[2:]) if a == b)