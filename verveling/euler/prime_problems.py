"""Prime-number problems from Project Euler."""

from bisect import bisect_right
from itertools import permutations

from verveling.primes import is_prime, sieve


def prime_sum(left: int = 1, right: int = 2_000_000) -> int:
    """Return the sum of the primes ``p`` with ``left <= p <= right``."""
    if right < 2 or right < left:
        return 0
    return sum(p for p in sieve(right + 1) if p >= left)


def _consecutive_primes(a: int, b: int) -> int:
    n = 0
    while is_prime(n * n + a * n + b):
        n += 1
    return n


def quadratic_primes_product(
    a_range=range(-999, 1000), b_range=range(-1000, 1001)
) -> int:
    """Return ``a * b`` for the ``n^2 + a*n + b`` giving the longest run of primes from ``n = 0``.

    Ties keep the first pair found; with no run at all the result is 0.
    """
    b_values = list(b_range)
    best_length, best_product = 0, 0
    for a in a_range:
        for b in b_values:
            length = _consecutive_primes(a, b)
            if length > best_length:
                best_length, best_product = length, a * b
    return best_product


def _rotations(n: int):
    text = str(n)
    return (int(text[k:] + text[:k]) for k in range(len(text)))


def circular_prime_count(limit: int = 1_000_000) -> int:
    """Count the primes up to ``limit`` whose every digit rotation is a prime up to ``limit``."""
    if limit < 2:
        return 0
    primes = sieve(limit + 1)
    prime_set = set(primes)
    total = 1  # the prime 2
    for p in primes[1:]:
        if any(d in "02468" for d in str(p)):
            continue
        if all(rotation in prime_set for rotation in _rotations(p)):
            total += 1
    return total


def largest_pandigital_prime(max_digits: int = 9) -> int:
    """Return the largest prime using each digit 1..n exactly once for some ``n <= max_digits``, or 0."""
    if not 0 <= max_digits <= 9:
        raise ValueError("number of digits must lie between 0 and 9")
    for length in range(max_digits, 0, -1):
        # Every arrangement is then a multiple of 3 larger than 3.
        if length > 1 and (length * (length + 1) // 2) % 3 == 0:
            continue
        for digits in permutations("987654321"[9 - length :]):
            candidate = int("".join(digits))
            if is_prime(candidate):
                return candidate
    return 0


def _first_primes(count: int) -> list[int]:
    if count < 1:
        return []
    bound = 16
    while True:
        primes = sieve(bound)
        if len(primes) >= count:
            return primes[:count]
        bound *= 2


def prime_square_remainder(threshold: int = 10**10, count: int = 30000) -> int | None:
    """Return the least odd ``n >= 3`` with ``2 * n * p(n - 1) >= threshold``.

    ``p(k)`` is the k-th prime; only the first ``count`` primes are searched,
    and None is returned when none of them qualifies.
    """
    primes = _first_primes(count)
    for index in range(1, len(primes), 2):
        if 2 * primes[index] * (index + 2) >= threshold:
            return index + 2
    return None


def semiprime_count(limit: int = 10**8) -> int:
    """Count the numbers below ``limit`` with exactly two prime factors, counted with multiplicity."""
    if limit <= 4:
        return 0
    top = (limit - 1) // 2
    primes = sieve(top + 1)
    total = 0
    for i, p in enumerate(primes):
        if p * p >= limit:
            break
        total += bisect_right(primes, (limit - 1) // p) - i
    return total