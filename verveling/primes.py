"""Primality testing by trial division and the sieve of Eratosthenes."""

from math import isqrt


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, by trial division up to its square root."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def sieve(n: int) -> list[int]:
    """Return every prime strictly below ``n``, in increasing order."""
    if n < 0:
        raise ValueError("sieve bound must be non-negative")
    if n < 2:
        return []
    flags = bytearray([1]) * (n + 1)
    flags[0] = flags[1] = 0
    for i in range(2, isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return [number for number, flag in enumerate(flags[:n]) if flag]