"""Classic algorithms: primes, big numbers, matrices, polynomials, combinatorics."""

__version__ = "0.1.0"