"""Modular exponentiation by repeated squaring, with a small query reader."""

import argparse
import sys

MOD = 1_000_000_007


def binpow(a: int, b: int, mod: int = MOD) -> int:
    """Return ``a ** b`` modulo ``mod``; a non-positive exponent gives ``1 % mod``."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    a %= mod
    while b > 0:
        if b & 1:
            result = result * a % mod
        a = a * a % mod
        b >>= 1
    return result % mod


def main(argv=None) -> int:
    """Read a query count and that many ``a b`` pairs from stdin; print ``a^b mod m``."""
    parser = argparse.ArgumentParser(
        prog="verveling-modpow",
        description="Compute a^b modulo a prime for each query read from stdin.",
    )
    parser.add_argument("--mod", type=int, default=MOD, help="modulus (default 1e9+7)")
    args = parser.parse_args(argv)
    if args.mod <= 0:
        parser.error("modulus must be positive")

    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must consist of integers")
    if not numbers:
        parser.error("missing query count")
    count, *rest = numbers
    if count < 0 or len(rest) < 2 * count:
        parser.error("not enough numbers for the announced queries")

    pairs = rest[: 2 * count]
    for a, b in zip(pairs[::2], pairs[1::2]):
        print(binpow(a, b, args.mod))
    return 0


if __name__ == "__main__":
    sys.exit(main())