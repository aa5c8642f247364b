"""Sequence, counting and recurrence problems from Project Euler."""

from itertools import count
from math import factorial

MOD = 1_000_000_007
UK_COINS = (1, 2, 5, 10, 20, 50, 100, 200)


def sum_of_multiples(limit: int, step: int) -> int:
    """Return the sum of the positive multiples of ``step`` up to and including ``limit``."""
    if step <= 0:
        raise ValueError("step must be positive")
    if limit < 0:
        raise ValueError("limit must be non-negative")
    terms = limit // step
    return terms * (terms + 1) // 2 * step


def multiples_of_3_or_5(limit: int = 1000) -> int:
    """Return the sum of the numbers below ``limit`` that are multiples of 3 or 5."""
    top = max(limit - 1, 0)
    return (
        sum_of_multiples(top, 3)
        + sum_of_multiples(top, 5)
        - sum_of_multiples(top, 15)
    )


def even_fibonacci_sum(limit: int = 4_000_000) -> int:
    """Return the sum of the even Fibonacci terms (1, 2, 3, 5, ...) not above ``limit``."""
    total = 0
    current, following = 1, 2
    while current <= limit:
        if current % 2 == 0:
            total += current
        current, following = following, current + following
    return total


def longest_collatz_start(limit: int = 1_000_000) -> int:
    """Return the start in ``2..limit`` with the longest Collatz chain; ties keep the smallest."""
    if limit < 2:
        raise ValueError("limit must be at least 2")
    lengths = {1: 1}
    best_start, best_length = 0, 0
    for start in range(2, limit + 1):
        steps = 0
        value = start
        while True:
            value = value * 3 + 1 if value & 1 else value // 2
            steps += 1
            if value in lengths:
                lengths[start] = steps + lengths[value]
                break
        if lengths[start] > best_length:
            best_start, best_length = start, lengths[start]
    return best_start


def lattice_paths(size: int = 20) -> int:
    """Return the number of right/down routes through a ``size`` by ``size`` grid."""
    if size < 0:
        raise ValueError("grid size must be non-negative")
    row = [1] * (size + 1)
    for _ in range(size):
        for j in range(1, size + 1):
            row[j] += row[j - 1]
    return row[size]


def lexicographic_permutation(items=range(10), position: int = 1_000_000) -> list:
    """Return the ``position``-th (1-based) lexicographic permutation of distinct ``items``."""
    pool = sorted(items)
    if len(set(pool)) != len(pool):
        raise ValueError("items must be distinct")
    total = factorial(len(pool))
    if not 1 <= position <= total:
        raise ValueError(f"position must lie between 1 and {total}")
    index = position - 1
    result = []
    for remaining in range(len(pool) - 1, -1, -1):
        choice, index = divmod(index, factorial(remaining))
        result.append(pool.pop(choice))
    return result


def first_fibonacci_with_digits(digits: int = 1000) -> int:
    """Return the index of the first Fibonacci number (F1 = F2 = 1) with ``digits`` digits."""
    if digits < 1:
        raise ValueError("digit count must be positive")
    threshold = 10 ** (digits - 1)
    index = 1
    current, following = 1, 1
    while current < threshold:
        current, following = following, current + following
        index += 1
    return index


def spiral_diagonal_sum(layers: int = 500) -> int:
    """Return the sum of the diagonals of a number spiral with ``layers`` rings around 1."""
    if layers < 0:
        raise ValueError("number of layers must be non-negative")
    return 1 + sum(4 * (2 * ring + 1) ** 2 - 12 * ring for ring in range(1, layers + 1))


def coin_combinations(coins=UK_COINS, target: int = 200, mod: int = MOD) -> int:
    """Return the number of ways to make ``target`` from ``coins``, modulo ``mod``."""
    if target < 0:
        raise ValueError("target must be non-negative")
    if mod <= 0:
        raise ValueError("modulus must be positive")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % mod
    return ways[target]


def _right_triangle_count(perimeter: int) -> int:
    count_ = 0
    for a in range(1, perimeter):
        numerator = perimeter * perimeter - 2 * perimeter * a
        denominator = 2 * (perimeter - a)
        if numerator % denominator == 0 and a < numerator // denominator <= perimeter:
            count_ += 1
    return count_


def max_right_triangles(limit: int = 1000) -> tuple[int, int]:
    """Return ``(solutions, perimeter)`` for the perimeter up to ``limit`` with most right triangles."""
    best = (0, 0)
    for perimeter in range(1, limit + 1):
        solutions = _right_triangle_count(perimeter)
        if solutions > best[0]:
            best = (solutions, perimeter)
    return best


def is_bouncy(n: int) -> bool:
    """Return whether the digits of ``n`` neither only rise nor only fall."""
    if n < 0:
        raise ValueError("number must be non-negative")
    digits = str(n)
    pairs = list(zip(digits, digits[1:]))
    return any(a < b for a, b in pairs) and any(a > b for a, b in pairs)


def least_bouncy_proportion(percent: int = 99) -> int:
    """Return the least number at which exactly ``percent`` per cent of numbers are bouncy."""
    if not 0 <= percent < 100:
        raise ValueError("percentage must lie in [0, 100)")
    bouncy = 0
    for n in count(10):
        if is_bouncy(n):
            bouncy += 1
        if bouncy * 100 == percent * n:
            return n
    raise AssertionError("unreachable")


def max_square_remainder_sum(limit: int = 1000) -> int:
    """Return the sum over ``3 <= a <= limit`` of the largest remainder of (a-1)^n + (a+1)^n mod a^2."""
    return sum(2 * a * ((a - 1) // 2) for a in range(3, limit + 1))