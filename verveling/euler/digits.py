"""Digit, palindrome and pandigital problems from Project Euler."""

from math import factorial, isqrt, prod

from verveling.bignum import factorial_digits

_PANDIGITAL_LOW = 123456789
_PANDIGITAL_HIGH = 987654321
_DIGIT_FACTORIALS = tuple(factorial(d) for d in range(10))


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def _require_non_negative(n: int, what: str = "number") -> None:
    if n < 0:
        raise ValueError(f"{what} must be non-negative")


def is_palindrome_number(n: int) -> bool:
    """Return whether the decimal digits of ``n`` read the same both ways."""
    _require_non_negative(n)
    return _is_palindrome(str(n))


def largest_palindrome_product(low: int = 100, high: int = 999) -> int:
    """Return the largest palindrome ``i * j`` with both factors in ``low..high``, or 0."""
    if low < 0 or high < low:
        raise ValueError("factor range must be non-negative and non-empty")
    best = 0
    for i in range(high, low - 1, -1):
        if i * high <= best:
            break
        for j in range(high, i - 1, -1):
            candidate = i * j
            if candidate <= best:
                break
            if is_palindrome_number(candidate):
                best = candidate
    return best


def first_digits_of_sum(numbers, count: int = 10) -> str:
    """Return the first ``count`` digits of the sum of the decimal strings in ``numbers``."""
    if count < 1:
        raise ValueError("digit count must be positive")
    total = 0
    for number in numbers:
        if not number or not number.isdecimal() or not number.isascii():
            raise ValueError(f"not a decimal number: {number!r}")
        total += int(number)
    return str(total)[:count]


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``."""
    _require_non_negative(n)
    return sum(int(d) for d in str(n))


def factorial_digit_sum(n: int = 100) -> int:
    """Return the sum of the decimal digits of ``n!``."""
    return sum(int(d) for d in factorial_digits(n))


def distinct_powers(base_limit: int = 100, exponent_count: int = 100) -> int:
    """Count the distinct values ``a ** e`` for ``2 <= a <= base_limit`` and ``0 <= e < exponent_count``."""
    _require_non_negative(exponent_count, "exponent count")
    return len(
        {a**e for a in range(2, base_limit + 1) for e in range(exponent_count)}
    )


def digit_power_sum(power: int = 5, limit: int = 999999) -> int:
    """Return the sum of ``2..limit`` that equal the sum of their digits raised to ``power``."""
    _require_non_negative(power, "power")
    powers = [d**power for d in range(10)]
    return sum(
        n for n in range(2, limit + 1) if sum(powers[int(d)] for d in str(n)) == n
    )


def digit_factorial_sum(limit: int = 1_000_000) -> int:
    """Return the sum of ``3..limit`` that equal the sum of the factorials of their digits."""
    return sum(
        n
        for n in range(3, limit + 1)
        if sum(_DIGIT_FACTORIALS[int(d)] for d in str(n)) == n
    )


def is_pandigital(n: int) -> bool:
    """Return whether ``n`` uses each digit 1 to 9 exactly once and no zero."""
    _require_non_negative(n)
    return sorted(str(n)) == list("123456789")


def concatenate(a: int, b: int) -> int:
    """Append ``b`` to ``a``, shifting ``a`` by the least power of ten, at least 10, not below ``b``."""
    if a < 0 or b < 0:
        raise ValueError("numbers must be non-negative")
    scale = 10
    while scale < b:
        scale *= 10
    return a * scale + b


def _has_pandigital_identity(n: int) -> bool:
    for i in range(2, isqrt(n) + 1):
        if n % i == 0 and n // i != i:
            identity = concatenate(concatenate(i, n // i), n)
            if is_pandigital(identity):
                return True
    return False


def pandigital_product_sum(limit: int = 10000) -> int:
    """Return the sum of products in ``1..limit`` whose identity ``a * b = n`` is 1-9 pandigital."""
    return sum(n for n in range(1, limit + 1) if _has_pandigital_identity(n))


def largest_pandigital_multiple(limit: int = 9999) -> int:
    """Return the largest 1-9 pandigital concatenation of ``i*1, i*2, ...`` for ``i <= limit``."""
    best = 0
    for i in range(1, limit + 1):
        joined = 0
        for j in range(1, 14):
            joined = concatenate(joined, i * j)
            if joined > _PANDIGITAL_HIGH:
                break
            if joined >= _PANDIGITAL_LOW and is_pandigital(joined):
                best = max(best, joined)
    return best


def to_binary(n: int) -> str:
    """Return the binary digits of ``n`` without a prefix."""
    _require_non_negative(n)
    return format(n, "b")


def double_base_palindrome_sum(limit: int = 1_000_000) -> int:
    """Return the sum of ``1..limit-1`` that are palindromes in base 10 and base 2."""
    return sum(
        n
        for n in range(1, limit)
        if _is_palindrome(str(n)) and _is_palindrome(to_binary(n))
    )


def champernowne_product(exponents=range(7)) -> int:
    """Return the product of the digits ``d(10**e)`` of Champernowne's constant."""
    positions = []
    for exponent in exponents:
        _require_non_negative(exponent, "exponent")
        positions.append(10**exponent)
    if not positions:
        return 1
    needed = max(positions)
    # A leading "0" makes string index k the k-th fractional digit.
    pieces = []
    length = 0
    number = 0
    while length <= needed:
        piece = str(number)
        pieces.append(piece)
        length += len(piece)
        number += 1
    digits = "".join(pieces)
    return prod(int(digits[position]) for position in positions)


def palindromic_square_sums(limit: int = 10**8) -> int:
    """Return the sum of the distinct palindromes below ``limit`` that are sums of two or more consecutive squares."""
    found: set[int] = set()
    start = 1
    while start * start + (start + 1) ** 2 < limit:
        total = start * start
        k = start + 1
        while True:
            total += k * k
            if total >= limit:
                break
            if _is_palindrome(str(total)):
                found.add(total)
            k += 1
        start += 1
    return sum(found)


def is_reversible(n: int) -> bool:
    """Return whether ``n + reverse(n)`` has only odd digits; numbers ending in 0 never are."""
    _require_non_negative(n)
    if n % 10 == 0:
        return False
    total = n + int(str(n)[::-1])
    return all(int(d) % 2 for d in str(total))


def reversible_count(limit: int = 10**9 - 1) -> int:
    """Count the reversible numbers in ``1..limit``."""
    return sum(1 for n in range(1, limit + 1) if is_reversible(n))