"""Grid, word, calendar and fraction puzzles from Project Euler."""

from calendar import monthrange
from datetime import date
from math import prod

_UNITS = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

# (row step, column step): down, right, down-right, up-right.
_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (-1, 1))


def max_grid_product(grid, length: int = 4) -> int:
    """Return the largest product of ``length`` adjacent grid values in a line, at least 0."""
    if length < 1:
        raise ValueError("length must be positive")
    rows = [list(row) for row in grid]
    if not rows:
        return 0
    cols = len(rows[0])
    if any(len(row) != cols for row in rows):
        raise ValueError("grid rows must have equal length")
    span = length - 1
    best = 0
    for r in range(len(rows)):
        for c in range(cols):
            for dr, dc in _DIRECTIONS:
                end_r, end_c = r + dr * span, c + dc * span
                if 0 <= end_r < len(rows) and end_c < cols:
                    value = prod(rows[r + dr * k][c + dc * k] for k in range(length))
                    best = max(best, value)
    return best


def _spell(n: int) -> str:
    if n == 1000:
        return "onethousand"
    if n >= 100:
        hundreds, rest = divmod(n, 100)
        words = _UNITS[hundreds] + "hundred"
        return words + ("and" + _spell(rest) if rest else "")
    if n >= 20:
        return _TENS[n // 10] + _UNITS[n % 10]
    return _UNITS[n]


def letter_count(n: int) -> int:
    """Return the number of letters in ``n`` written out in British English, ``0 <= n <= 1000``."""
    if not 0 <= n <= 1000:
        raise ValueError("number must lie between 0 and 1000")
    return len(_spell(n))


def number_letter_total(limit: int = 1000) -> int:
    """Return the letters used writing out every number ``1..limit``."""
    return sum(letter_count(n) for n in range(1, limit + 1))


def max_triangle_path(rows) -> int:
    """Return the largest top-to-bottom path sum through a number triangle."""
    rows = [list(row) for row in rows]
    if not rows:
        raise ValueError("triangle is empty")
    for i, row in enumerate(rows):
        if len(row) != i + 1:
            raise ValueError(f"row {i} must hold {i + 1} values")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [value + max(left, right) for value, left, right in zip(row, best, best[1:])]
    return best[0]


def count_month_sundays(first_year: int = 1901, last_year: int = 2000) -> int:
    """Count firsts of the month falling on a Sunday, from February of
    ``first_year`` to January after ``last_year``."""
    if last_year < first_year:
        raise ValueError("last year must not precede the first year")
    weekday = date(first_year, 1, 1).isoweekday() % 7  # Sunday is 0
    total = 0
    for year in range(first_year, last_year + 1):
        for month in range(1, 13):
            weekday = (weekday + monthrange(year, month)[1]) % 7
            if weekday == 0:
                total += 1
    return total


def recurring_cycle_length(n: int) -> int:
    """Return the length of the recurring cycle of the decimal ``1/n``; 0 if it terminates."""
    if n < 1:
        raise ValueError("denominator must be positive")
    seen: dict[int, int] = {}
    remainder = 1 % n
    position = 0
    while remainder and remainder not in seen:
        seen[remainder] = position
        remainder = remainder * 10 % n
        position += 1
    return position - seen[remainder] if remainder else 0


def longest_recurring_cycle(limit: int = 1000) -> tuple[int, int]:
    """Return ``(length, d)`` for the ``d`` in ``1..limit`` whose ``1/d`` has the longest cycle."""
    best = (0, 0)
    for d in range(1, limit + 1):
        length = recurring_cycle_length(d)
        if length > best[0]:
            best = (length, d)
    return best