# verveling

A collection of small algorithms and Project Euler solutions, written as plain
functions without dependencies outside the standard library.

## Installing

```
pip install .
pip install ".[test]"   # with the test tools
```

## What is inside

- `verveling.primes`: `is_prime(n)` by trial division and `sieve(n)`, which
  returns every prime strictly below `n`.
- `verveling.bignum`: `multiply_digits(factor, digits)` multiplies a decimal
  digit string by an integer; `factorial_digits(n)` returns `n!` as a string.
- `verveling.modpow`: `binpow(a, b, mod)` for modular exponentiation by
  repeated squaring (the modulus defaults to 1000000007), and the `main`
  function behind the `verveling-modpow` command.
- `verveling.knight`: `knight_tour(size)` returns a board numbering the squares
  of a knight's tour from the top-left corner, or `None` if there is none;
  `format_board` renders it.
- `verveling.matrix`: matrix `multiply` (raises `ValueError` when the
  dimensions do not match), `format_matrix` and `spiral_order`.
- `verveling.polynomial`: `multiply` of coefficient lists and
  `format_polynomial`, one `x^i = c` line per coefficient.
- `verveling.combinatorics`: `subsets` (a generator of every subsequence),
  `is_valid`, `balanced_parentheses` (a generator), `sum_to` and
  `sum_of_squares`.
- `verveling.euler`: Project Euler problems as functions whose limits are
  parameters, with the problem's own limits as defaults:
  - `sequences`: multiples of 3 or 5, even Fibonacci terms, Collatz chains,
    lattice paths, lexicographic permutations, long Fibonacci numbers, spiral
    diagonals, coin sums, right-triangle perimeters, bouncy numbers and square
    remainders.
  - `divisors`: largest prime factor, divisor counts, triangular numbers,
    amicable and abundant numbers, digit-cancelling fractions, radicals and
    neighbours with equal divisor counts.
  - `digits`: palindromes, digit sums, distinct powers, digit powers and
    factorials, pandigital products and multiples, double-base palindromes,
    Champernowne's constant, palindromic sums of squares and reversible
    numbers.
  - `prime_problems`: prime sums, quadratic primes, circular primes,
    pandigital primes, prime square remainders and semiprimes.
  - `puzzles`: grid products, number letter counts, triangle path sums,
    Sundays on the first of the month and recurring decimal cycles.

```python
from verveling.primes import sieve
from verveling.modpow import binpow
from verveling.combinatorics import balanced_parentheses
from verveling.euler.sequences import multiples_of_3_or_5

sieve(10)                      # [2, 3, 5, 7]
binpow(2, 10, 10**9 + 7)       # 1024
list(balanced_parentheses(2))  # ['(())', '()()']
multiples_of_3_or_5(10)        # 23
```

## Command line

`verveling-modpow` reads a count `t` followed by `t` pairs `a b` from standard
input and prints `a^b mod 1000000007` for each pair. `--mod` sets another
positive modulus.

```
printf '2\n2 10\n3 4\n' | verveling-modpow
verveling-modpow --mod 97 < queries.txt
```

## What it does not do

- There is no command for the Project Euler problems; call the functions from
  Python.
- No problem data is bundled. `max_grid_product`, `max_triangle_path` and
  `first_digits_of_sum` take the grid, triangle or list of numbers as an
  argument.
- Some defaults are the full problem sizes and take a long time in pure
  Python, for example `reversible_count()` or `equal_divisor_neighbours()`;
  pass smaller limits to experiment.

## Tests

```
pytest
```