import pytest

from verveling.euler.puzzles import (
    count_month_sundays,
    letter_count,
    longest_recurring_cycle,
    max_grid_product,
    max_triangle_path,
    number_letter_total,
    recurring_cycle_length,
)

SAMPLE_GRID = [
    [8, 2, 22, 97, 38],
    [49, 49, 99, 40, 17],
    [81, 49, 31, 73, 55],
    [52, 70, 95, 23, 4],
    [22, 31, 16, 71, 51],
]


def test_grid_all_ones():
    assert max_grid_product([[1] * 6 for _ in range(6)]) == 1


def test_grid_finds_row_of_fives():
    grid = [[1] * 6 for _ in range(6)]
    grid[3][1:5] = [5, 5, 5, 5]
    assert max_grid_product(grid) == 5**4


def test_grid_finds_anti_diagonal():
    grid = [[1] * 5 for _ in range(5)]
    for k in range(4):
        grid[4 - k][k] = 3
    assert max_grid_product(grid) == 3**4


def test_grid_transpose_invariant():
    transposed = [list(col) for col in zip(*SAMPLE_GRID)]
    assert max_grid_product(SAMPLE_GRID) == max_grid_product(transposed)


def test_grid_too_small_for_length():
    assert max_grid_product([[9, 9], [9, 9]], length=3) == 0


def test_grid_rejects_ragged_and_bad_length():
    with pytest.raises(ValueError):
        max_grid_product([[1, 2], [3]])
    with pytest.raises(ValueError):
        max_grid_product(SAMPLE_GRID, length=0)


def test_letter_count_worked_example():
    assert letter_count(342) == 23


@pytest.mark.parametrize(
    "n, words",
    [(5, "five"), (21, "twentyone"), (100, "onehundred"), (1000, "onethousand"), (0, "")],
)
def test_letter_count_words(n, words):
    assert letter_count(n) == len(words)


def test_letter_count_range():
    with pytest.raises(ValueError):
        letter_count(1001)
    with pytest.raises(ValueError):
        letter_count(-1)


def test_number_letter_total_small():
    assert number_letter_total(5) == sum(len(w) for w in ("one", "two", "three", "four", "five"))


def test_triangle_worked_example():
    assert max_triangle_path([[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]]) == 23


def test_triangle_single_row():
    assert max_triangle_path([[7]]) == 7


def test_triangle_rejects_bad_shapes():
    with pytest.raises(ValueError):
        max_triangle_path([])
    with pytest.raises(ValueError):
        max_triangle_path([[1], [2, 3, 4]])


def test_sundays_additive():
    whole = count_month_sundays(1901, 2000)
    assert whole == count_month_sundays(1901, 1950) + count_month_sundays(1951, 2000)


def test_sundays_bounded_per_year():
    for year in range(1990, 2000):
        assert 0 <= count_month_sundays(year, year) <= 12


def test_sundays_reversed_years():
    with pytest.raises(ValueError):
        count_month_sundays(2000, 1901)


def test_cycle_of_seventh():
    assert recurring_cycle_length(7) == 6


@pytest.mark.parametrize("n", [1, 2, 4, 5, 8, 10, 16, 20, 25, 40])
def test_cycle_terminating(n):
    assert recurring_cycle_length(n) == 0


@pytest.mark.parametrize("p", [3, 7, 11, 13, 17, 19, 23, 29, 31, 37])
def test_cycle_is_order_of_ten(p):
    length = recurring_cycle_length(p)
    assert pow(10, length, p) == 1
    assert (p - 1) % length == 0


def test_cycle_rejects_zero():
    with pytest.raises(ValueError):
        recurring_cycle_length(0)


def test_longest_cycle_is_maximal():
    length, d = longest_recurring_cycle(50)
    assert recurring_cycle_length(d) == length
    assert all(recurring_cycle_length(k) <= length for k in range(1, 51))
    assert all(recurring_cycle_length(k) < length for k in range(1, d))