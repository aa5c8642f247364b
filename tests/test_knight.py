import pytest

from verveling.knight import format_board, knight_tour


def test_single_square_board():
    assert knight_tour(1) == [[1]]


def test_five_by_five_tour_is_valid():
    board = knight_tour(5)
    positions = {
        step: (r, c) for r, row in enumerate(board) for c, step in enumerate(row)
    }
    assert sorted(positions) == list(range(1, 26))
    assert positions[1] == (0, 0)
    for step in range(1, 25):
        (r1, c1), (r2, c2) = positions[step], positions[step + 1]
        assert sorted((abs(r1 - r2), abs(c1 - c2))) == [1, 2]


@pytest.mark.parametrize("size", [2, 3, 4])
def test_boards_without_tour(size):
    assert knight_tour(size) is None


def test_invalid_size():
    with pytest.raises(ValueError):
        knight_tour(0)


def test_format_board():
    assert format_board([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"


def test_format_board_of_tour_has_one_line_per_row():
    board = knight_tour(5)
    lines = format_board(board).splitlines()
    assert len(lines) == 5
    assert [list(map(int, line.split())) for line in lines] == board