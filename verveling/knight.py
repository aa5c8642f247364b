"""Knight's tour by backtracking from the top-left corner."""

from verveling.matrix import format_matrix

# (row step, column step), tried in this order.
_MOVES = tuple(zip((1, 2, 2, 1, -1, -2, -2, -1), (-2, -1, 1, 2, 2, 1, -1, -2)))


def knight_tour(size: int = 8) -> list[list[int]] | None:
    """Return a board numbering the squares of a knight's tour, or None if there is none."""
    if size < 1:
        raise ValueError("board size must be positive")
    board = [[0] * size for _ in range(size)]
    last = size * size

    def visit(row: int, col: int, step: int) -> bool:
        if not (0 <= row < size and 0 <= col < size) or board[row][col]:
            return False
        board[row][col] = step
        if step == last:
            return True
        if any(visit(row + dr, col + dc, step + 1) for dr, dc in _MOVES):
            return True
        board[row][col] = 0
        return False

    return board if visit(0, 0, 1) else None


def format_board(board: list[list[int]]) -> str:
    """Render a board as rows of space-separated move numbers."""
    return format_matrix(board)