"""Matrix multiplication, printing and spiral traversal."""

# (row step, column step): right, up, left, down.
_DIRECTIONS = ((0, 1), (-1, 0), (0, -1), (1, 0))


def _shape(matrix: list[list[int]], name: str) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError(f"matrix {name} is empty")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError(f"matrix {name} has rows of different lengths")
    return len(matrix), width


def multiply(a: list[list[int]], b: list[list[int]]) -> list[list[int]]:
    """Return the matrix product ``a @ b``."""
    _, inner_a = _shape(a, "A")
    inner_b, _ = _shape(b, "B")
    if inner_a != inner_b:
        raise ValueError(
            "matrices A and B cannot be multiplied because their dimensions do not match"
        )
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def format_matrix(matrix: list[list[int]]) -> str:
    """Render a matrix as lines of values, each followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def spiral_order(matrix: list[list[int]]) -> list[int]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    rows, cols = _shape(matrix, "")
    visited: set[tuple[int, int]] = set()
    order: list[int] = []
    row = col = direction = 0
    while len(order) < rows * cols - 1:
        for _ in _DIRECTIONS:
            dr, dc = _DIRECTIONS[direction]
            nr, nc = row + dr, col + dc
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in visited:
                break
            direction = (direction + 1) % len(_DIRECTIONS)
        else:
            raise RuntimeError("spiral walk got stuck")
        order.append(matrix[row][col])
        visited.add((row, col))
        row, col = nr, nc
    order.append(matrix[row][col])
    return order