"""Multiplication of polynomials given as coefficient lists."""


def multiply(a: list[int], b: list[int]) -> list[int]:
    """Return the coefficients of the product; index ``i`` holds the ``x^i`` term."""
    if not a or not b:
        raise ValueError("polynomials must have at least one coefficient")
    result = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            result[i + j] += x * y
    return result


def format_polynomial(coefficients: list[int]) -> str:
    """Render one ``x^i = c`` line per coefficient."""
    return "".join(f"x^{i} = {c}\n" for i, c in enumerate(coefficients))