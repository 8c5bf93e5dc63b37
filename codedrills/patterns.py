"""Text patterns built from stars, letters, digits and number grids."""

from __future__ import annotations

from math import comb
from typing import List


def padded_char(width: int, char: str) -> str:
    """Pad a single character to ``width`` columns.

    A positive width right-aligns the character and a negative width
    left-aligns it.
    """
    if len(char) != 1:
        raise ValueError("expected a single character")
    if width < 0:
        return char.ljust(-width)
    return char.rjust(width)


def binary_triangle(rows: int) -> List[str]:
    """Triangle of alternating bits where every row ends in 1."""
    return ["".join(str((i + j) % 2) for j in range(i)) for i in range(1, rows + 1)]


def toggled_binary_triangle(rows: int) -> List[str]:
    """Triangle of space-separated toggling bits; odd rows start with 1."""
    lines = []
    for i in range(1, rows + 1):
        start = i % 2
        lines.append("".join(f"{(start + j) % 2} " for j in range(i)))
    return lines


def butterfly(n: int) -> List[str]:
    """Butterfly of stars on a square of side 2n - 1."""
    lines = []
    for i in range(1, 2 * n):
        start, end = (i, 2 * n - i) if i < n else (2 * n - i, i)
        lines.append(
            "".join("*" if j <= start or j >= end else " " for j in range(1, 2 * n))
        )
    return lines


def star_butterfly(n: int) -> List[str]:
    """Butterfly made of two star wings that meet in a single middle row."""
    lines = []
    spaces = 2 * n - 1
    stars = 0
    for i in range(1, 2 * n):
        if i <= n:
            spaces -= 2
            stars += 1
        else:
            spaces += 2
            stars -= 1
        right = stars - 1 if stars >= n else stars
        lines.append("*" * stars + " " * max(spaces, 0) + "*" * right)
    return lines


def hourglass(n: int) -> List[str]:
    """Hourglass of ``* `` cells, n wide at the top and bottom."""
    lines = []
    spaces, stars = 1, n
    for i in range(2 * n - 1):
        lines.append(" " * spaces + "* " * stars)
        if i < n - 1:
            spaces += 1
            stars -= 1
        else:
            spaces -= 1
            stars += 1
    return lines


def letter_triangle(n: int) -> List[str]:
    """Hollow triangle whose rows are drawn with successive letters from A."""
    lines = []
    for i in range(1, n + 1):
        letter = chr(ord("A") + i - 1)
        width = 2 * i - 1
        body = "".join(
            letter if j in (1, width) or i == n else " " for j in range(1, width + 1)
        )
        lines.append(" " * (n - i + 1) + body)
    return lines


def hollow_diamond(n: int) -> List[str]:
    """Outline of a diamond of stars, 2n - 1 rows tall."""
    lines = []
    for i in range(1, 2 * n):
        if i < n:
            spaces, end = n - i + 1, 2 * i - 1
        else:
            spaces, end = i - n + 1, 2 * (2 * n - i) - 1
        body = "".join("*" if j in (1, end) else " " for j in range(1, end + 1))
        lines.append(" " * spaces + body)
    return lines


def number_rhombus(n: int) -> List[str]:
    """Diamond of consecutive numbers, each row counting down."""

    def row(i: int, first: int) -> str:
        numbers = range(first + i - 1, first - 1, -1)
        return "  " * (n - i) + "".join(f" {value} " for value in numbers)

    lines = []
    k = 1
    for i in range(1, n + 1):
        lines.append(row(i, k))
        k += i
    k -= n
    for i in range(n, 0, -1):
        lines.append(row(i, k))
        k = k - i + 1
    return lines


def concentric_square(n: int) -> List[str]:
    """Square of digits falling from n at the border to 1 at the centre."""
    size = 2 * n - 1
    return [
        "".join(str(n - min(i, j, size - i - 1, size - j - 1)) for j in range(size))
        for i in range(size)
    ]


def pascal_triangle(n: int) -> List[str]:
    """First n rows of Pascal's triangle, centred, each value four columns wide."""
    lines = []
    row: List[int] = []
    for i in range(n):
        row = [1] if i == 0 else [1] + [a + b for a, b in zip(row, row[1:])] + [1]
        lines.append(" " * (n - i) + "".join(f"{value:4d}" for value in row))
    return lines


def pascal_row(n: int) -> List[int]:
    """The n-th row of Pascal's triangle, counting from 1."""
    return [comb(n - 1, i) for i in range(n)]


def inverted_right_triangle(n: int) -> List[str]:
    """Right triangle of ``* `` cells, widest row first."""
    return ["* " * (n - i) for i in range(n)]


def right_triangle(n: int) -> List[str]:
    """Right triangle of ``* `` cells, widest row last."""
    return ["* " * (i + 1) for i in range(n)]


def pyramid(n: int) -> List[str]:
    """Centred pyramid of stars, apex on top."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def reverse_pyramid(n: int) -> List[str]:
    """Centred pyramid of stars, apex at the bottom."""
    return [" " * i + "*" * (2 * n - 2 * i + 1) for i in range(1, n + 1)]


def snake_grid(n: int) -> List[List[int]]:
    """Numbers 1 to n*n laid out left to right, then right to left, row by row."""
    grid = []
    for r in range(n):
        row = list(range(r * n + 1, (r + 1) * n + 1))
        grid.append(row[::-1] if r % 2 else row)
    return grid


def spiral_matrix(n: int) -> List[List[int]]:
    """Numbers 1 to n*n laid out in a clockwise spiral from the top-left corner."""
    grid = [[0] * n for _ in range(n)]
    top, bottom, left, right = 0, n - 1, 0, n - 1
    number = 1
    while top <= bottom and left <= right:
        for c in range(left, right + 1):
            grid[top][c] = number
            number += 1
        top += 1
        for r in range(top, bottom + 1):
            grid[r][right] = number
            number += 1
        right -= 1
        for c in range(right, left - 1, -1):
            grid[bottom][c] = number
            number += 1
        bottom -= 1
        for r in range(bottom, top - 1, -1):
            grid[r][left] = number
            number += 1
        left += 1
    return grid


def x_pattern(text: str) -> List[str]:
    """Write ``text`` along both diagonals of a square."""
    size = len(text)
    return [
        "".join(text[i] if j in (i, size - 1 - i) else " " for j in range(size))
        for i in range(size)
    ]


def middle_out(text: str) -> List[str]:
    """Rows that grow from the middle character, wrapping to the start."""
    size = len(text)
    mid = size // 2
    return [
        " " * (4 * (size - i)) + "".join(text[(mid + k) % size] for k in range(i + 1))
        for i in range(size)
    ]