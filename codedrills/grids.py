"""Grid and matrix exercises: paths, fills, products and searches."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

Cell = Tuple[int, int]


def _shape(grid: Sequence[Sequence]) -> Tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    return len(grid), len(grid[0])


def find_path(grid: Sequence[Sequence[int]]) -> Optional[List[Cell]]:
    """Find a path of 1-cells from the top-left to the bottom-right corner.

    Moves go right first, then down. The path is returned as a list of
    (row, column) cells, or None when there is none.
    """
    rows, cols = _shape(grid)
    target = (rows - 1, cols - 1)
    visited = set()

    def walk(row: int, col: int) -> Optional[List[Cell]]:
        if (row, col) == target:
            return [(row, col)]
        if not (0 <= row < rows and 0 <= col < cols):
            return None
        if grid[row][col] != 1 or (row, col) in visited:
            return None
        visited.add((row, col))
        for next_row, next_col in ((row, col + 1), (row + 1, col)):
            rest = walk(next_row, next_col)
            if rest is not None:
                return [(row, col)] + rest
        return None

    return walk(0, 0)


def flood_fill(grid: Sequence[Sequence[int]], row: int, col: int, color: int) -> List[List[int]]:
    """Return a copy with the 4-connected region around (row, col) recoloured."""
    result = [list(line) for line in grid]
    rows, cols = _shape(result)
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError("start cell outside the grid")
    original = result[row][col]
    if original == color:
        return result
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if 0 <= r < rows and 0 <= c < cols and result[r][c] == original:
            result[r][c] = color
            stack.extend(((r + 1, c), (r, c + 1), (r, c - 1), (r - 1, c)))
    return result


def multiply_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> List[List[int]]:
    """Matrix product of ``a`` and ``b``."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def set_matrix_zeros(matrix: Sequence[Sequence[int]]) -> List[List[int]]:
    """Return a copy where every row and column holding a zero is all zeros."""
    zero_rows = {r for r, line in enumerate(matrix) if 0 in line}
    zero_cols = {c for line in matrix for c, value in enumerate(line) if value == 0}
    return [
        [0 if r in zero_rows or c in zero_cols else value for c, value in enumerate(line)]
        for r, line in enumerate(matrix)
    ]


def transpose(matrix: Sequence[Sequence]) -> List[list]:
    """Transpose of a matrix."""
    return [list(column) for column in zip(*matrix)]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths across the grid avoiding cells equal to 1."""
    _, cols = _shape(grid)
    counts = [0] * cols
    counts[0] = 1
    for line in grid:
        for c, cell in enumerate(line):
            if cell == 1:
                counts[c] = 0
            elif c > 0:
                counts[c] += counts[c - 1]
    return counts[-1]


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through adjacent cells, each used once."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    used = set()

    def search(row: int, col: int, n: int) -> bool:
        if n == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        if (row, col) in used or board[row][col] != word[n]:
            return False
        used.add((row, col))
        found = (
            search(row + 1, col, n + 1)
            or search(row - 1, col, n + 1)
            or search(row, col + 1, n + 1)
            or search(row, col - 1, n + 1)
        )
        used.discard((row, col))
        return found

    return any(search(r, c, 0) for r in range(rows) for c in range(cols))