"""Backtracking searches: N queens and subsets with a given sum."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` non-attacking queens column by column.

    Returns the first board found as rows of 0/1 cells, or ``None`` if no
    placement exists.
    """
    rows_of_columns: list[int] = []

    def safe(row: int) -> bool:
        col = len(rows_of_columns)
        return all(
            placed != row and abs(placed - row) != col - c
            for c, placed in enumerate(rows_of_columns)
        )

    def place() -> bool:
        if len(rows_of_columns) >= n:
            return True
        for row in range(n):
            if safe(row):
                rows_of_columns.append(row)
                if place():
                    return True
                rows_of_columns.pop()
        return False

    if not place():
        return None
    board = [[0] * n for _ in range(n)]
    for col, row in enumerate(rows_of_columns):
        board[row][col] = 1
    return board


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board as lines of space-separated cells."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in board)


def subset_sums(values: Sequence[int], target: int) -> Iterator[tuple[int, ...]]:
    """Yield subsets of ``values`` (kept in input order) that add up to ``target``.

    Inclusion of each value is tried before exclusion; a branch stops as soon as
    its sum reaches or exceeds ``target``.
    """
    chosen: list[int] = []

    def search(index: int, total: int) -> Iterator[tuple[int, ...]]:
        if total == target:
            yield tuple(chosen)
            return
        if index >= len(values) or total > target:
            return
        chosen.append(values[index])
        yield from search(index + 1, total + values[index])
        chosen.pop()
        yield from search(index + 1, total)

    yield from search(0, 0)