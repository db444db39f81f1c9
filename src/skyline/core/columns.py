from typing import Iterable, Iterator, List, Sequence

import numpy as np

from skyline.core.expander import Grid


def has_duplicates(line: Sequence[int]) -> bool:
    return len(set(line)) != len(line)


def get_column(grid: Sequence[Sequence[int]], index: int) -> List[int]:
    return [row[index] for row in grid]


def get_columns(grid: Sequence[Sequence[int]]) -> List[List[int]]:
    if not grid:
        return []
    return [get_column(grid, j) for j in range(len(grid[0]))]


def columns_are_unique(grid: Sequence[Sequence[int]]) -> bool:
    """
    True when no column of a complete grid repeats a height.

    Each column is sorted independently; a repeat shows up as two equal
    neighbours along axis 0.
    """
    if len(grid) < 2:
        return True

    board = np.sort(np.asarray(grid), axis=0)
    return not bool(np.any(board[1:] == board[:-1]))


def is_latin_square(grid: Sequence[Sequence[int]]) -> bool:
    """True when every row is a permutation of 1..N and no column repeats."""
    heights = list(range(1, len(grid) + 1))
    if any(sorted(row) != heights for row in grid):
        return False
    return columns_are_unique(grid)


def prune_columns(grids: Iterable[Grid]) -> Iterator[Grid]:
    return (grid for grid in grids if columns_are_unique(grid))
