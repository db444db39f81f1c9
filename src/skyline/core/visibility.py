from typing import List, Sequence

from skyline.core.columns import get_column, has_duplicates, is_latin_square
from skyline.schemas.puzzle import SIDES, ClueSet

NEGATIVE_INFINITY = float("-inf")


def visible_count(line: Sequence[int]) -> int:
    """Number of prefix maxima when the line is scanned from its first element."""
    running_max = NEGATIVE_INFINITY
    count = 0
    for height in line:
        if height > running_max:
            count += 1
            running_max = height
    return count


def is_line_valid(clue: int, line: Sequence[int]) -> bool:
    """
    True when exactly `clue` heights are visible from the front of `line`.

    A line that repeats a height is rejected whatever the clue.

    >>> is_line_valid(2, [3, 2, 1, 4])
    True
    >>> is_line_valid(3, [4, 1, 2, 3])
    False
    """
    if has_duplicates(line):
        return False
    return visible_count(line) == clue


def oriented_lines(grid: Sequence[Sequence[int]], side: str) -> List[List[int]]:
    """
    The lines seen from one side, in clue order, each starting at the clue.

    Clues run clockwise, so bottom[k] looks up column N-1-k and left[k]
    looks along row N-1-k.
    """
    n = len(grid)
    if side == "top":
        return [get_column(grid, k) for k in range(n)]
    if side == "right":
        return [list(reversed(grid[k])) for k in range(n)]
    if side == "bottom":
        return [list(reversed(get_column(grid, n - 1 - k))) for k in range(n)]
    if side == "left":
        return [list(grid[n - 1 - k]) for k in range(n)]
    raise ValueError(f"Unknown side '{side}'. Use one of {', '.join(SIDES)}.")


def row_matches_clues(clues: ClueSet, index: int, row: Sequence[int]) -> bool:
    n = clues.size
    return (
        is_line_valid(clues.right[index], list(reversed(row)))
        and is_line_valid(clues.left[n - 1 - index], row)
    )


def is_grid_valid(clues: ClueSet, grid: Sequence[Sequence[int]]) -> bool:
    if len(grid) != clues.size or not is_latin_square(grid):
        return False

    for side in SIDES:
        for clue, line in zip(clues.side(side), oriented_lines(grid, side)):
            if not is_line_valid(clue, line):
                return False
    return True


def derive_clues(grid: Sequence[Sequence[int]]) -> ClueSet:
    return ClueSet(*(
        [visible_count(line) for line in oriented_lines(grid, side)]
        for side in SIDES
    ))
