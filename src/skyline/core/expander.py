"""
Candidate grid generation.

Two enumerations live here. `generate_row_distinct_grids` is the plain
row-by-row expansion: every grid whose rows are pairwise distinct
permutations, with column validity left to a later filter. `backtrack_grids`
places rows top to bottom and drops a partial grid as soon as a column prefix
repeats a height, so it only ever produces Latin squares.
"""
from typing import Callable, Iterable, Iterator, List, Optional, Set, Tuple

from skyline.core.errors import SearchAborted
from skyline.core.permutations import Row, row_permutations

PartialGrid = Tuple[Row, ...]
Grid = PartialGrid
RowFilter = Callable[[int, Row], bool]

EMPTY_GRID: PartialGrid = ()


def expand_partial_grids(n: int, partial_grids: Iterable[PartialGrid]) -> Iterator[PartialGrid]:
    """Prepends one more row to each partial grid, skipping rows it already holds."""
    for grid in partial_grids:
        for row in row_permutations(n):
            if row not in grid:
                yield (row,) + grid


def generate_row_distinct_grids(n: int) -> Iterator[Grid]:
    grids: Iterable[PartialGrid] = [EMPTY_GRID]
    for _ in range(n):
        grids = expand_partial_grids(n, grids)
    yield from grids


def backtrack_grids(
    n: int,
    row_filter: Optional[RowFilter] = None,
    should_stop: Optional[Callable[[], bool]] = None
) -> Iterator[Grid]:
    """
    Yields the Latin squares of order n, in lexicographic order of their rows.

    row_filter(index, row) may reject a permutation for a given row index
    before any placement is attempted. should_stop is polled on entry to
    every depth and raises SearchAborted when it returns true.
    """
    pool = row_permutations(n)
    candidates: List[List[Row]] = [
        [row for row in pool if row_filter is None or row_filter(i, row)]
        for i in range(n)
    ]
    seen_in_column: List[Set[int]] = [set() for _ in range(n)]
    placed: List[Row] = []

    def fits(row: Row) -> bool:
        return not any(height in seen_in_column[j] for j, height in enumerate(row))

    def place(depth: int) -> Iterator[Grid]:
        if should_stop is not None and should_stop():
            raise SearchAborted(0)

        if depth == n:
            yield tuple(placed)
            return

        for row in candidates[depth]:
            if not fits(row):
                continue

            for j, height in enumerate(row):
                seen_in_column[j].add(height)
            placed.append(row)

            yield from place(depth + 1)

            placed.pop()
            for j, height in enumerate(row):
                seen_in_column[j].discard(height)

    yield from place(0)
