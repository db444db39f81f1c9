import itertools
from functools import lru_cache
from typing import Tuple

Row = Tuple[int, ...]

MIN_HEIGHT = 1


@lru_cache(maxsize=None)
def row_permutations(n: int) -> Tuple[Row, ...]:
    """All n! orderings of the heights 1..n, in lexicographic order."""
    heights = range(MIN_HEIGHT, n + MIN_HEIGHT)
    return tuple(itertools.permutations(heights))
