from typing import Callable, Iterator, Optional, Sequence, Union

from skyline.core.columns import prune_columns
from skyline.core.errors import SearchAborted
from skyline.core.expander import Grid, backtrack_grids, generate_row_distinct_grids
from skyline.core.visibility import is_grid_valid, row_matches_clues
from skyline.schemas.puzzle import ClueSet, NoSolution, Solution
from skyline.utils.config import settings
from skyline.utils.log import get_logger

STRATEGY_BACKTRACK = "backtrack"
STRATEGY_EXHAUSTIVE = "exhaustive"
STRATEGIES = (STRATEGY_BACKTRACK, STRATEGY_EXHAUSTIVE)

logger = get_logger(__name__)

ClueInput = Union[ClueSet, Sequence[Sequence[int]]]
SearchResult = Union[Solution, NoSolution]


def as_clue_set(clues: ClueInput) -> ClueSet:
    if isinstance(clues, ClueSet):
        return clues
    return ClueSet.from_sides(clues)


class SkyscraperSolver:
    def __init__(
        self,
        strategy: Optional[str] = None,
        should_stop: Optional[Callable[[], bool]] = None
    ):
        strategy = strategy or settings.DEFAULT_STRATEGY
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy '{strategy}'. Use one of {', '.join(STRATEGIES)}.")
        self.strategy = strategy
        self.should_stop = should_stop

    def candidates(self, clues: ClueSet) -> Iterator[Grid]:
        n = clues.size
        if self.strategy == STRATEGY_EXHAUSTIVE:
            return prune_columns(generate_row_distinct_grids(n))

        def row_filter(index, row):
            return row_matches_clues(clues, index, row)

        return backtrack_grids(n, row_filter=row_filter, should_stop=self.should_stop)

    def solve(self, clues: ClueInput) -> SearchResult:
        clues = as_clue_set(clues).validate()
        logger.info("Searching %dx%d board with %s strategy", clues.size, clues.size, self.strategy)

        checked = 0
        try:
            for grid in self.candidates(clues):
                if self.should_stop is not None and self.should_stop():
                    raise SearchAborted(checked)

                checked += 1
                if is_grid_valid(clues, grid):
                    logger.info("Solved after %d candidates", checked)
                    return Solution(grid=[list(row) for row in grid], candidates_checked=checked)
        except SearchAborted:
            logger.warning("Search aborted after %d candidates", checked)
            raise SearchAborted(checked) from None

        logger.info("No solution after %d candidates", checked)
        return NoSolution(clues=clues, candidates_checked=checked)


def solve(
    clues: ClueInput,
    strategy: Optional[str] = None,
    should_stop: Optional[Callable[[], bool]] = None
) -> SearchResult:
    return SkyscraperSolver(strategy=strategy, should_stop=should_stop).solve(clues)
