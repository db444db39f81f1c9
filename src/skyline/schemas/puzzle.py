from typing import List, Optional, Sequence

import msgspec

from skyline.core.errors import InvalidClueSet

SIDES = ("top", "right", "bottom", "left")


class ClueSet(msgspec.Struct, frozen=True):
    """
    Visibility clues for the four edges of the board, listed clockwise.

    top[k] sits above column k, right[k] beside row k, bottom[k] below
    column N-1-k and left[k] beside row N-1-k:

            | t0 | t1 | t2 |
         l2 |    |    |    | r0
         l1 |    |    |    | r1
         l0 |    |    |    | r2
            | b2 | b1 | b0 |
    """
    top: List[int]
    right: List[int]
    bottom: List[int]
    left: List[int]

    @classmethod
    def from_sides(cls, sides: Sequence[Sequence[int]]) -> "ClueSet":
        if len(sides) != len(SIDES):
            raise InvalidClueSet(f"Expected 4 clue sequences, got {len(sides)}.")
        return cls(*(list(side) for side in sides))

    @property
    def size(self) -> int:
        return len(self.top)

    def side(self, name: str) -> List[int]:
        if name not in SIDES:
            raise ValueError(f"Unknown side '{name}'. Use one of {', '.join(SIDES)}.")
        return getattr(self, name)

    def validate(self) -> "ClueSet":
        n = self.size
        if n < 1:
            raise InvalidClueSet("Clue sequences must not be empty.")

        for name in SIDES:
            clues = self.side(name)
            if len(clues) != n:
                raise InvalidClueSet(
                    f"Side '{name}' has {len(clues)} clues, expected {n} to match 'top'."
                )
            for idx, clue in enumerate(clues):
                if isinstance(clue, bool) or not isinstance(clue, int):
                    raise InvalidClueSet(f"Clue {name}[{idx}] is not an integer: {clue!r}")
                if not 1 <= clue <= n:
                    raise InvalidClueSet(f"Clue {name}[{idx}]={clue} outside range [1, {n}].")
        return self


class Solution(msgspec.Struct):
    grid: List[List[int]]
    candidates_checked: int = 0

    def __bool__(self) -> bool:
        return True


class NoSolution(msgspec.Struct):
    clues: ClueSet
    candidates_checked: int = 0

    def __bool__(self) -> bool:
        return False


class SkyscraperPuzzle(msgspec.Struct):
    size: int
    clues: ClueSet
    solution: Optional[List[List[int]]] = None
    id: str = "unknown"


def load_puzzle(raw: bytes) -> SkyscraperPuzzle:
    puzzle = msgspec.json.decode(raw, type=SkyscraperPuzzle)
    puzzle.clues.validate()
    if puzzle.clues.size != puzzle.size:
        raise InvalidClueSet(
            f"Puzzle '{puzzle.id}' declares size {puzzle.size} but has {puzzle.clues.size} clues per side."
        )
    return puzzle
