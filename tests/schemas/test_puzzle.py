import json

import msgspec
import pytest
from skyline.core.errors import InvalidClueSet
from skyline.schemas.puzzle import ClueSet, NoSolution, Solution, SkyscraperPuzzle, load_puzzle


@pytest.fixture
def puzzle_payload() -> dict:
    return {
        "id": "ref",
        "size": 3,
        "clues": {"top": [2, 2, 1], "right": [1, 2, 2], "bottom": [3, 1, 2], "left": [2, 1, 3]},
        "solution": [[1, 2, 3], [3, 1, 2], [2, 3, 1]],
    }


class TestClueSet:
    def test_from_sides(self) -> None:
        clues = ClueSet.from_sides(([2, 2, 1], (1, 2, 2), [3, 1, 2], [2, 1, 3]))
        assert clues.size == 3
        assert clues.right == [1, 2, 2]

    def test_validate_returns_self(self) -> None:
        clues = ClueSet([1], [1], [1], [1])
        assert clues.validate() is clues

    def test_side_lookup(self) -> None:
        clues = ClueSet([1, 2], [2, 1], [1, 2], [2, 1])
        assert clues.side("bottom") == [1, 2]
        with pytest.raises(ValueError):
            clues.side("middle")

    @pytest.mark.parametrize("clues, message", [
        (ClueSet([1, 2], [1], [1, 2], [1, 2]), "'right' has 1 clues"),
        (ClueSet([1, 3], [1, 2], [1, 2], [1, 2]), r"outside range \[1, 2\]"),
        (ClueSet([1, 2], [1, 2], [1, "2"], [1, 2]), "not an integer"),
        (ClueSet([1, 2], [1, 2], [1, 2], [True, 2]), "not an integer"),
        (ClueSet([], [], [], []), "must not be empty"),
    ])
    def test_invalid(self, clues: ClueSet, message: str) -> None:
        with pytest.raises(InvalidClueSet, match=message):
            clues.validate()

    def test_clue_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidClueSet, ValueError)


def test_result_truthiness() -> None:
    clues = ClueSet([1], [1], [1], [1])
    assert Solution(grid=[[1]])
    assert not NoSolution(clues=clues)


def test_load_puzzle(puzzle_payload: dict) -> None:
    puzzle = load_puzzle(json.dumps(puzzle_payload).encode())
    assert isinstance(puzzle, SkyscraperPuzzle)
    assert puzzle.id == "ref"
    assert puzzle.clues.top == [2, 2, 1]
    assert puzzle.solution == [[1, 2, 3], [3, 1, 2], [2, 3, 1]]


def test_load_puzzle_defaults(puzzle_payload: dict) -> None:
    del puzzle_payload["id"]
    del puzzle_payload["solution"]
    puzzle = load_puzzle(json.dumps(puzzle_payload).encode())
    assert puzzle.id == "unknown"
    assert puzzle.solution is None


def test_load_puzzle_size_mismatch(puzzle_payload: dict) -> None:
    puzzle_payload["size"] = 4
    with pytest.raises(InvalidClueSet, match="declares size 4"):
        load_puzzle(json.dumps(puzzle_payload).encode())


def test_load_puzzle_malformed(puzzle_payload: dict) -> None:
    puzzle_payload["clues"]["top"] = "2,2,1"
    with pytest.raises(msgspec.ValidationError):
        load_puzzle(json.dumps(puzzle_payload).encode())


def test_encode_solution() -> None:
    encoded = msgspec.json.decode(msgspec.json.encode(Solution(grid=[[1]], candidates_checked=1)))
    assert encoded == {"grid": [[1]], "candidates_checked": 1}
