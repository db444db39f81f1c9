import sys
import time
from pathlib import Path
from typing import Annotated, List, Optional

import msgspec
import typer
from rich.console import Console
from rich.markup import escape

from skyline.core.columns import is_latin_square
from skyline.core.errors import InvalidClueSet
from skyline.core.solver import STRATEGIES, SkyscraperSolver
from skyline.core.visibility import derive_clues, is_grid_valid
from skyline.schemas.puzzle import ClueSet, SkyscraperPuzzle, load_puzzle
from skyline.utils.config import settings
from skyline.visualization.board import build_board_table

app = typer.Typer(help="Skyline: a skyscraper puzzle solver.")
console = Console()

DEFAULT_LIMIT_PUZZLES = 20
PUZZLE_SUFFIX = ".json"
VALUE_SEPARATOR = ","
ROW_SEPARATOR = ";"

CYAN_STYLE = "cyan"
GREEN_STYLE = "green"
RED_STYLE = "red"
MAGENTA_STYLE = "magenta"
BOLD_STYLE = "bold"
DIM_STYLE = "dim"

SOLVED_STATUS = "SOLVED"
NO_SOLUTION_STATUS = "NO SOLUTION"
VALID_STATUS = "VALID"
INVALID_STATUS = "INVALID"
MATCH_STATUS = "MATCH"
DIFFERENT_STATUS = "DIFFERENT"

CLI_PUZZLE_ID = "cli"


def parse_int_list(text: str) -> List[int]:
    try:
        return [int(part) for part in text.split(VALUE_SEPARATOR) if part.strip()]
    except ValueError:
        raise InvalidClueSet(f"Expected comma separated integers, got '{text}'.")


def parse_grid(text: str) -> List[List[int]]:
    return [parse_int_list(row) for row in text.split(ROW_SEPARATOR) if row.strip()]


def resolve_puzzle_path(puzzle: str) -> Path:
    path = Path(puzzle)
    if path.exists():
        return path
    named = settings.PUZZLE_DIR / f"{puzzle}{PUZZLE_SUFFIX}"
    if named.exists():
        return named
    raise FileNotFoundError(f"Puzzle '{puzzle}' not found in {settings.PUZZLE_DIR}.")


def load_target(top, right, bottom, left, puzzle) -> SkyscraperPuzzle:
    if puzzle:
        return load_puzzle(resolve_puzzle_path(puzzle).read_bytes())

    sides = [top, right, bottom, left]
    if any(side is None for side in sides):
        raise InvalidClueSet("Provide --puzzle or all of --top, --right, --bottom and --left.")
    clues = ClueSet.from_sides([parse_int_list(side) for side in sides]).validate()
    return SkyscraperPuzzle(size=clues.size, clues=clues, id=CLI_PUZZLE_ID)


def report_error(e: Exception):
    console.print(f"[{BOLD_STYLE}{RED_STYLE}]Error:[/{BOLD_STYLE}{RED_STYLE}] {escape(str(e))}")
    sys.exit(1)


TopOption = Annotated[Optional[str], typer.Option(help="Top clues, left to right, e.g. '2,2,1'")]
RightOption = Annotated[Optional[str], typer.Option(help="Right clues, top to bottom")]
BottomOption = Annotated[Optional[str], typer.Option(help="Bottom clues, right to left")]
LeftOption = Annotated[Optional[str], typer.Option(help="Left clues, bottom to top")]
PuzzleOption = Annotated[Optional[str], typer.Option(help="Puzzle file path or name in the puzzle directory")]


@app.command()
def solve(
    top: TopOption = None,
    right: RightOption = None,
    bottom: BottomOption = None,
    left: LeftOption = None,
    puzzle: PuzzleOption = None,
    strategy: str = typer.Option(settings.DEFAULT_STRATEGY, help=f"Search strategy: {', '.join(STRATEGIES)}"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    try:
        target = load_target(top, right, bottom, left, puzzle)
        solver = SkyscraperSolver(strategy=strategy)
    except (ValueError, FileNotFoundError, msgspec.DecodeError) as e:
        report_error(e)

    clues = target.clues
    start_time = time.perf_counter()
    result = solver.solve(clues)
    total_ms = (time.perf_counter() - start_time) * 1000

    if as_json:
        console.print_json(msgspec.json.encode(result).decode())
        if not result:
            sys.exit(1)
        return

    console.print(f"\n[{BOLD_STYLE}]Puzzle ({clues.size}x{clues.size}):[/{BOLD_STYLE}]")
    console.print(build_board_table(clues, result.grid if result else None))

    if result:
        status_text = f"[{GREEN_STYLE}]{SOLVED_STATUS}[/{GREEN_STYLE}]"
    else:
        status_text = f"[{RED_STYLE}]{NO_SOLUTION_STATUS}[/{RED_STYLE}]"

    console.print(f"\n  Status: {status_text}")
    console.print(f"  Candidates Checked: [{BOLD_STYLE}{CYAN_STYLE}]{result.candidates_checked}[/{BOLD_STYLE}{CYAN_STYLE}]")
    console.print(f"  Total Time: [{BOLD_STYLE}{MAGENTA_STYLE}]{total_ms:.2f} ms[/{BOLD_STYLE}{MAGENTA_STYLE}]")

    if result and target.solution is not None:
        if result.grid == target.solution:
            match_text = f"[{GREEN_STYLE}]{MATCH_STATUS}[/{GREEN_STYLE}]"
        else:
            match_text = f"[{MAGENTA_STYLE}]{DIFFERENT_STATUS}[/{MAGENTA_STYLE}]"
        console.print(f"  Stored Solution: {match_text}")

    if not result:
        sys.exit(1)


@app.command()
def check(
    grid: Annotated[str, typer.Option(help="Rows separated by ';', e.g. '1,2,3;3,1,2;2,3,1'")],
    top: TopOption = None,
    right: RightOption = None,
    bottom: BottomOption = None,
    left: LeftOption = None,
    puzzle: PuzzleOption = None,
):
    try:
        clues = load_target(top, right, bottom, left, puzzle).clues
        board = parse_grid(grid)
    except (InvalidClueSet, FileNotFoundError, msgspec.DecodeError) as e:
        report_error(e)

    fits_board = len(board) == clues.size and all(len(row) == clues.size for row in board)
    console.print(build_board_table(clues, board if fits_board else None))

    if is_grid_valid(clues, board):
        console.print(f"  Status: [{GREEN_STYLE}]{VALID_STATUS}[/{GREEN_STYLE}]")
    else:
        console.print(f"  Status: [{RED_STYLE}]{INVALID_STATUS}[/{RED_STYLE}]")
        sys.exit(1)


@app.command()
def clues(
    grid: Annotated[str, typer.Option(help="Rows separated by ';', e.g. '1,2,3;3,1,2;2,3,1'")],
    as_json: bool = typer.Option(False, "--json", help="Print the clues as JSON"),
):
    try:
        board = parse_grid(grid)
        if not board or any(len(row) != len(board) for row in board):
            raise ValueError(f"Grid must be square, got rows of lengths {[len(row) for row in board]}.")
        if not is_latin_square(board):
            raise ValueError(f"Grid must be a Latin square of heights 1..{len(board)}.")
    except ValueError as e:
        report_error(e)

    derived = derive_clues(board)
    if as_json:
        console.print_json(msgspec.json.encode(derived).decode())
        return

    for side in ("top", "right", "bottom", "left"):
        values = VALUE_SEPARATOR.join(str(c) for c in derived.side(side))
        console.print(f"  {side:<6} [{BOLD_STYLE}{CYAN_STYLE}]{values}[/{BOLD_STYLE}{CYAN_STYLE}]")


@app.command(name="list-puzzles")
def list_puzzles(limit: int = typer.Option(DEFAULT_LIMIT_PUZZLES, help="Number of puzzles to show")):
    try:
        files = sorted(settings.PUZZLE_DIR.glob(f"*{PUZZLE_SUFFIX}"))
        console.print(f"[{BOLD_STYLE}{CYAN_STYLE}]Available Puzzles (Total: {len(files)}):[/{BOLD_STYLE}{CYAN_STYLE}]")

        for path in files[:limit]:
            puzzle = load_puzzle(path.read_bytes())
            console.print(f" - {path.stem} [{DIM_STYLE}]({puzzle.size}x{puzzle.size})[/{DIM_STYLE}]")

    except Exception as e:
        console.print(f"[{BOLD_STYLE}{RED_STYLE}]Error loading puzzles:[/{BOLD_STYLE}{RED_STYLE}] {escape(str(e))}")


def main():
    app()


if __name__ == "__main__":
    main()
