from typing import Optional, Sequence

from rich.table import Table

from skyline.schemas.puzzle import ClueSet

CLUE_STYLE = "bold cyan"
CELL_STYLE = "bold"
EMPTY_CELL = "·"
EMPTY_CORNER = ""


def build_board_table(clues: ClueSet, grid: Optional[Sequence[Sequence[int]]] = None) -> Table:
    """
    Lays the board out with its clues on all four edges.

    Without a grid the cells are left blank, which is how an unsolved
    puzzle is shown.
    """
    n = clues.size
    table = Table(show_header=False, box=None, padding=(0, 1))
    for _ in range(n + 2):
        table.add_column(justify="center")

    top_row = [EMPTY_CORNER] + [f"[{CLUE_STYLE}]{c}[/{CLUE_STYLE}]" for c in clues.top] + [EMPTY_CORNER]
    table.add_row(*top_row)

    for i in range(n):
        left = f"[{CLUE_STYLE}]{clues.left[n - 1 - i]}[/{CLUE_STYLE}]"
        right = f"[{CLUE_STYLE}]{clues.right[i]}[/{CLUE_STYLE}]"
        if grid is None:
            cells = [EMPTY_CELL] * n
        else:
            cells = [f"[{CELL_STYLE}]{h}[/{CELL_STYLE}]" for h in grid[i]]
        table.add_row(left, *cells, right)

    bottom_row = [EMPTY_CORNER] + [
        f"[{CLUE_STYLE}]{clues.bottom[n - 1 - j]}[/{CLUE_STYLE}]" for j in range(n)
    ] + [EMPTY_CORNER]
    table.add_row(*bottom_row)

    return table
