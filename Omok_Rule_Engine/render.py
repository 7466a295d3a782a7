"""Plain-text board renderer used by the console front end."""

from .engine.win_rules import winning_cells
from .Omokgame import prompt
from .Player import Player

MARKS = {Player.NONE: ".", Player.FIRST: "X", Player.SECOND: "O"}


def render_text(state):
    """
    Draw the board with x across and y down. Cells that belong to a winning
    run are bracketed, e.g. `[X]`. The last line is the status prompt.
    """
    board = state.board
    size = board.size
    highlight = winning_cells(state.conclusions)

    lines = ["   " + "".join(f"{x:3}" for x in range(size))]
    for y in range(size):
        row = []
        for x in range(size):
            mark = MARKS[board.cells[y][x]]
            row.append(f"[{mark}]" if y * size + x in highlight else f" {mark} ")
        lines.append(f"{y:2} " + "".join(row))
    lines.append(prompt(state))
    return "\n".join(lines)
