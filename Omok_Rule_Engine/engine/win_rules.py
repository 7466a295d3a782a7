"""Win/draw detection over generated lines and the conclusion types it reports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from ..Board import Board
from ..Player import MOVERS, Player
from .lines import generate_lines

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ongoing:
    """No run found and at least one empty cell left."""


@dataclass(frozen=True)
class Win:
    player: Player
    # Cells of the qualifying run(s), for highlighting
    cells: frozenset[int]


@dataclass(frozen=True)
class Draw:
    """Board full and nobody has a run."""


Conclusion = Union[Ongoing, Win, Draw]

ONGOING = Ongoing()
DRAW = Draw()


def find_runs(values: Sequence[Player], player: Player, win_length: int) -> list[tuple[int, int]]:
    """
    Return (start, end) inclusive bounds of every maximal run of `player`
    that is at least `win_length` long. Longer runs still qualify.
    """
    runs = []
    i = 0
    while i < len(values):
        if values[i] != player:
            i += 1
            continue
        start = i
        while i < len(values) and values[i] == player:
            i += 1
        if i - start >= win_length:
            runs.append((start, i - 1))
    return runs


def scan_line(board: Board, line: Sequence[int], player: Player, win_length: int) -> frozenset[int] | None:
    """Winning cells of `player` on one line, or None if the line holds no run."""
    if len(line) < win_length:
        return None
    values = [board.get_index(i) for i in line]
    runs = find_runs(values, player, win_length)
    if not runs:
        return None
    return frozenset(line[k] for start, end in runs for k in range(start, end + 1))


def evaluate(board: Board, win_length: int, lines: Iterable[Sequence[int]] | None = None) -> tuple[Conclusion, ...]:
    """
    Scan every line for both players. Returns one Win per qualifying
    (line, player) pair, `(DRAW,)` when there is no Win and the board is full,
    or an empty tuple while the game is ongoing.
    """
    if win_length < 1:
        raise ValueError(f"win length must be at least 1, got {win_length}")
    if lines is None:
        lines = generate_lines(board.size)

    conclusions: list[Conclusion] = []
    for line in lines:
        for player in MOVERS:
            cells = scan_line(board, line, player, win_length)
            if cells is not None:
                conclusions.append(Win(player, cells))

    if conclusions:
        LOGGER.debug("Found %d winning line(s)", len(conclusions))
        return tuple(conclusions)
    # Draw only once no Win exists anywhere
    if board.is_full():
        return (DRAW,)
    return ()


def reconcile(conclusions: Sequence[Conclusion]) -> Conclusion:
    """
    Collapse an evaluation into one outcome. A Win always beats Draw; with
    several Wins the first winning player is reported with all of its cells.
    """
    wins = [c for c in conclusions if isinstance(c, Win)]
    if wins:
        player = wins[0].player
        cells = frozenset().union(*(w.cells for w in wins if w.player == player))
        return Win(player, cells)
    if any(isinstance(c, Draw) for c in conclusions):
        return DRAW
    return ONGOING


def winners(conclusions: Sequence[Conclusion]) -> list[Player]:
    """Distinct winning players in the order they were found."""
    found = []
    for c in conclusions:
        if isinstance(c, Win) and c.player not in found:
            found.append(c.player)
    return found


def winning_cells(conclusions: Sequence[Conclusion]) -> frozenset[int]:
    """Union of every Win's cells; what a renderer should highlight."""
    return frozenset().union(*(c.cells for c in conclusions if isinstance(c, Win)))
