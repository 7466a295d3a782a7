"""Board state container and linear/2D coordinate conversion."""

from __future__ import annotations

from .errors import ConfigError
from .Player import Player


def linear_to_coord(i: int, size: int) -> tuple[int, int]:
    """Convert a flattened index to (x, y); row-major, x varies fastest."""
    if not 0 <= i < size * size:
        raise IndexError(f"cell index {i} out of range for {size}x{size} board")
    return i % size, i // size


def coord_to_linear(x: int, y: int, size: int) -> int:
    if not (0 <= x < size and 0 <= y < size):
        raise IndexError(f"coordinate ({x}, {y}) out of range for {size}x{size} board")
    return y * size + x


class Board:
    """
    Square grid of Player marks. Boards are never mutated after construction:
    `place` hands back a new board so a proposed move can't leak into the
    board currently on display.
    """

    def __init__(self, size=15, cells=None):
        if size < 1:
            raise ConfigError(f"board size must be positive, got {size}")
        self.size = size
        if cells is None:
            cells = [[Player.NONE] * size for _ in range(size)]
        # Store cells as cells[y][x]
        self.cells = tuple(tuple(Player(v) for v in row) for row in cells)
        if len(self.cells) != size or any(len(row) != size for row in self.cells):
            raise ValueError(f"cells must be a {size}x{size} grid")

    @classmethod
    def create_empty(cls, size, win_length=None):
        """Empty board; a win length longer than the board is rejected."""
        if win_length is not None:
            if win_length < 1:
                raise ConfigError(f"win length must be at least 1, got {win_length}")
            if size < win_length:
                raise ConfigError(
                    f"board size {size} is smaller than win length {win_length}; no line could ever win"
                )
        return cls(size)

    @classmethod
    def from_rows(cls, rows):
        """Build a board from a list of rows (handy for tests and fixtures)."""
        return cls(len(rows), cells=rows)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self):
        return hash((self.size, self.cells))

    def __repr__(self):
        return f"Board(size={self.size}, move_count={self.move_count})"

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x, y) -> Player:
        if not self.in_bounds(x, y):
            raise IndexError(f"coordinate ({x}, {y}) out of range for {self.size}x{self.size} board")
        return self.cells[y][x]

    def get_index(self, i) -> Player:
        x, y = linear_to_coord(i, self.size)
        return self.cells[y][x]

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] == Player.NONE

    def place(self, x, y, player) -> Board:
        """Return a copy with `player` at (x, y); raise if out of bounds or occupied."""
        player = Player(player)
        if not player.is_mover:
            raise ValueError("cannot place Player.NONE")
        if not self.in_bounds(x, y):
            raise IndexError(f"coordinate ({x}, {y}) out of range for {self.size}x{self.size} board")
        if self.cells[y][x] != Player.NONE:
            raise ValueError("cell already occupied")
        rows = [list(row) for row in self.cells]
        rows[y][x] = player
        return Board(self.size, cells=rows)

    def place_index(self, i, player) -> Board:
        x, y = linear_to_coord(i, self.size)
        return self.place(x, y, player)

    def clone(self):
        return Board(self.size, cells=self.cells)

    @property
    def move_count(self):
        return sum(1 for row in self.cells for v in row if v != Player.NONE)

    def empty_indices(self):
        """Linear indices of every open cell, in row-major order."""
        return [y * self.size + x for y in range(self.size) for x in range(self.size) if self.cells[y][x] == Player.NONE]

    def is_full(self):
        return all(v != Player.NONE for row in self.cells for v in row)
