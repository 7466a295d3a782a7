"""Player marks: empty cell, first mover, second mover."""

from enum import IntEnum


class Player(IntEnum):
    # NONE marks an empty cell and never moves
    NONE = 0
    FIRST = 1
    SECOND = 2

    @property
    def opponent(self):
        """Return the other mover; raise for the empty mark."""
        if self is Player.FIRST:
            return Player.SECOND
        if self is Player.SECOND:
            return Player.FIRST
        raise ValueError("Player.NONE has no opponent")

    @property
    def is_mover(self):
        return self is not Player.NONE


MOVERS = (Player.FIRST, Player.SECOND)
