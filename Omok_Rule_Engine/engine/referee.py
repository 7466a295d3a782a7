"""Move validation: bounds and occupancy."""

from ..Board import linear_to_coord


def check_move(index, board):
    """
    Return True if `index` names an empty cell, False if it is occupied.
    Raises IndexError for an index outside the board; an occupied cell is a
    rejected move, not an error.
    """
    x, y = linear_to_coord(index, board.size)
    return board.is_empty(x, y)
