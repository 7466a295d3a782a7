"""Candidate line enumeration: rows, columns and both diagonal families."""

from __future__ import annotations

import logging
from functools import lru_cache

LOGGER = logging.getLogger(__name__)

Line = tuple[int, ...]


def _walk(size: int, x: int, y: int, dx: int, dy: int) -> Line:
    """Collect linear indices from (x, y) stepping (dx, dy) until the edge."""
    indices = []
    while 0 <= x < size and 0 <= y < size:
        indices.append(y * size + x)
        x += dx
        y += dy
    return tuple(indices)


def rows(size: int) -> tuple[Line, ...]:
    return tuple(_walk(size, 0, y, 1, 0) for y in range(size))


def columns(size: int) -> tuple[Line, ...]:
    return tuple(_walk(size, x, 0, 0, 1) for x in range(size))


def diagonals(size: int) -> tuple[Line, ...]:
    """
    Top-left to bottom-right diagonals, 2N-1 of them with lengths 1..N..1.
    Ordered from the top-right corner cell down to the bottom-left corner cell.
    """
    lines = []
    # Starts on the top edge, right to left (includes the main diagonal)
    for x0 in range(size - 1, -1, -1):
        lines.append(_walk(size, x0, 0, 1, 1))
    # Then down the left edge
    for y0 in range(1, size):
        lines.append(_walk(size, 0, y0, 1, 1))
    return tuple(lines)


def anti_diagonals(size: int) -> tuple[Line, ...]:
    """
    Top-right to bottom-left diagonals, 2N-1 of them with lengths 1..N..1.
    Ordered from the top-left corner cell down to the bottom-right corner cell.
    """
    lines = []
    # Starts on the top edge, left to right (includes the anti-diagonal)
    for x0 in range(size):
        lines.append(_walk(size, x0, 0, -1, 1))
    # Then down the right edge
    for y0 in range(1, size):
        lines.append(_walk(size, size - 1, y0, -1, 1))
    return tuple(lines)


@lru_cache(maxsize=None)
def generate_lines(size: int) -> tuple[Line, ...]:
    """Every line worth scanning on a size x size board. Depends only on size."""
    if size < 1:
        raise ValueError(f"board size must be positive, got {size}")
    lines = rows(size) + columns(size) + diagonals(size) + anti_diagonals(size)
    LOGGER.debug("Built %d lines for %dx%d board", len(lines), size, size)
    return lines
