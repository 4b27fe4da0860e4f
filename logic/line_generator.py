"""
Line generator for variable-size TicTacToe.
Computes every row, column, and diagonal that wins the game when one
player fills it.
"""

import logging
from functools import lru_cache
from typing import List, Tuple

import numpy as np

from .board import BoardShape
from .config import GameConfig

logger = logging.getLogger(__name__)

# Cell indices of one candidate winning line
Line = Tuple[int, ...]


def _index_grid(shape: BoardShape) -> np.ndarray:
    """rows x columns array holding the row-major index of every cell."""
    return np.arange(shape.cell_count).reshape(shape.rows, shape.columns)


def winning_rows(shape: BoardShape) -> List[Line]:
    """One line per row, left to right."""
    return [tuple(row) for row in _index_grid(shape).tolist()]


def winning_columns(shape: BoardShape) -> List[Line]:
    """One line per column, top to bottom."""
    return [tuple(col) for col in _index_grid(shape).T.tolist()]


def winning_diagonals(
    shape: BoardShape,
    min_length: int = GameConfig.MIN_LINE_LENGTH
) -> List[Line]:
    """
    All diagonals with at least `min_length` cells.

    Down-right diagonals start at every top-edge cell, then at every
    left-edge cell below the corner. Down-left diagonals start at every
    top-edge cell (right to left), then at every right-edge cell below
    the corner. Each diagonal lists its cells top to bottom.

    Args:
        shape: The board shape.
        min_length: Shorter diagonals are dropped.

    Returns:
        List of lines, down-right family first.
    """
    grid = _index_grid(shape)
    # Down-left diagonals of grid are down-right diagonals of the mirror image
    mirrored = np.fliplr(grid)

    # offset k >= 0 starts on the top edge at column k,
    # offset -k starts on the left edge at row k
    offsets = list(range(shape.columns)) + [-row for row in range(1, shape.rows)]

    diagonals = []
    for source in (grid, mirrored):
        for offset in offsets:
            diagonal = tuple(source.diagonal(offset=offset).tolist())
            if len(diagonal) >= min_length:
                diagonals.append(diagonal)

    return diagonals


@lru_cache(maxsize=None)
def lines_for(
    shape: BoardShape,
    min_length: int = GameConfig.MIN_LINE_LENGTH
) -> Tuple[Line, ...]:
    """
    Every candidate winning line for a board shape.

    Order is rows, then columns, then diagonals. The result depends only
    on the arguments and is cached.
    """
    lines = (
        winning_rows(shape)
        + winning_columns(shape)
        + winning_diagonals(shape, min_length)
    )
    logger.debug("Computed %d winning lines for a %s board", len(lines), shape)
    return tuple(lines)
