"""
Board size randomizer.
Picks the dimension of a new square board.
"""

import random
from typing import Optional

from .board import BoardShape
from .config import GameConfig


def random_board_size(
    rng: Optional[random.Random] = None,
    config: Optional[GameConfig] = None
) -> int:
    """
    Uniformly pick a board size from MIN_BOARD_SIZE up to
    MIN_BOARD_SIZE + BOARD_SIZE_RANGE - 1 (3..6 by default).

    Args:
        rng: Random source. Uses the module-level generator if not provided.
        config: Game configuration. Uses defaults if not provided.
    """
    config = config or GameConfig()
    rng = rng or random
    return config.MIN_BOARD_SIZE + rng.randrange(config.BOARD_SIZE_RANGE)


def random_board_shape(
    rng: Optional[random.Random] = None,
    config: Optional[GameConfig] = None
) -> BoardShape:
    """A square BoardShape with a random size."""
    return BoardShape.square(random_board_size(rng, config))
