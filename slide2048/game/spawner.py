import logging

import numpy as np

from .board import SIZE

log = logging.getLogger(__name__)

# Returned by `spawn_tile` when the board has no empty cell.
NO_CELL = -1


def spawn_tile(board: np.ndarray, rng: np.random.Generator, prob_one: float = 0.9) -> int:
    """Place a new tile on a uniformly chosen empty cell.

    The tile is exponent 1 (a "2") with probability `prob_one`, otherwise
    exponent 2 (a "4"). Returns the flat index of the cell, or `NO_CELL`
    if the board is full, in which case the board is left untouched.
    """
    if not 0.0 <= prob_one <= 1.0:
        raise ValueError(f"prob_one must be in [0, 1], got {prob_one}")
    empty = np.flatnonzero(board.reshape(-1) == 0)
    if empty.size == 0:
        log.debug("No empty cell to spawn a tile on")
        return NO_CELL
    index = int(empty[rng.integers(0, len(empty))])
    exponent = 1 if rng.random() < prob_one else 2
    row, col = divmod(index, SIZE)
    board[row, col] = exponent
    log.debug("Spawned exponent %d at (%d, %d)", exponent, row, col)
    return index
