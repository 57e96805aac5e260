import logging
from enum import Enum

import numpy as np

from .board import SIZE, WIN_EXPONENT

log = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


def _check_shape(board: np.ndarray) -> None:
    if board.shape != (SIZE, SIZE):
        raise ValueError(f"Expected a {SIZE}x{SIZE} board, got shape {board.shape}")


def has_won(board: np.ndarray) -> bool:
    _check_shape(board)
    return bool((board == WIN_EXPONENT).any())


def has_lost(board: np.ndarray) -> bool:
    """Full board with no two horizontally or vertically adjacent equal cells."""
    _check_shape(board)
    if (board == 0).any():
        return False
    if (board[:-1, :] == board[1:, :]).any():
        return False
    if (board[:, :-1] == board[:, 1:]).any():
        return False
    return True


def accepts_input(state: GameState) -> bool:
    return state is GameState.PLAYING


def next_state(state: GameState, board: np.ndarray) -> GameState:
    """Won and Lost are terminal; a win is reported before a loss."""
    if state is not GameState.PLAYING:
        return state
    if has_won(board):
        new = GameState.WON
    elif has_lost(board):
        new = GameState.LOST
    else:
        return GameState.PLAYING
    log.debug("Game state %s -> %s", state.value, new.value)
    return new
