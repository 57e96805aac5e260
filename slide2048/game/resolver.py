import logging
from dataclasses import dataclass, field

import numpy as np

from .board import new_board
from .merge import Action, apply_move
from .spawner import NO_CELL, spawn_tile
from .state import GameState, accepts_input, next_state

log = logging.getLogger(__name__)


@dataclass
class Game:
    """Mutable game record, owned by a single driver.

    `score` is recomputed by `advance` and should not be set by callers.
    """

    board: np.ndarray = field(default_factory=new_board)
    state: GameState = GameState.PLAYING
    action: Action = Action.NONE
    score: int = 0
    moves: int = 0
    last_inserted: int = NO_CELL
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    spawn_prob_one: float = 0.9


def compute_score(board: np.ndarray) -> int:
    """Sum of `2 ** cell` over all 16 cells; an empty cell adds 2 ** 0 == 1."""
    return int((2 ** board.astype(np.int64)).sum())


def new_game(seed: int | None = None, rng: np.random.Generator | None = None, spawn_prob_one: float = 0.9) -> Game:
    """Empty board seeded with two random tiles."""
    if rng is None:
        rng = np.random.default_rng(seed)
    game = Game(rng=rng, spawn_prob_one=float(spawn_prob_one))
    spawn_tile(game.board, game.rng, game.spawn_prob_one)
    game.last_inserted = spawn_tile(game.board, game.rng, game.spawn_prob_one)
    game.score = compute_score(game.board)
    return game


def advance(game: Game) -> None:
    """Resolve one round: apply the pending action, spawn, update state and score."""
    if accepts_input(game.state):
        apply_move(game.board, game.action)
        if game.action != Action.NONE:
            # a tile is spawned even when the move left the board unchanged
            game.action = Action.NONE
            game.last_inserted = spawn_tile(game.board, game.rng, game.spawn_prob_one)
            game.moves += 1
            if game.last_inserted == NO_CELL:
                log.debug("Move %d spawned no tile, board is full", game.moves)
        game.state = next_state(game.state, game.board)
    game.score = compute_score(game.board)
