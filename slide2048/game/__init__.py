"""Board model, merge engine, spawner, state machine and round resolver."""

from .board import SIZE, WIN_EXPONENT, empty_cell_count, new_board, occupied_cell_count, tile_value
from .merge import Action, apply_move, preview_move
from .resolver import Game, advance, compute_score, new_game
from .spawner import NO_CELL, spawn_tile
from .state import GameState, has_lost, has_won, next_state

__all__ = [
    "SIZE",
    "WIN_EXPONENT",
    "NO_CELL",
    "Action",
    "Game",
    "GameState",
    "advance",
    "apply_move",
    "compute_score",
    "empty_cell_count",
    "has_lost",
    "has_won",
    "new_board",
    "new_game",
    "next_state",
    "occupied_cell_count",
    "preview_move",
    "spawn_tile",
    "tile_value",
]
