"""slide2048: a 4x4 exponent-encoded 2048 game.

Expose the core game and the Gymnasium environment `Game2048Env`.
"""

from .envs.game2048 import Game2048Env
from .game import Action, Game, GameState, advance, new_game

__all__ = ["Action", "Game", "Game2048Env", "GameState", "advance", "new_game"]
