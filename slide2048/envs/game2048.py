import numpy as np
import gymnasium as gym
from gymnasium import spaces

from slide2048.game import SIZE, WIN_EXPONENT, Action, Game, GameState, advance, new_game, preview_move
from slide2048.render import format_board, status_line


class Game2048Env(gym.Env):
    """
    Gymnasium-compatible wrapper around the exponent-encoded 2048 game.

    - Actions: 0=up, 1=down, 2=left, 3=right
    - Observation: (4, 4) int32 grid of exponents (0 = empty, e -> 2**e)
    - Reward: change in score produced by the step
    - Terminated: when a 2048 tile appears
    - Truncated: when the board is full with no equal neighbours
    """

    metadata = {"render_modes": ["human"]}

    # discrete action -> game action
    ACTIONS = (Action.MOVE_UP, Action.MOVE_DOWN, Action.MOVE_LEFT, Action.MOVE_RIGHT)

    def __init__(self, spawn_prob_one: float = 0.9, render_mode: str | None = None):
        super().__init__()
        self.spawn_prob_one = float(spawn_prob_one)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(len(self.ACTIONS))
        self.observation_space = spaces.Box(low=0, high=WIN_EXPONENT, shape=(SIZE, SIZE), dtype=np.int32)

        self.game: Game | None = None

    def reset(self, *, seed: int | None = None, options: dict | None = None):
        super().reset(seed=seed)
        self.game = new_game(rng=self.np_random, spawn_prob_one=self.spawn_prob_one)
        return self.game.board.copy(), self._info()

    def step(self, action: int):
        if not self.action_space.contains(action):
            raise gym.error.InvalidAction(f"Invalid action: {action}")
        assert self.game is not None

        valid_before = self._valid_actions()
        prev_score = self.game.score
        was_playing = self.game.state is GameState.PLAYING

        self.game.action = self.ACTIONS[int(action)]
        advance(self.game)

        reward = self.game.score - prev_score
        terminated = self.game.state is GameState.WON
        truncated = self.game.state is GameState.LOST

        info = self._info()
        info.update(
            {
                "moved": was_playing and bool(valid_before[int(action)]),
                "valid_actions": valid_before,
                "valid_actions_next": self._valid_actions(),
            }
        )
        return self.game.board.copy(), float(reward), bool(terminated), bool(truncated), info

    def render(self):
        if self.render_mode == "human" or self.render_mode is None:
            assert self.game is not None
            for line in format_board(self.game.board):
                print(line)
            print(status_line(self.game) + "\n")

    # --- Internal helpers ---
    def _info(self) -> dict:
        assert self.game is not None
        return {
            "score": self.game.score,
            "moves": self.game.moves,
            "last_inserted": self.game.last_inserted,
            "state": self.game.state.value,
        }

    def _valid_actions(self) -> np.ndarray:
        """Boolean mask of discrete actions that would change the board."""
        assert self.game is not None
        board = self.game.board
        return np.array([not np.array_equal(preview_move(board, a), board) for a in self.ACTIONS], dtype=bool)
