"""Text rendering shared by the terminal driver and `Game2048Env.render`."""

import numpy as np

from .game import NO_CELL, Game, GameState, tile_value
from .game.board import SIZE

CELL_WIDTH = 6

SPLASH = {
    GameState.WON: "YOU HAVE WON",
    GameState.LOST: "YOU HAVE LOST",
}


def format_cell(exponent: int, highlighted: bool = False, width: int = CELL_WIDTH) -> str:
    if exponent == 0:
        return " " * width
    text = str(tile_value(exponent))
    if highlighted:
        text = f"*{text}*"
    return f"{text:^{width}}"


def format_board(board: np.ndarray, last_inserted: int | None = None, width: int = CELL_WIDTH) -> list[str]:
    """Bordered grid of displayed values, one string per line.

    If `last_inserted` is a flat cell index, that tile is wrapped in `*`.
    """
    horiz = "+" + ("-" * width + "+") * SIZE
    lines = [horiz]
    for r in range(SIZE):
        cells = []
        for c in range(SIZE):
            highlighted = last_inserted not in (None, NO_CELL) and r * SIZE + c == last_inserted
            cells.append(format_cell(int(board[r, c]), highlighted, width))
        lines.append("|" + "|".join(cells) + "|")
        lines.append(horiz)
    return lines


def status_line(game: Game) -> str:
    return f"2048 - Score = {game.score}, Moves = {game.moves}"


def splash_text(state: GameState) -> str | None:
    return SPLASH.get(state)
