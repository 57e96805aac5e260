import curses
import logging
import time

import hydra
from omegaconf import DictConfig, OmegaConf

from slide2048.game import SIZE, Action, Game, advance, new_game
from slide2048.game.board import cell_index
from slide2048.render import CELL_WIDTH, format_cell, splash_text, status_line

log = logging.getLogger(__name__)

KEY_TO_ACTION = {
    curses.KEY_RIGHT: Action.MOVE_RIGHT,
    curses.KEY_LEFT: Action.MOVE_LEFT,
    curses.KEY_DOWN: Action.MOVE_DOWN,
    curses.KEY_UP: Action.MOVE_UP,
}
QUIT_KEYS = (27, ord("q"), ord("Q"))

HIGHLIGHT_PAIR = 1


def poll_keys(stdscr, game: Game) -> bool:
    """Drain pending keys into `game.action`. Returns False when the user quits."""
    while True:
        ch = stdscr.getch()
        if ch == -1:
            return True
        if ch in QUIT_KEYS:
            return False
        if ch in KEY_TO_ACTION:
            # later keys in the same batch replace earlier ones
            game.action = KEY_TO_ACTION[ch]


def draw(stdscr, game: Game, highlight: bool):
    stdscr.erase()
    h, w = stdscr.getmaxyx()

    board_width = 1 + SIZE * (CELL_WIDTH + 1)
    total_height = SIZE * 2 + 3
    if board_width > w or total_height > h:
        msg = f"Window too small: need {board_width}x{total_height}, have {w}x{h}"
        stdscr.addstr(0, 0, msg[: max(0, w - 1)])
        stdscr.refresh()
        return

    top = max(0, (h - total_height) // 2)
    left = max(0, (w - board_width) // 2)
    horiz = "+" + ("-" * CELL_WIDTH + "+") * SIZE
    for r in range(SIZE):
        stdscr.addstr(top + r * 2, left, horiz)
        stdscr.addstr(top + r * 2 + 1, left, "|")
        x = left + 1
        for c in range(SIZE):
            attr = curses.A_NORMAL
            if highlight and cell_index(r, c) == game.last_inserted:
                attr = curses.color_pair(HIGHLIGHT_PAIR) | curses.A_BOLD
            stdscr.addstr(top + r * 2 + 1, x, format_cell(int(game.board[r, c])), attr)
            stdscr.addstr(top + r * 2 + 1, x + CELL_WIDTH, "|")
            x += CELL_WIDTH + 1
    stdscr.addstr(top + SIZE * 2, left, horiz)
    stdscr.addstr(top + SIZE * 2 + 1, left, status_line(game)[: max(0, w - left - 1)])

    splash = splash_text(game.state)
    if splash is not None:
        lines = [splash, f"Score: {game.score}", f"Moves: {game.moves}", "Press 'q' to quit"]
        for i, line in enumerate(lines):
            y = top + 1 + i * 2
            x = max(0, (w - len(line)) // 2)
            stdscr.addstr(y, x, line[: max(0, w - x - 1)], curses.A_REVERSE)
    else:
        stdscr.addstr(top + SIZE * 2 + 2, left, "Arrows to move, 'q' to quit"[: max(0, w - left - 1)])
    stdscr.refresh()


def play_loop(stdscr, game: Game, frame_delay: float, highlight: bool):
    curses.curs_set(0)
    stdscr.nodelay(True)
    stdscr.keypad(True)
    if highlight and curses.has_colors():
        curses.start_color()
        curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_GREEN)

    while poll_keys(stdscr, game):
        advance(game)
        draw(stdscr, game, highlight)
        time.sleep(frame_delay)


@hydra.main(config_path="./conf", config_name="play", version_base=None)
def main(cfg: DictConfig):
    print(OmegaConf.to_yaml(cfg))
    game = new_game(seed=cfg.get("seed"), spawn_prob_one=float(cfg.spawn_prob_one))
    curses.wrapper(
        play_loop,
        game=game,
        frame_delay=float(cfg.frame_delay_ms) / 1000.0,
        highlight=bool(cfg.highlight_last_inserted),
    )
    log.info("Finished %s: score=%d moves=%d", game.state.value, game.score, game.moves)


if __name__ == "__main__":
    main()
