import numpy as np

from slide2048.game.merge import Action, apply_move, merge_line, merge_step, preview_move
from slide2048.game.resolver import compute_score


def line(*values):
    return np.array(values, dtype=np.int32)


def board_with_row(*values):
    board = np.zeros((4, 4), dtype=np.int32)
    board[0] = values
    return board


def test_merge_step_moves_into_empty_target():
    cells = line(0, 3)
    assert merge_step(cells, 0, 1) is False
    assert cells.tolist() == [3, 0]


def test_merge_step_merges_and_stops():
    cells = line(2, 2)
    assert merge_step(cells, 0, 1) is True
    assert cells.tolist() == [3, 0]


def test_merge_step_blocked_by_different_tile():
    cells = line(2, 1)
    assert merge_step(cells, 0, 1) is True
    assert cells.tolist() == [2, 1]


def test_merge_step_skips_empty_source():
    cells = line(2, 0)
    assert merge_step(cells, 0, 1) is False
    assert cells.tolist() == [2, 0]


def test_merge_line_cases():
    cases = [
        ((1, 1, 0, 0), (2, 0, 0, 0)),
        ((1, 0, 0, 1), (2, 0, 0, 0)),
        ((1, 1, 1, 1), (2, 2, 0, 0)),
        ((2, 1, 1, 0), (2, 2, 0, 0)),
        ((1, 1, 2, 0), (2, 2, 0, 0)),
        ((0, 0, 0, 3), (3, 0, 0, 0)),
        ((1, 2, 3, 4), (1, 2, 3, 4)),
        ((3, 3, 3, 0), (4, 3, 0, 0)),
    ]
    for before, after in cases:
        cells = line(*before)
        merge_line(cells)
        assert tuple(cells.tolist()) == after, before


def test_merged_tile_does_not_merge_again():
    cells = line(2, 1, 1, 0)
    merge_line(cells)
    # 1+1 -> 2 must not fold into the leading 2 within one move
    assert cells.tolist() == [2, 2, 0, 0]


def test_move_right_merges_to_edge():
    board = board_with_row(1, 1, 0, 0)
    apply_move(board, Action.MOVE_RIGHT)
    assert board[0].tolist() == [0, 0, 0, 2]


def test_all_directions():
    board = np.zeros((4, 4), dtype=np.int32)
    board[1, 1] = 1
    board[1, 2] = 1
    assert preview_move(board, Action.MOVE_LEFT)[1].tolist() == [2, 0, 0, 0]
    assert preview_move(board, Action.MOVE_RIGHT)[1].tolist() == [0, 0, 0, 2]
    down = preview_move(board, Action.MOVE_DOWN)
    assert down[3].tolist() == [0, 1, 1, 0]
    up = preview_move(board, Action.MOVE_UP)
    assert up[0].tolist() == [0, 1, 1, 0]


def test_vertical_merge():
    board = np.zeros((4, 4), dtype=np.int32)
    board[:, 2] = [1, 1, 2, 2]
    apply_move(board, Action.MOVE_DOWN)
    assert board[:, 2].tolist() == [0, 0, 2, 3]
    board[:, 2] = [1, 1, 2, 2]
    apply_move(board, Action.MOVE_UP)
    assert board[:, 2].tolist() == [2, 3, 0, 0]


def test_none_action_is_noop():
    board = board_with_row(1, 0, 1, 0)
    apply_move(board, Action.NONE)
    assert board[0].tolist() == [1, 0, 1, 0]


def test_preview_leaves_input_untouched():
    board = board_with_row(1, 1, 0, 0)
    moved = preview_move(board, Action.MOVE_LEFT)
    assert board[0].tolist() == [1, 1, 0, 0]
    assert moved[0].tolist() == [2, 0, 0, 0]


def test_repeated_move_reaches_fixed_point():
    rng = np.random.default_rng(11)
    for action in (Action.MOVE_RIGHT, Action.MOVE_LEFT, Action.MOVE_DOWN, Action.MOVE_UP):
        for _ in range(25):
            board = rng.integers(0, 4, size=(4, 4)).astype(np.int32)
            for _ in range(4):
                apply_move(board, action)
            saturated = board.copy()
            apply_move(board, action)
            assert np.array_equal(board, saturated)


def test_move_never_adds_tiles():
    rng = np.random.default_rng(5)
    for _ in range(50):
        board = rng.integers(0, 5, size=(4, 4)).astype(np.int32)
        for action in (Action.MOVE_RIGHT, Action.MOVE_LEFT, Action.MOVE_DOWN, Action.MOVE_UP):
            moved = preview_move(board, action)
            assert (moved != 0).sum() <= (board != 0).sum()
            # each merge turns 2 * 2**e into 2**(e+1) plus one empty cell
            merges = int((board != 0).sum() - (moved != 0).sum())
            assert compute_score(moved) - compute_score(board) == merges
