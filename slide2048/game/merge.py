from enum import IntEnum

import numpy as np


class Action(IntEnum):
    NONE = 0
    MOVE_RIGHT = 1
    MOVE_LEFT = 2
    MOVE_DOWN = 3
    MOVE_UP = 4


# (axis, toward_end): axis 1 walks rows, axis 0 walks columns;
# toward_end means tiles travel to the high-index edge.
SCANS = {
    Action.MOVE_RIGHT: (1, True),
    Action.MOVE_LEFT: (1, False),
    Action.MOVE_DOWN: (0, True),
    Action.MOVE_UP: (0, False),
}


def merge_step(line: np.ndarray, target: int, source: int) -> bool:
    """Pull `line[source]` into `line[target]`.

    Returns True when the scan for this target has to stop, either because
    the two cells merged or because a different tile blocks the target.
    """
    if line[target] == 0:
        line[target] = line[source]
        line[source] = 0
        return False
    if line[target] == line[source]:
        line[target] += 1
        line[source] = 0
        return True
    return bool(line[source] != 0)


def merge_line(line: np.ndarray) -> None:
    """Compact and merge one line in place; `line[0]` sits at the target edge."""
    n = len(line)
    for target in range(n - 1):
        for source in range(target + 1, n):
            if merge_step(line, target, source):
                break


def apply_move(board: np.ndarray, action: Action) -> None:
    """Slide every line of `board` in the direction of `action`, in place."""
    if action == Action.NONE:
        return
    axis, toward_end = SCANS[Action(action)]
    lines = board if axis == 1 else board.T
    # rows of `board` / `board.T` are views, so merging writes through
    for line in lines:
        merge_line(line[::-1] if toward_end else line)


def preview_move(board: np.ndarray, action: Action) -> np.ndarray:
    moved = board.copy()
    apply_move(moved, action)
    return moved
