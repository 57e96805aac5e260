import numpy as np

SIZE = 4
CELLS = SIZE * SIZE
# 2 ** 11 == 2048
WIN_EXPONENT = 11


def new_board() -> np.ndarray:
    return np.zeros((SIZE, SIZE), dtype=np.int32)


def empty_cell_count(board: np.ndarray) -> int:
    return int((board == 0).sum())


def occupied_cell_count(board: np.ndarray) -> int:
    return int((board != 0).sum())


def cell_index(row: int, col: int) -> int:
    """Flat index of (row, col), counted row by row."""
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise IndexError(f"Cell out of range: ({row}, {col})")
    return row * SIZE + col


def cell_position(index: int) -> tuple[int, int]:
    if not 0 <= index < CELLS:
        raise IndexError(f"Cell index out of range: {index}")
    return divmod(index, SIZE)


def tile_value(exponent: int) -> int:
    """Displayed value of a cell; empty cells show 0."""
    return 0 if exponent == 0 else 2 ** int(exponent)
