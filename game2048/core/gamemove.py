"""
Move resolution for the 2048 game.

A single primitive, ``slide``, moves one line of cells towards its start. The four board moves are
built from it by reversing and transposing the board, so every direction shares the same merge rules.
"""

from numpy import array_equal, ascontiguousarray, int64, ndarray, zeros

from game2048.core.errors import InvalidBoardError
from game2048.core.gameboard import as_board, as_cells

# ##: All moves, indexed like the actions of the simulator (0: left, 1: up, 2: right, 3: down).
ACTIONS = {'left': 0, 'up': 1, 'right': 2, 'down': 3}


def filter_empty_cells(row) -> ndarray:
    """Return the non-zero cells of a row, in order."""
    cells = as_cells(row, ndim=1)
    return cells[cells != 0]


def _slide_cells(cells: ndarray, width: int) -> ndarray:
    non_zero = cells[cells != 0]
    merged = []

    # ##: A merged tile never merges again in the same move.
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged.append(non_zero[i] * 2)
            i += 2
        else:
            merged.append(non_zero[i])
            i += 1

    result = zeros(width, dtype=int64)
    result[: len(merged)] = merged
    return result


def slide(row, cols: int | None = None) -> ndarray:
    """
    Slide and merge the cells of one row towards its start.

    Parameters
    ----------
    row : array_like
        One line of the board.
    cols : int, optional
        Length of the row. Defaults to the actual length; when given it must match it.

    Returns
    -------
    ndarray
        A new row of the same length.

    Notes
    -----
    - Empty cells are removed, keeping the order of the tiles.
    - Pairs of equal tiles are merged from the start of the row: ``[2, 2, 2]`` becomes ``[4, 2, 0]``.
    - The row is padded with zeros at the end.
    """
    cells = as_cells(row, ndim=1)
    if cols is not None and cols != len(cells):
        raise InvalidBoardError(f'Expected a row of {cols} cells, got {len(cells)}')
    return _slide_cells(cells, len(cells))


def _slide_rows(board: ndarray) -> ndarray:
    result = zeros(board.shape, dtype=int64)
    for i, row in enumerate(board):
        result[i] = _slide_cells(row, board.shape[1])
    return result


def slide_left(board, rows: int | None = None, cols: int | None = None) -> ndarray:
    """Slide every row to the left."""
    return _slide_rows(as_board(board, rows, cols))


def slide_right(board, rows: int | None = None, cols: int | None = None) -> ndarray:
    """Slide every row to the right."""
    mirrored = as_board(board, rows, cols)[:, ::-1]
    return ascontiguousarray(_slide_rows(mirrored)[:, ::-1])


def slide_up(board, rows: int | None = None, cols: int | None = None) -> ndarray:
    """Slide every column upwards."""
    transposed = as_board(board, rows, cols).T
    return ascontiguousarray(_slide_rows(transposed).T)


def slide_down(board, rows: int | None = None, cols: int | None = None) -> ndarray:
    """Slide every column downwards."""
    transposed = as_board(board, rows, cols).T[:, ::-1]
    return ascontiguousarray(_slide_rows(transposed)[:, ::-1].T)


# ##: Move functions by action index.
_MOVES = (slide_left, slide_up, slide_right, slide_down)


def move(board, direction: str | int) -> ndarray:
    """
    Apply a move to the board.

    Parameters
    ----------
    board : array_like
        The board to move.
    direction : str or int
        Either a name from ``ACTIONS`` or the matching action index (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    ndarray
        The board after the move.

    Raises
    ------
    ValueError
        If the direction is unknown.
    """
    if isinstance(direction, str):
        if direction not in ACTIONS:
            raise ValueError(f'Unknown direction: {direction!r}')
        direction = ACTIONS[direction]
    if direction not in range(len(_MOVES)):
        raise ValueError(f'Unknown direction: {direction!r}')
    return _MOVES[direction](board)


def legal_moves(board) -> list[str]:
    """
    Determine the moves that change the board.

    Parameters
    ----------
    board : array_like
        The current board.

    Returns
    -------
    list[str]
        Names of the moves, in ``ACTIONS`` order, whose result differs from the board.
    """
    values = as_board(board)
    return [name for name, action in ACTIONS.items() if not array_equal(_MOVES[action](values), values)]
