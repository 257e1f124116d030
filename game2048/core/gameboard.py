"""
Board construction and inspection for the 2048 game.

Boards are 2D ``int64`` arrays where 0 is an empty cell and any other value is a tile (a power of two,
at least 2). Every function returns a new array and leaves its input untouched.
"""

import logging

from numpy import any as np_any
from numpy import argwhere, array, int64, integer, issubdtype, ndarray, zeros

from game2048.core.errors import InvalidBoardError

logger = logging.getLogger(__name__)

# ##: Default grid dimensions.
GRID_ROWS = 4
GRID_COLUMNS = 4


def _is_integer(value) -> bool:
    return isinstance(value, (int, integer)) and not isinstance(value, bool)


def _is_tile_value(value) -> bool:
    return _is_integer(value) and value >= 2 and value & (value - 1) == 0


def as_cells(cells, ndim: int) -> ndarray:
    """
    Convert cells to a fresh ``int64`` array and validate them.

    Parameters
    ----------
    cells : array_like
        A board (``ndim=2``) or a row (``ndim=1``).
    ndim : int
        Expected number of dimensions.

    Returns
    -------
    ndarray
        A copy of the cells as an ``int64`` array.

    Raises
    ------
    InvalidBoardError
        If the cells are ragged, have the wrong shape, are not integers, are negative, or hold a value
        that is not a power of two.
    """
    try:
        values = array(cells)
    except ValueError as error:
        raise InvalidBoardError(f'Cells are not rectangular: {error}') from error

    if values.ndim != ndim:
        raise InvalidBoardError(f'Expected {ndim} dimension(s), got {values.ndim}')
    if 0 in values.shape:
        raise InvalidBoardError(f'Cells must not be empty, got shape {values.shape}')
    if not issubdtype(values.dtype, integer):
        raise InvalidBoardError(f'Cells must be integers, got {values.dtype}')

    values = values.astype(int64)
    if np_any(values < 0):
        raise InvalidBoardError('Cells must not be negative')

    # ##: Tiles are powers of two; ``v & (v - 1)`` clears the lowest set bit.
    tiles = values[values != 0]
    if np_any((tiles == 1) | ((tiles & (tiles - 1)) != 0)):
        raise InvalidBoardError(f'Tiles must be powers of two greater than 1, got {sorted(set(tiles.tolist()))}')
    return values


def as_board(board, rows: int | None = None, cols: int | None = None) -> ndarray:
    """
    Validate a board and return it as a new ``int64`` array.

    Parameters
    ----------
    board : array_like
        The board, as a nested list or a 2D array.
    rows : int, optional
        Expected number of rows. Taken from the board when omitted.
    cols : int, optional
        Expected number of columns. Taken from the board when omitted.

    Returns
    -------
    ndarray
        A validated copy of the board.

    Raises
    ------
    InvalidBoardError
        If the board is malformed or does not have the expected dimensions.
    """
    values = as_cells(board, ndim=2)
    if rows is not None and values.shape[0] != rows:
        raise InvalidBoardError(f'Expected {rows} rows, got {values.shape[0]}')
    if cols is not None and values.shape[1] != cols:
        raise InvalidBoardError(f'Expected {cols} columns, got {values.shape[1]}')
    return values


def empty_board(rows: int = GRID_ROWS, cols: int = GRID_COLUMNS) -> ndarray:
    """
    Create a board without any tile.

    Parameters
    ----------
    rows : int, optional
        Number of rows (default is 4).
    cols : int, optional
        Number of columns (default is 4).

    Returns
    -------
    ndarray
        An all-zero board of shape ``(rows, cols)``.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f'Board dimensions must be positive, got {rows}x{cols}')
    return zeros((rows, cols), dtype=int64)


def count_empty_cells(board) -> int:
    """Count the cells equal to 0."""
    return int((as_board(board) == 0).sum())


def is_board_full(board) -> bool:
    """Check whether no empty cell is left."""
    return count_empty_cells(board) == 0


def is_adjacent_cells_different(board, rows: int | None = None, cols: int | None = None) -> bool:
    """
    Check that no two neighbouring cells hold the same value.

    Parameters
    ----------
    board : array_like
        The board to check.
    rows : int, optional
        Expected number of rows.
    cols : int, optional
        Expected number of columns.

    Returns
    -------
    bool
        True if every horizontal and vertical pair of neighbours differs, False otherwise.

    Notes
    -----
    Empty cells take part in the comparison: two adjacent empty cells count as equal. The result is
    therefore only meaningful on a full board, see ``is_game_over``.
    """
    values = as_board(board, rows, cols)
    horizontal = values[:, :-1] == values[:, 1:]
    vertical = values[:-1, :] == values[1:, :]
    return not (horizontal.any() or vertical.any())


def is_game_over(board) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : array_like
        The board to check.

    Returns
    -------
    bool
        True if the board is full and no two adjacent tiles can merge, False otherwise.
    """
    values = as_board(board)
    return is_board_full(values) and is_adjacent_cells_different(values)


def insert_cell(index: int, value: int, board, rows: int | None = None, cols: int | None = None) -> ndarray:
    """
    Place a tile into the n-th empty cell of the board.

    Parameters
    ----------
    index : int
        Position of the target among the empty cells, counted in row-major order. Must lie in
        ``[0, count_empty_cells(board))``.
    value : int
        The tile to place, usually 2 or 4.
    board : array_like
        The board to insert into. Not modified.
    rows : int, optional
        Expected number of rows.
    cols : int, optional
        Expected number of columns.

    Returns
    -------
    ndarray
        A new board with the tile placed.

    Raises
    ------
    InvalidBoardError
        If the board is malformed or ``value`` is not a tile value.

    Notes
    -----
    An index outside the empty cells range, or one that is not an integer, writes nothing: an unchanged
    copy of the board is returned.
    """
    if not _is_tile_value(value):
        raise InvalidBoardError(f'Tile value must be a power of two greater than 1, got {value}')

    new_board = as_board(board, rows, cols)
    empty_cells = argwhere(new_board == 0)
    if _is_integer(index) and 0 <= index < len(empty_cells):
        new_board[tuple(empty_cells[index])] = value
    else:
        logger.debug('Ignored insertion at index %r, only %d empty cells', index, len(empty_cells))
    return new_board


def calculate_score(board) -> int:
    """
    Calculate the score of the board.

    Parameters
    ----------
    board : array_like
        The board to score.

    Returns
    -------
    int
        The sum of every cell on the board.
    """
    return int(as_board(board).sum())
