"""Lightness of the cell colours used to display a board."""

from numpy import log2

from game2048.core.errors import InvalidBoardError

# ##: Background lightness (in %) of an empty cell.
EMPTY_LIGHTNESS = 100.0


def cell_background_color(value: int) -> float:
    """
    Compute the background lightness of a cell.

    The lightness decreases by 10 points each time the tile doubles: a 2 gives 90, a 1024 gives 0.

    Parameters
    ----------
    value : int
        The value of the cell.

    Returns
    -------
    float
        The background lightness, in percent. An empty cell gets ``EMPTY_LIGHTNESS``.
    """
    if value < 0:
        raise InvalidBoardError(f'Cell value must not be negative, got {value}')
    if value == 0:
        return EMPTY_LIGHTNESS
    return float(100 - log2(value) * 10)


def cell_text_color(background_lightness: float) -> float:
    """
    Compute the text lightness of a cell from its background lightness.

    Parameters
    ----------
    background_lightness : float
        The background lightness, in percent.

    Returns
    -------
    float
        A light text (95) on dark backgrounds, a dark text (18) otherwise.
    """
    return 95.0 if background_lightness <= 50 else 18.0
