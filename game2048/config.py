"""
Configuration of a 2048 game session.
"""

from dataclasses import dataclass

from game2048.core.gameboard import GRID_COLUMNS, GRID_ROWS


@dataclass(frozen=True)
class GameConfig:
    """
    Parameters of a game session.

    Attributes
    ----------
    rows : int
        Number of rows of the board.
    cols : int
        Number of columns of the board.
    four_probability : float
        Probability that a spawned tile is a 4 instead of a 2.
    initial_tiles : int
        Number of tiles spawned when a game starts.
    """

    rows: int = GRID_ROWS
    cols: int = GRID_COLUMNS
    four_probability: float = 0.2
    initial_tiles: int = 2

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f'Board dimensions must be positive, got {self.rows}x{self.cols}')
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(f'four_probability must be in [0, 1], got {self.four_probability}')
        if not 0 <= self.initial_tiles <= self.rows * self.cols:
            raise ValueError(f'initial_tiles must be in [0, {self.rows * self.cols}], got {self.initial_tiles}')
