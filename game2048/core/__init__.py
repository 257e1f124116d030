"""
Pure board engine of the 2048 game.

It includes functions for creating and validating boards, counting empty cells, inserting tiles, sliding
the board in the four directions, scoring, and detecting the end of the game.
"""

from .errors import InvalidBoardError
from .gameboard import (
    as_board,
    calculate_score,
    count_empty_cells,
    empty_board,
    insert_cell,
    is_adjacent_cells_different,
    is_board_full,
    is_game_over,
)
from .gamemove import (
    ACTIONS,
    filter_empty_cells,
    legal_moves,
    move,
    slide,
    slide_down,
    slide_left,
    slide_right,
    slide_up,
)

__all__ = [
    "ACTIONS",
    "InvalidBoardError",
    "as_board",
    "calculate_score",
    "count_empty_cells",
    "empty_board",
    "filter_empty_cells",
    "insert_cell",
    "is_adjacent_cells_different",
    "is_board_full",
    "is_game_over",
    "legal_moves",
    "move",
    "slide",
    "slide_down",
    "slide_left",
    "slide_right",
    "slide_up",
]
