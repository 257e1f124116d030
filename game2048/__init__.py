# -*- coding: utf-8 -*-
"""
Core game logic of the 2048 sliding-tile puzzle.
"""

from .config import GameConfig
from .core import (
    ACTIONS,
    InvalidBoardError,
    calculate_score,
    count_empty_cells,
    empty_board,
    insert_cell,
    is_adjacent_cells_different,
    is_board_full,
    is_game_over,
    legal_moves,
    move,
    slide,
    slide_down,
    slide_left,
    slide_right,
    slide_up,
)
from .envs import GameSession
from .utils import cell_background_color, cell_text_color

__all__ = [
    "ACTIONS",
    "GameConfig",
    "GameSession",
    "InvalidBoardError",
    "calculate_score",
    "cell_background_color",
    "cell_text_color",
    "count_empty_cells",
    "empty_board",
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
