# -*- coding: utf-8 -*-
"""
This module provides presentational helpers for displaying a board.
"""

from .colors import cell_background_color, cell_text_color

__all__ = ["cell_background_color", "cell_text_color"]
