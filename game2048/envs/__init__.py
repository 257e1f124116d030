# -*- coding: utf-8 -*-
"""
Stateful game session for the 2048 game.

This module provides the `GameSession` class, which holds the board and the random source of one game.
"""

from .session import GameSession

__all__ = ["GameSession"]
