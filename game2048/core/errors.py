"""Exceptions raised by the board engine."""


class InvalidBoardError(ValueError):
    """Raised when a board, row or tile value is malformed."""
