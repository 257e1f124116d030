"""Stateful 2048 game driven by the pure board engine."""

import logging

from numpy import ndarray
from numpy.random import Generator, SeedSequence, default_rng

from game2048.config import GameConfig
from game2048.core import (
    ACTIONS,
    calculate_score,
    count_empty_cells,
    empty_board,
    insert_cell,
    is_game_over,
    legal_moves,
    move,
)

logger = logging.getLogger(__name__)


class GameSession:
    """
    A single game of 2048.

    The session owns the current board and the random source used to spawn tiles. The engine itself stays
    deterministic: the session draws the position and the value of every new tile and hands them to
    ``insert_cell``.
    """

    # ##: All Actions.
    ACTIONS = ACTIONS

    def __init__(self, config: GameConfig | None = None, seed: int | SeedSequence | None = None):
        """
        Initialize the session and start a game.

        Parameters
        ----------
        config : GameConfig, optional
            Parameters of the game (default is a 4x4 board).
        seed : int or SeedSequence, optional
            Random number generator seed for reproducibility.
        """
        self.config = config or GameConfig()
        self._rng: Generator = default_rng(seed)
        self.reset()

    @property
    def board(self) -> ndarray:
        """Copy of the current board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        """Sum of the tiles on the current board."""
        return calculate_score(self._board)

    @property
    def is_finished(self) -> bool:
        """True once the board is full and no tiles can merge."""
        return is_game_over(self._board)

    @property
    def legal_moves(self) -> list[str]:
        """Moves that would change the current board."""
        return legal_moves(self._board)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the random number generator before spawning.

        Returns
        -------
        ndarray
            The new board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._board = empty_board(self.config.rows, self.config.cols)
        for _ in range(self.config.initial_tiles):
            self.spawn_tile()

        logger.info('New %dx%d game started', self.config.rows, self.config.cols)
        return self.board

    def spawn_tile(self) -> ndarray:
        """
        Place a 2 or a 4 on a random empty cell.

        Returns
        -------
        ndarray
            The board after the spawn. Unchanged when the board is full.
        """
        count = count_empty_cells(self._board)
        if count > 0:
            index = int(self._rng.integers(count))
            value = 4 if self._rng.random() < self.config.four_probability else 2
            self._board = insert_cell(index, value, self._board)
        return self.board

    def step(self, direction: str | int) -> tuple[ndarray, int, bool]:
        """
        Play one move.

        Parameters
        ----------
        direction : str or int
            The move, by name (``'left'``, ``'up'``, ``'right'``, ``'down'``) or action index.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The board after the move and the new tile (ndarray)
            - The score of the board (int)
            - Whether the game is over (bool)

        Notes
        -----
        A tile is spawned after every move while the board has room, even if the move changed nothing.
        """
        self._board = move(self._board, direction)
        self.spawn_tile()

        score, done = self.score, self.is_finished
        logger.debug('Move %s, score %d', direction, score)
        if done:
            logger.info('Game over with score %d', score)
        return self.board, score, done
