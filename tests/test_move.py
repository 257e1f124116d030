"""
Tests for the slide primitive and the four board moves.
"""

from unittest import TestCase, main

import numpy as np

from game2048.core.errors import InvalidBoardError
from game2048.core.gameboard import calculate_score
from game2048.core.gamemove import (
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

BOARD = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])


class TestSlide(TestCase):
    def test_merge_pair(self):
        np.testing.assert_array_equal(slide([2, 2, 0, 0]), [4, 0, 0, 0])

    def test_merge_across_gap(self):
        np.testing.assert_array_equal(slide([2, 0, 2, 2]), [4, 2, 0, 0])

    def test_merge_middle_pair(self):
        np.testing.assert_array_equal(slide([4, 2, 2, 4]), [4, 4, 4, 0])

    def test_merge_first_pair_only(self):
        """A run of three equal tiles merges the first two."""
        np.testing.assert_array_equal(slide([2, 2, 2, 0]), [4, 2, 0, 0])
        np.testing.assert_array_equal(slide([2, 2, 2, 2]), [4, 4, 0, 0])

    def test_no_cascade(self):
        np.testing.assert_array_equal(slide([4, 2, 2, 0]), [4, 4, 0, 0])
        np.testing.assert_array_equal(slide([2, 2, 4, 8]), [4, 4, 8, 0])

    def test_empty_row(self):
        np.testing.assert_array_equal(slide([0, 0, 0, 0]), [0, 0, 0, 0])

    def test_no_merge(self):
        np.testing.assert_array_equal(slide([0, 2, 0, 4]), [2, 4, 0, 0])
        np.testing.assert_array_equal(slide([2, 4, 8, 16]), [2, 4, 8, 16])

    def test_length_preserved(self):
        for row in ([2], [2, 2, 2], [0, 4, 4, 8, 8, 0], [2, 2, 2, 2, 2, 2, 2]):
            self.assertEqual(len(slide(row, len(row))), len(row))

    def test_slide_is_idempotent_without_merges(self):
        once = slide([0, 2, 0, 4, 8, 0])
        np.testing.assert_array_equal(slide(once), once)

    def test_cols_must_match(self):
        with self.assertRaises(InvalidBoardError):
            slide([2, 2, 0], cols=4)

    def test_zero_length_row(self):
        with self.assertRaises(InvalidBoardError):
            slide([])

    def test_input_not_mutated(self):
        row = np.array([2, 2, 0, 0])
        slide(row)
        np.testing.assert_array_equal(row, [2, 2, 0, 0])

    def test_filter_empty_cells(self):
        np.testing.assert_array_equal(filter_empty_cells([0, 2, 0, 4]), [2, 4])


class TestBoardMoves(TestCase):
    def test_slide_left(self):
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        np.testing.assert_array_equal(slide_left(BOARD), expected)

    def test_slide_right(self):
        expected = np.array([[0, 0, 4, 8], [0, 0, 4, 4], [0, 0, 0, 4], [0, 0, 4, 4]])
        np.testing.assert_array_equal(slide_right(BOARD), expected)

    def test_slide_up(self):
        expected = np.array([[4, 4, 4, 8], [2, 2, 4, 4], [0, 0, 0, 0], [0, 0, 0, 0]])
        np.testing.assert_array_equal(slide_up(BOARD), expected)

    def test_slide_down(self):
        expected = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [2, 2, 4, 8], [4, 4, 4, 4]])
        np.testing.assert_array_equal(slide_down(BOARD), expected)

    def test_input_not_mutated(self):
        board = BOARD.copy()
        for function in (slide_left, slide_right, slide_up, slide_down):
            function(board)
        np.testing.assert_array_equal(board, BOARD)

    def test_rectangular_board(self):
        board = [[2, 0, 2], [0, 4, 0]]
        np.testing.assert_array_equal(slide_left(board), [[4, 0, 0], [4, 0, 0]])
        np.testing.assert_array_equal(slide_down(board), [[0, 0, 0], [2, 4, 2]])
        with self.assertRaises(InvalidBoardError):
            slide_up(board, rows=3, cols=3)

    def test_mirror_symmetry(self):
        np.testing.assert_array_equal(slide_right(BOARD), slide_left(BOARD[:, ::-1])[:, ::-1])

    def test_transpose_symmetry(self):
        np.testing.assert_array_equal(slide_down(BOARD), slide_right(BOARD.T).T)
        np.testing.assert_array_equal(slide_up(BOARD), slide_left(BOARD.T).T)

    def test_score_conservation(self):
        """Merging only moves value around the board."""
        for function in (slide_left, slide_right, slide_up, slide_down):
            self.assertEqual(calculate_score(function(BOARD)), calculate_score(BOARD))


class TestMove(TestCase):
    def test_move_by_name_and_index(self):
        for name, action in ACTIONS.items():
            np.testing.assert_array_equal(move(BOARD, name), move(BOARD, action))
        np.testing.assert_array_equal(move(BOARD, 'up'), slide_up(BOARD))

    def test_unknown_direction(self):
        with self.assertRaises(ValueError):
            move(BOARD, 'diagonal')
        with self.assertRaises(ValueError):
            move(BOARD, 4)

    def test_legal_moves(self):
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_moves(board), ['up', 'right', 'down'])

    def test_no_legal_moves(self):
        board = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]
        self.assertEqual(legal_moves(board), [])


if __name__ == '__main__':
    main()
