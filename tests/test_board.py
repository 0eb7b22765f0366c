import random
import unittest

from mathtris_board import Board, EMPTY, GARBAGE


class BoardTests(unittest.TestCase):
    def test_row_full(self):
        board = Board()
        board.rows[19] = [1] * 10
        board.rows[18] = [1] * 9 + [EMPTY]
        self.assertTrue(board.is_row_full(19))
        self.assertFalse(board.is_row_full(18))
        self.assertFalse(board.is_row_full(0))

    def test_clear_keeps_order_of_remaining_rows(self):
        board = Board()
        board.rows[19] = [1] * 10
        board.rows[18] = [2] + [EMPTY] * 9
        board.rows[17] = [3] * 10
        board.rows[16] = [EMPTY] * 9 + [4]
        self.assertEqual(board.clear_full_rows(), 2)
        self.assertEqual(board.rows[19], [2] + [EMPTY] * 9)
        self.assertEqual(board.rows[18], [EMPTY] * 9 + [4])
        self.assertEqual(board.rows[0], [EMPTY] * 10)
        self.assertEqual(board.rows[1], [EMPTY] * 10)
        self.assertEqual(len(board.rows), 20)

    def test_clear_adjacent_full_rows_in_one_pass(self):
        board = Board()
        for y in (16, 17, 18, 19):
            board.rows[y] = [5] * 10
        board.rows[15] = [6] + [EMPTY] * 9
        self.assertEqual(board.clear_full_rows(), 4)
        self.assertEqual(board.rows[19], [6] + [EMPTY] * 9)
        self.assertTrue(all(v == EMPTY for row in board.rows[:19] for v in row))

    def test_clear_nothing(self):
        board = Board()
        board.rows[19] = [1] * 9 + [EMPTY]
        self.assertEqual(board.clear_full_rows(), 0)
        self.assertEqual(board.rows[19], [1] * 9 + [EMPTY])

    def test_garbage_pushes_from_bottom_and_drops_top_row(self):
        board = Board(rng=random.Random(3))
        board.rows[0] = [7] + [EMPTY] * 9
        board.rows[19] = [EMPTY] * 9 + [1]
        board.add_garbage_rows(1)
        hole = random.Random(3).randrange(10)
        expected = [GARBAGE] * 10
        expected[hole] = EMPTY
        self.assertEqual(board.rows[19], expected)
        self.assertEqual(board.rows[18], [EMPTY] * 9 + [1])
        self.assertNotIn(7, [v for row in board.rows for v in row])
        self.assertEqual(len(board.rows), 20)

    def test_garbage_rows_have_single_gap(self):
        board = Board(rng=random.Random(11))
        board.add_garbage_rows(3)
        for row in board.rows[17:]:
            self.assertEqual(row.count(EMPTY), 1)
            self.assertEqual(row.count(GARBAGE), 9)
        self.assertEqual(board.clear_full_rows(), 0)

    def test_out_of_bounds_fails_fast(self):
        board = Board()
        with self.assertRaises(IndexError):
            board.cell_at(10, 0)
        with self.assertRaises(IndexError):
            board.cell_at(0, -1)
        with self.assertRaises(IndexError):
            board.set_cell(-1, 5, 1)

    def test_set_and_snapshot(self):
        board = Board(width=4, height=3)
        board.set_cell(2, 1, 6)
        self.assertEqual(board.cell_at(2, 1), 6)
        self.assertEqual(board.snapshot(), ((0, 0, 0, 0), (0, 0, 6, 0), (0, 0, 0, 0)))
        with self.assertRaises(ValueError):
            board.set_cell(0, 0, 9)


if __name__ == "__main__":
    unittest.main()
