import unittest

from mathtris_board import Board, GARBAGE
from mathtris_piece import COLOR_IDS, KINDS, SHAPES, Piece, rotate_cw


class PieceTests(unittest.TestCase):
    def test_spawn_is_centered_at_top(self):
        self.assertEqual((Piece.spawn("I", 10).x, Piece.spawn("I", 10).y), (3, 0))
        self.assertEqual(Piece.spawn("O", 10).x, 4)
        self.assertEqual(Piece.spawn("T", 10).x, 4)

    def test_colors_are_one_to_seven(self):
        self.assertEqual(sorted(COLOR_IDS[t] for t in KINDS), list(range(1, 8)))

    def test_rejected_move_leaves_position(self):
        board = Board()
        p = Piece.spawn("I", 10)
        for _ in range(3):
            self.assertTrue(p.move(board, -1, 0))
        self.assertEqual(p.x, 0)
        self.assertFalse(p.move(board, -1, 0))
        self.assertEqual((p.x, p.y), (0, 0))

    def test_move_blocked_by_locked_cell(self):
        board = Board()
        board.set_cell(3, 5, GARBAGE)
        p = Piece.spawn("I", 10)
        while p.move(board, 0, 1):
            pass
        self.assertEqual(p.y, 4)

    def test_rotate_clockwise(self):
        board = Board()
        p = Piece.spawn("T", 10)
        self.assertTrue(p.rotate(board))
        self.assertEqual(p.shape, [[1, 0], [1, 1], [1, 0]])

    def test_four_rotations_restore_shape(self):
        board = Board()
        for t in KINDS:
            p = Piece.spawn(t, 10)
            p.move(board, 0, 5)
            for _ in range(4):
                p.rotate(board)
            self.assertEqual(p.shape, SHAPES[t])

    def test_blocked_rotation_reverts(self):
        board = Board()
        p = Piece.spawn("I", 10)
        while p.move(board, 0, 1):
            pass
        self.assertEqual(p.y, 19)
        self.assertFalse(p.rotate(board))
        self.assertEqual(p.shape, [[1, 1, 1, 1]])
        self.assertFalse(p.collision(board))

    def test_rotation_never_collides(self):
        board = Board()
        for y in range(10, 20):
            for x in range(10):
                if (x + y) % 3 == 0:
                    board.set_cell(x, y, GARBAGE)
        for t in KINDS:
            p = Piece.spawn(t, 10)
            for _ in range(12):
                p.rotate(board)
                self.assertFalse(p.collision(board))
                p.move(board, 0, 1)

    def test_cells_above_top_are_not_checked_or_placed(self):
        board = Board()
        p = Piece("T", rotate_cw(SHAPES["T"]), COLOR_IDS["T"], 4, -1)
        self.assertFalse(p.collision(board))
        p.place(board)
        placed = [(x, y) for y in range(20) for x in range(10) if board.cell_at(x, y)]
        self.assertEqual(placed, [(4, 0), (5, 0), (4, 1)])

    def test_place_writes_color(self):
        board = Board()
        p = Piece.spawn("O", 10)
        p.y = 18
        p.place(board)
        for x, y in [(4, 18), (5, 18), (4, 19), (5, 19)]:
            self.assertEqual(board.cell_at(x, y), COLOR_IDS["O"])

    def test_landing_y(self):
        board = Board()
        p = Piece.spawn("O", 10)
        self.assertEqual(p.landing_y(board), 18)
        self.assertEqual(p.y, 0)

    def test_bad_pieces(self):
        with self.assertRaises(ValueError):
            Piece("X", [[0, 0]], 1, 0, 0)
        with self.assertRaises(ValueError):
            Piece("I", [[1]], 9, 0, 0)


if __name__ == "__main__":
    unittest.main()
