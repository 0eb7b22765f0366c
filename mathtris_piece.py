
"""Piece model, shapes, rotation and collision"""
from dataclasses import dataclass
from typing import List, Tuple
from mathtris_board import Board, EMPTY

KINDS = ["I", "O", "T", "L", "J", "S", "Z"]

SHAPES = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "L": [[1,0,0],[1,1,1]],
    "J": [[0,0,1],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
}

# color id 1..7 follows KINDS order
COLOR_IDS = {t: i + 1 for i, t in enumerate(KINDS)}


def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    color: int
    x: int
    y: int

    def __post_init__(self):
        if not any(v for r in self.shape for v in r):
            raise ValueError(f"piece {self.t!r} has no occupied cells")
        if not 1 <= self.color <= 7:
            raise ValueError(f"piece color {self.color} outside 1..7")

    @staticmethod
    def spawn(t: str, board_width: int) -> "Piece":
        s = [r[:] for r in SHAPES[t]]
        return Piece(t, s, COLOR_IDS[t], board_width // 2 - len(s[0]) // 2, 0)

    def cells(self) -> List[Tuple[int, int]]:
        return [(self.x + x, self.y + y)
                for y, row in enumerate(self.shape)
                for x, v in enumerate(row) if v]

    def collision(self, board: Board) -> bool:
        for bx, by in self.cells():
            if bx < 0 or bx >= board.width or by >= board.height: return True
            if by >= 0 and board.cell_at(bx, by) != EMPTY: return True
        return False

    def move(self, board: Board, dx: int, dy: int) -> bool:
        self.x += dx; self.y += dy
        if self.collision(board):
            self.x -= dx; self.y -= dy
            return False
        return True

    def rotate(self, board: Board) -> bool:
        """Rotate clockwise in place; no kicks, a blocked rotation is undone."""
        old = self.shape
        self.shape = rotate_cw(old)
        if self.collision(board):
            self.shape = old
            return False
        return True

    def place(self, board: Board):
        # cells still above the top edge are dropped
        for bx, by in self.cells():
            if by >= 0:
                board.set_cell(bx, by, self.color)

    def landing_y(self, board: Board) -> int:
        """Lowest y the piece can reach by falling straight down."""
        test = Piece(self.t, self.shape, self.color, self.x, self.y)
        while test.move(board, 0, 1):
            pass
        return test.y
