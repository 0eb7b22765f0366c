
"""Board: fixed grid of cell values, line clears, garbage rows"""
import random
from typing import List, Optional, Tuple
from mathtris_config import COLS, ROWS

EMPTY = 0
GARBAGE = 8

Row = List[int]


class Board:
    def __init__(self, width: int = COLS, height: int = ROWS, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.rows: List[Row] = [[EMPTY] * width for _ in range(height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} board")
        return self.rows[y][x]

    def set_cell(self, x: int, y: int, value: int):
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} board")
        if not EMPTY <= value <= GARBAGE:
            raise ValueError(f"invalid cell value {value}")
        self.rows[y][x] = value

    def is_row_full(self, y: int) -> bool:
        return all(v != EMPTY for v in self.rows[y])

    def clear_full_rows(self) -> int:
        """Remove every full row, bottom-up, and return how many went.

        The same index is examined again after a removal because the rows
        above have shifted down into it.
        """
        c = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                del self.rows[y]
                self.rows.insert(0, [EMPTY] * self.width)
                c += 1
            else:
                y -= 1
        return c

    def add_garbage_rows(self, count: int):
        """Push `count` garbage rows in from the bottom.

        Each one drops the top row and gets a single random gap.
        """
        for _ in range(count):
            del self.rows[0]
            row = [GARBAGE] * self.width
            row[self.rng.randrange(self.width)] = EMPTY
            self.rows.append(row)

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(r) for r in self.rows)
