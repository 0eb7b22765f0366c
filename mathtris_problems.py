
"""Arithmetic problems for the quiz gate.

Every template builds its operands so the answer is a whole number; the
statement text is what the player sees and ``answer`` is what they must
type. Difficulty bands run from 1 to 10, levels outside are clamped.
"""
import math
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

NICE_PERCENTS = [15, 30, 35, 40, 45, 60, 75]
SQUARES = [4, 9, 16, 25, 36, 49, 64, 81, 100]


@dataclass(frozen=True)
class Problem:
    text: str
    answer: int


Template = Callable[[random.Random], Problem]


# --- levels 1-2 -----------------------------------------------------

def add_or_subtract(r: random.Random) -> Problem:
    a = r.randint(20, 59); b = r.randint(10, 39)
    op = "+" if r.random() < 0.6 else "-"
    if op == "-" and a < b:
        a, b = b, a
    return Problem(f"{a} {op} {b} = ?", a + b if op == "+" else a - b)


# --- levels 3-4 -----------------------------------------------------

def times_table(r: random.Random) -> Problem:
    a = r.randint(3, 14); b = r.randint(3, 14)
    return Problem(f"{a} × {b} = ?", a * b)

def add_then_subtract(r: random.Random) -> Problem:
    a = r.randint(15, 44); b = r.randint(10, 34); c = r.randint(5, 24)
    return Problem(f"{a} + {b} - {c} = ?", a + b - c)


# --- level 5: precedence ---------------------------------------------

def product_plus(r: random.Random) -> Problem:
    a = r.randint(5, 14); b = r.randint(2, 9); c = r.randint(10, 24)
    return Problem(f"{a} × {b} + {c} = ?", a * b + c)

def plus_product(r: random.Random) -> Problem:
    a = r.randint(20, 49); b = r.randint(5, 14); c = r.randint(2, 7)
    return Problem(f"{a} + {b} × {c} = ?", a + b * c)

def minus_product(r: random.Random) -> Problem:
    a = r.randint(30, 69); b = r.randint(2, 9); c = r.randint(2, 6)
    return Problem(f"{a} - {b} × {c} = ?", a - b * c)


# --- level 6: division and brackets ------------------------------------

def quotient_plus(r: random.Random) -> Problem:
    b = r.randint(2, 9); c = r.randint(5, 14); d = r.randint(10, 29)
    a = b * c
    return Problem(f"{a} ÷ {b} + {d} = ?", a // b + d)

def bracket_sum_times(r: random.Random) -> Problem:
    a = r.randint(5, 19); b = r.randint(3, 9); c = r.randint(2, 5)
    return Problem(f"({a} + {b}) × {c} = ?", (a + b) * c)

def minus_bracket_sum(r: random.Random) -> Problem:
    a = r.randint(30, 79); b = r.randint(10, 24); c = r.randint(2, 6)
    return Problem(f"{a} - ({b} + {c}) = ?", a - (b + c))


# --- level 7 ------------------------------------------------------------

def two_products(r: random.Random) -> Problem:
    a = r.randint(3, 10); b = r.randint(2, 7); c = r.randint(5, 14); d = r.randint(10, 24)
    return Problem(f"{a} × {b} + {c} × {d} = ?", a * b + c * d)

def big_minus_product(r: random.Random) -> Problem:
    a = r.randint(50, 149); b = r.randint(10, 29); c = r.randint(2, 6)
    return Problem(f"{a} - {b} × {c} = ?", a - b * c)

def percent_of(r: random.Random) -> Problem:
    a = r.randint(40, 119); b = r.choice(NICE_PERCENTS)
    return Problem(f"{b}% of {a} = ?", a * b // 100)


# --- level 8 ------------------------------------------------------------

def percent_plus(r: random.Random) -> Problem:
    a = r.randint(100, 199); b = r.choice([20, 25, 30, 40]); c = r.randint(20, 49)
    return Problem(f"{b}% of {a} + {c} = ?", a * b // 100 + c)

def times_bracket_sum(r: random.Random) -> Problem:
    a = r.randint(5, 16); b = r.randint(3, 10); c = r.randint(2, 7)
    return Problem(f"{a} × ({b} + {c}) = ?", a * (b + c))

def divide_multiply_divide(r: random.Random) -> Problem:
    # a = b*c, so a/b = c and c*d/c = d: exact at each step
    c = r.randint(5, 14); b = r.randint(2, 9); d = r.randint(15, 39)
    a = b * c
    return Problem(f"({a} ÷ {b}) × {d} ÷ {c} = ?", (a // b) * d // c)


# --- level 9 ------------------------------------------------------------

def root_times_plus(r: random.Random) -> Problem:
    a = r.choice(SQUARES); b = r.randint(10, 24); c = r.randint(2, 9)
    return Problem(f"√{a} × {c} + {b} = ?", math.isqrt(a) * c + b)

def percent_of_percent(r: random.Random) -> Problem:
    a, b, c = 200, 50, 20
    return Problem(f"{c}% of {b}% of {a} = ?", (a * b // 100) * c // 100)

def bracket_difference_times_plus(r: random.Random) -> Problem:
    a = r.randint(10, 24); b = r.randint(2, 9); c = r.randint(3, 8); d = r.randint(5, 14)
    return Problem(f"({a} - {b}) × {c} + {d} = ?", (a - b) * c + d)

def product_over(r: random.Random) -> Problem:
    # a is a multiple of c so the division is exact
    c = r.randint(2, 5); b = r.randint(5, 16)
    a = r.choice([n for n in range(10, 30) if n % c == 0])
    return Problem(f"{a} × {b} ÷ {c} = ?", a * b // c)


# --- level 10 -----------------------------------------------------------

def precedence_with_square(r: random.Random) -> Problem:
    a = r.randint(15, 34); b = r.randint(5, 14); c = r.randint(2, 9); d = r.randint(2, 6)
    return Problem(f"{a} + {b} × {c} - {d}² = ?", a + b * c - d * d)

def minus_percent_of_self(r: random.Random) -> Problem:
    a = r.randint(100, 249); b = r.choice([15, 25, 35, 45])
    return Problem(f"{a} - {b}% of {a} = ?", a - a * b // 100)

def product_of_sums(r: random.Random) -> Problem:
    a = r.randint(8, 19); b = r.randint(3, 8); c = r.randint(2, 6); d = r.randint(2, 5)
    return Problem(f"({a} + {b}) × ({c} + {d}) = ?", (a + b) * (c + d))

def bracket_sum_floor_divide(r: random.Random) -> Problem:
    a = r.randint(50, 149); b = r.randint(10, 29); c = r.randint(2, 9)
    return Problem(f"({a} + {b}) ÷ {c} = ?", (a + b) // c)


_LOW = [add_or_subtract]
_MID = [times_table, add_then_subtract]

BANDS: Dict[int, List[Template]] = {
    1: _LOW,
    2: _LOW,
    3: _MID,
    4: _MID,
    5: [product_plus, plus_product, minus_product],
    6: [quotient_plus, bracket_sum_times, minus_bracket_sum],
    7: [two_products, big_minus_product, percent_of],
    8: [percent_plus, times_bracket_sum, divide_multiply_divide],
    9: [root_times_plus, percent_of_percent, bracket_difference_times_plus, product_over],
    10: [precedence_with_square, minus_percent_of_self, product_of_sums, bracket_sum_floor_divide],
}


def clamp_level(level: int) -> int:
    return max(1, min(10, level))


def templates_for(level: int) -> List[Template]:
    return BANDS[clamp_level(level)]


class ProblemGenerator:
    """Picks a template for the level's band uniformly and fills it in.

    The random source is injected so a seeded ``random.Random`` replays the
    same sequence of problems.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, level: int) -> Problem:
        template = self.rng.choice(templates_for(level))
        return template(self.rng)
