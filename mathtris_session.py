
"""Game session: falling pieces gated by a timed arithmetic quiz.

One ``GameSession`` owns everything a playthrough needs (board, current
piece, counters, quiz state) so several sessions can live side by side.
Time only moves through :meth:`GameSession.tick`; the presentation layer
feeds it elapsed milliseconds and forwards player commands. Nothing here
touches pygame.

Phases::

    FALLING --piece can't fall--> AWAITING_QUIZ --answer/timeout--> QUIZ_RESULT
    QUIZ_RESULT --delay over--> FALLING | GAME_OVER (spawn blocked)
    AWAITING_QUIZ --correct past max level--> WON
    any --restart--> FALLING
"""
from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from mathtris_board import Board
from mathtris_config import COLS, ROWS, merged_config
from mathtris_piece import KINDS, SHAPES, COLOR_IDS, Piece
from mathtris_problems import Problem, ProblemGenerator

log = logging.getLogger(__name__)

LINE_SCORES = {0: 0, 1: 100, 2: 300, 3: 500, 4: 800}
SOFT_DROP_PER_CELL = 1
HARD_DROP_PER_CELL = 2
CORRECT_ANSWER_PER_LEVEL = 50

MOVES: Dict[str, Tuple[int, int]] = {
    "left": (-1, 0),
    "right": (1, 0),
    "down": (0, 1),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Phase(Enum):
    FALLING = "falling"
    AWAITING_QUIZ = "awaiting_quiz"
    QUIZ_RESULT = "quiz_result"
    GAME_OVER = "game_over"
    WON = "won"


@dataclass(frozen=True)
class Hud:
    score: int
    level: int
    lines: int
    streak: int


@dataclass(frozen=True)
class PieceSnapshot:
    kind: str
    color: int
    shape: Tuple[Tuple[int, ...], ...]
    x: int
    y: int


@dataclass(frozen=True)
class QuizFeedback:
    correct: bool
    timed_out: bool
    answer: int
    streak_bonus: bool
    level: int


@dataclass(frozen=True)
class Summary:
    score: int
    level: int
    lines: int
    math_solved: int
    phase: Phase


def parse_answer(raw: str) -> Optional[int]:
    """Leading-integer parse of typed text; None when there is no number."""
    m = _LEADING_INT.match(raw or "")
    return int(m.group(1)) if m else None


def drop_interval_ms(level: int, cfg: dict) -> int:
    return max(cfg["MIN_DROP_MS"], cfg["BASE_DROP_MS"] - (level - 1) * cfg["DROP_STEP_MS"])


def quiz_seconds(level: int, cfg: dict) -> int:
    return max(cfg["QUIZ_MIN_SECONDS"], cfg["QUIZ_BASE_SECONDS"] - level // 5)


class QuizCountdown:
    """Elapsed-time countdown that can be disarmed exactly once.

    Whoever wins :meth:`disarm` owns the quiz resolution; a timeout that
    arrives after an answer (or a second answer) finds it disarmed.
    """

    def __init__(self, seconds: int):
        self.seconds = seconds
        self.elapsed_ms = 0
        self.armed = True

    @property
    def remaining(self) -> int:
        return max(0, self.seconds - self.elapsed_ms // 1000)

    def advance(self, ms: int) -> bool:
        """Accumulate time; True once the countdown has run out while armed."""
        if not self.armed:
            return False
        self.elapsed_ms += ms
        return self.elapsed_ms >= self.seconds * 1000

    def disarm(self) -> bool:
        if not self.armed:
            return False
        self.armed = False
        return True


class GameSession:
    def __init__(self, config: Optional[dict] = None, rng: Optional[random.Random] = None):
        self.config = merged_config(config)
        self.rng = rng or random.Random(self.config["SEED"])
        self.problems = ProblemGenerator(self.rng)
        self._reset()

    # ---------- lifecycle ----------
    def _reset(self):
        self.board = Board(COLS, ROWS, self.rng)
        self.current: Optional[Piece] = None
        self.next_kind = self.rng.choice(KINDS)
        self.score = 0
        self.level = 1
        self.lines = 0
        self.streak = 0
        self.math_solved = 0
        self.drop_interval = self.config["INITIAL_DROP_MS"]
        self.drop_timer = 0
        self.problem: Optional[Problem] = None
        self.countdown: Optional[QuizCountdown] = None
        self.feedback: Optional[QuizFeedback] = None
        self.result_delay = 0
        self.result_timer = 0
        self.phase = Phase.FALLING
        self._spawn()

    def on_restart(self):
        log.info("restart (score=%d level=%d)", self.score, self.level)
        self._reset()

    def _spawn(self):
        self.current = Piece.spawn(self.next_kind, self.board.width)
        self.next_kind = self.rng.choice(KINDS)
        self.drop_timer = 0
        self.problem = None
        self.countdown = None
        self.feedback = None
        if self.current.collision(self.board):
            self.phase = Phase.GAME_OVER
            log.info("game over: score=%d level=%d solved=%d", self.score, self.level, self.math_solved)
            return
        self.phase = Phase.FALLING
        log.debug("spawned %s at (%d, %d)", self.current.t, self.current.x, self.current.y)

    # ---------- time ----------
    def tick(self, elapsed_ms: int):
        if self.phase is Phase.FALLING:
            self.drop_timer += elapsed_ms
            if self.drop_timer >= self.drop_interval:
                self.drop_timer = 0
                if not self.current.move(self.board, 0, 1):
                    self._lock()
        elif self.phase is Phase.AWAITING_QUIZ:
            if self.countdown.advance(elapsed_ms):
                self._resolve(False, timed_out=True)
        elif self.phase is Phase.QUIZ_RESULT:
            self.result_timer += elapsed_ms
            if self.result_timer >= self.result_delay:
                self._spawn()

    def _lock(self):
        self.current.place(self.board)
        self.current = None
        cleared = self.board.clear_full_rows()
        if cleared:
            self.lines += cleared
            self.score += LINE_SCORES[cleared] * self.level
        log.info("piece locked, %d line(s) cleared, score=%d", cleared, self.score)
        self._start_quiz()

    # ---------- quiz ----------
    def _start_quiz(self):
        self.problem = self.problems.generate(self.level)
        self.countdown = QuizCountdown(quiz_seconds(self.level, self.config))
        self.phase = Phase.AWAITING_QUIZ
        log.info("quiz level %d: %s (%ds)", self.level, self.problem.text, self.countdown.seconds)

    def on_submit_answer(self, raw_text: str) -> Optional[bool]:
        """Check typed text against the active problem.

        Returns whether it was right, or None when no quiz is waiting.
        Text that is not a number counts as a wrong answer.
        """
        if self.phase is not Phase.AWAITING_QUIZ:
            return None
        value = parse_answer(raw_text)
        correct = value is not None and value == self.problem.answer
        self._resolve(correct)
        return correct

    def _resolve(self, correct: bool, timed_out: bool = False):
        if not self.countdown.disarm():
            return
        if correct:
            self._answer_right()
        else:
            self._answer_wrong(timed_out)

    def _answer_right(self):
        cfg = self.config
        self.score += CORRECT_ANSWER_PER_LEVEL * self.level
        self.streak += 1
        self.math_solved += 1
        self.level += 1
        self.drop_interval = drop_interval_ms(self.level, cfg)
        if self.level > cfg["MAX_LEVEL"]:
            self.feedback = QuizFeedback(True, False, self.problem.answer, False, self.level)
            self.phase = Phase.WON
            log.info("won: score=%d solved=%d", self.score, self.math_solved)
            return
        bonus = self.streak % cfg["STREAK_MILESTONE"] == 0
        if bonus:
            self.score += cfg["STREAK_BONUS"]
        log.info("correct, level %d, streak %d%s", self.level, self.streak, " (bonus)" if bonus else "")
        self.feedback = QuizFeedback(True, False, self.problem.answer, bonus, self.level)
        self._show_result(cfg["CORRECT_FEEDBACK_MS"])

    def _answer_wrong(self, timed_out: bool):
        self.streak = 0
        self.board.add_garbage_rows(1)
        log.info("%s, answer was %d; garbage row added",
                 "time up" if timed_out else "wrong", self.problem.answer)
        self.feedback = QuizFeedback(False, timed_out, self.problem.answer, False, self.level)
        self._show_result(self.config["WRONG_FEEDBACK_MS"])

    def _show_result(self, delay_ms: int):
        self.phase = Phase.QUIZ_RESULT
        self.result_delay = delay_ms
        self.result_timer = 0
        if delay_ms <= 0:
            self._spawn()

    # ---------- player commands ----------
    def on_move(self, direction: str) -> bool:
        dx, dy = MOVES[direction]
        if self.phase is not Phase.FALLING:
            return False
        moved = self.current.move(self.board, dx, dy)
        if moved and direction == "down":
            self.score += SOFT_DROP_PER_CELL
        return moved

    def on_rotate(self, clockwise: bool = True) -> bool:
        if self.phase is not Phase.FALLING:
            return False
        if clockwise:
            return self.current.rotate(self.board)
        before = self.current.shape
        for _ in range(3):
            self.current.rotate(self.board)
        return self.current.shape != before

    def on_hard_drop(self) -> int:
        if self.phase is not Phase.FALLING:
            return 0
        rows = 0
        while self.current.move(self.board, 0, 1):
            rows += 1
        self.score += rows * HARD_DROP_PER_CELL
        return rows

    # ---------- queries ----------
    def get_phase(self) -> Phase:
        return self.phase

    def get_board_snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        return self.board.snapshot()

    def get_current_piece_snapshot(self) -> Optional[PieceSnapshot]:
        p = self.current
        if p is None:
            return None
        return PieceSnapshot(p.t, p.color, tuple(tuple(r) for r in p.shape), p.x, p.y)

    def get_next_piece_snapshot(self) -> PieceSnapshot:
        t = self.next_kind
        return PieceSnapshot(t, COLOR_IDS[t], tuple(tuple(r) for r in SHAPES[t]), 0, 0)

    def get_ghost_position(self) -> Optional[int]:
        if self.phase is not Phase.FALLING:
            return None
        return self.current.landing_y(self.board)

    def get_hud(self) -> Hud:
        return Hud(self.score, self.level, self.lines, self.streak)

    def get_active_problem(self) -> Optional[Problem]:
        if self.phase in (Phase.AWAITING_QUIZ, Phase.QUIZ_RESULT):
            return self.problem
        return None

    def get_countdown_remaining(self) -> Optional[int]:
        if self.phase is not Phase.AWAITING_QUIZ:
            return None
        return self.countdown.remaining

    def get_quiz_feedback(self) -> Optional[QuizFeedback]:
        return self.feedback

    def get_summary(self) -> Summary:
        return Summary(self.score, self.level, self.lines, self.math_solved, self.phase)
