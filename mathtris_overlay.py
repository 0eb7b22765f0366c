
import pygame
from mathtris_layout import Dims
from mathtris_session import GameSession, Phase, QuizFeedback

GOOD = (74,222,128)
BAD = (239,68,68)


def feedback_text(fb: QuizFeedback) -> str:
    if fb.correct:
        txt = "✓ Correct!"
        if fb.streak_bonus: txt += " Streak Bonus!"
        return f"{txt} Level {fb.level}!"
    prefix = "⏱ Time's up!" if fb.timed_out else "✗ Wrong!"
    return f"{prefix} Answer: {fb.answer}"


class Overlay:
    """Quiz panel over the board, plus the game over and victory screens."""
    def __init__(self, dims: Dims, font, big_font):
        self.dims = dims
        self.font = font
        self.big_font = big_font

    def _panel(self, screen, rect):
        s = pygame.Surface(rect.size, pygame.SRCALPHA); s.fill((20,25,40,235))
        screen.blit(s, rect.topleft)
        pygame.draw.rect(screen, (90,110,180), rect, 2)

    def _centered(self, screen, surf, cx, y):
        screen.blit(surf, surf.get_rect(midtop=(cx, y)))

    def draw(self, screen, session: GameSession, answer_text: str):
        phase = session.get_phase()
        if phase in (Phase.AWAITING_QUIZ, Phase.QUIZ_RESULT):
            self.draw_quiz(screen, session, answer_text)
        elif phase in (Phase.GAME_OVER, Phase.WON):
            self.draw_end(screen, session)

    def draw_quiz(self, screen, session: GameSession, answer_text: str):
        d = self.dims
        rect = pygame.Rect(d.quiz_x, d.quiz_y, d.quiz_w, d.quiz_h)
        self._panel(screen, rect)
        cx = rect.centerx
        self._centered(screen, self.font.render("Solve to continue", True, (200,210,235)), cx, rect.y + 16)
        problem = session.get_active_problem()
        self._centered(screen, self.big_font.render(problem.text, True, (255,255,255)), cx, rect.y + 48)
        fb = session.get_quiz_feedback()
        if fb is None:
            box = pygame.Rect(0, 0, rect.w // 2, 40); box.midtop = (cx, rect.y + 104)
            pygame.draw.rect(screen, (15,18,40), box)
            pygame.draw.rect(screen, (120,140,220), box, 1)
            self._centered(screen, self.big_font.render(answer_text or " ", True, (230,240,255)), cx, box.y + 4)
            left = session.get_countdown_remaining()
            col = BAD if left <= 3 else (200,210,235)
            self._centered(screen, self.font.render(f"{left}s", True, col), cx, rect.y + 160)
        else:
            col = GOOD if fb.correct else BAD
            self._centered(screen, self.font.render(feedback_text(fb), True, col), cx, rect.y + 120)

    def draw_end(self, screen, session: GameSession):
        d = self.dims
        s = session.get_summary()
        won = s.phase is Phase.WON
        rect = pygame.Rect(d.quiz_x, d.quiz_y, d.quiz_w, d.quiz_h)
        self._panel(screen, rect)
        cx = rect.centerx
        title = "YOU WIN!" if won else "GAME OVER"
        self._centered(screen, self.big_font.render(title, True, GOOD if won else (255,220,220)), cx, rect.y + 16)
        rows = [f"Score: {s.score}", f"Problems solved: {s.math_solved}"]
        if not won: rows.insert(1, f"Level: {s.level}")
        y = rect.y + 70
        for txt in rows:
            self._centered(screen, self.font.render(txt, True, (200,210,235)), cx, y); y += 26
        self._centered(screen, self.font.render("R to Restart", True, (165,175,215)), cx, rect.bottom - 34)
