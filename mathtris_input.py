
"""Keyboard handling: play keys and the quiz answer buffer"""
import pygame
from mathtris_session import GameSession, Phase

MAX_ANSWER_LEN = 6


class AnswerBuffer:
    def __init__(self):
        self.text = ""

    def clear(self): self.text = ""

    def sync(self, phase: Phase):
        # drop leftovers once the quiz is over (timeout, restart)
        if phase is not Phase.AWAITING_QUIZ: self.clear()

    def handle(self, e) -> bool:
        """Edit the buffer from a KEYDOWN event; True when Enter was pressed."""
        if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER): return True
        if e.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]; return False
        ch = e.unicode
        if len(self.text) >= MAX_ANSWER_LEN: return False
        if ch.isdigit() or (ch == "-" and not self.text):
            self.text += ch
        return False


def dispatch_play_key(session: GameSession, key: int):
    if key == pygame.K_LEFT: session.on_move("left")
    elif key == pygame.K_RIGHT: session.on_move("right")
    elif key == pygame.K_DOWN: session.on_move("down")
    elif key == pygame.K_UP: session.on_rotate(True)
    elif key == pygame.K_z: session.on_rotate(False)
    elif key == pygame.K_SPACE: session.on_hard_drop()


def handle_key(session: GameSession, answer: AnswerBuffer, e):
    """Route one KEYDOWN event to the session according to its phase."""
    phase = session.get_phase()
    if phase is Phase.AWAITING_QUIZ:
        if answer.handle(e):
            session.on_submit_answer(answer.text)
            answer.clear()
        return
    if e.key == pygame.K_r:
        answer.clear()
        session.on_restart()
        return
    if phase is Phase.FALLING:
        dispatch_play_key(session, e.key)
