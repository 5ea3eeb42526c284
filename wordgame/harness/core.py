"""
Session primitives: the end-of-game policy that sits between a front end and
the engine.

- GameSession: one game driven guess by guess (tries, last error, end state).
- play_session: run a scripted list of guesses through a session.

Policy: a guess scoring all CORRECT wins; otherwise the session is lost once
the game has no lives left after an accepted guess. Rejected guesses cost
nothing and only set `error`.

These are intentionally UI-agnostic so they can be reused by the CLI, a
notebook or tests without changes.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from wordgame.engine import InvalidGuessError, LetterScore, WordleGame, pattern

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"
    CLOSED = "closed"


class GameSession:
    def __init__(self, game: WordleGame):
        self.game = game
        self.state = SessionState.IN_PROGRESS
        self.tries: List[Tuple[str, List[LetterScore]]] = []
        self.error = ""

    @property
    def finished(self) -> bool:
        return self.state is not SessionState.IN_PROGRESS

    def submit(self, guess: str) -> List[LetterScore] | None:
        """
        Submit a guess. Returns its scores, or None if the guess was rejected
        (see `error`) or the session is already over.
        """
        if self.finished:
            return None

        try:
            scores = self.game.guess(guess)
        except InvalidGuessError as e:
            self.error = str(e)
            return None

        word = guess.lower()
        self.tries.append((word, scores))
        self.error = ""

        if all(s is LetterScore.CORRECT for s in scores):
            self.state = SessionState.WON
        elif self.game.lives <= 0:
            self.state = SessionState.LOST

        if self.finished:
            logger.debug("session %s after %d tries", self.state.value, len(self.tries))
        return scores

    def close(self) -> None:
        """Abort the session (player quit); no-op once finished."""
        if not self.finished:
            self.state = SessionState.CLOSED

    def history(self) -> List[Tuple[str, str]]:
        """Accepted tries as (guess, pattern) pairs, e.g. ("geese", "---GG")."""
        return [(w, pattern(s)) for w, s in self.tries]


def play_session(game: WordleGame, guesses: Iterable[str]) -> Dict:
    """
    Feed guesses to a fresh session until it ends or the guesses run out
    (then it is closed).

    Returns:
        dict with keys:
            answer (str), state (str), success (bool), guesses (int, accepted
            tries only), lives (int), history (list[(guess, pattern)])
    """
    session = GameSession(game)
    for g in guesses:
        session.submit(g)
        if session.finished:
            break
    session.close()

    return {
        "answer": game.answer,
        "state": session.state.value,
        "success": session.state is SessionState.WON,
        "guesses": len(session.tries),
        "lives": game.lives,
        "history": session.history(),
    }
