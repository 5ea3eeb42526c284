"""
Game state for a single session: the answer, the word list, remaining lives
and the best feedback seen so far for every letter (keyboard hints).

The game is a flat counter. It never decides "won" or "lost"; a front end reads
that off the returned scores and `lives` (see wordgame.harness).

Not thread-safe: guess() mutates lives and letter memory. The word list itself
is frozen and may be shared between any number of games.
"""

from __future__ import annotations

import logging
import random
import string
from typing import Dict, Iterable, List, Tuple

from .scoring import LetterScore, score_guess
from .validation import check_guess

logger = logging.getLogger(__name__)


class WordleGame:
    def __init__(self, words: Iterable[str], answer: str | None = None, *,
                 rng: random.Random | None = None):
        """
        Args:
          words  : playable words (already validated/lowercased, see
                   wordgame.datasets); used both as answer pool and guess list
          answer : fixed answer; picked uniformly from `words` when omitted
          rng    : random source for the pick (seed it for reproducible games)

        Raises:
          ValueError if `answer` is not in `words`, or if `words` is empty and
          no answer was given.
        """
        self._words: Tuple[str, ...] = tuple(w.lower() for w in words)
        self._word_set = frozenset(self._words)

        if answer is None:
            if not self._words:
                raise ValueError("cannot pick an answer from an empty word list")
            rng = rng or random.Random()
            answer = rng.choice(self._words)
            logger.debug("picked answer from %d words", len(self._words))
        else:
            answer = answer.lower()
            if answer not in self._word_set:
                raise ValueError(f"answer '{answer}' is not in the word list")

        self._answer: str = answer
        self._lives: int = len(answer)
        self._letters: Dict[str, LetterScore] = {
            ch: LetterScore.UNKNOWN for ch in string.ascii_lowercase
        }

    @property
    def answer(self) -> str:
        return self._answer

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def lives(self) -> int:
        """Remaining attempts. Reaches 0 after len(answer) accepted guesses."""
        return self._lives

    def guess(self, word: str) -> List[LetterScore]:
        """
        Score one guess and update lives and letter memory.

        Raises:
          DifferentLengthError, NotAWordError (state untouched in both cases)

        Returns:
          one LetterScore per letter of `word`, in order.
        """
        w = check_guess(word, self._word_set, len(self._answer))
        scores = score_guess(w, self._answer)

        # Every accepted guess costs a life, the winning one included.
        self._lives -= 1

        # Feedback per letter only ever improves.
        for ch, s in zip(w, scores):
            self._letters[ch] = max(self._letters.get(ch, LetterScore.UNKNOWN), s)

        return scores

    def guess_empty(self) -> List[LetterScore]:
        """Placeholder row for a guess not submitted yet."""
        return [LetterScore.WRONG] * len(self._answer)

    def known_guesses(self, letters: str) -> List[Tuple[str, LetterScore]]:
        """
        Best feedback so far for each of `letters`, e.g. a keyboard row
        "qwertyuiop". Letters are lowercased before lookup.

        Raises:
          ValueError on a non-alphabetic character.
        """
        out: List[Tuple[str, LetterScore]] = []
        for ch in letters:
            if not ch.isalpha():
                raise ValueError(f"not a letter: {ch!r}")
            out.append((ch, self._letters.get(ch.lower(), LetterScore.UNKNOWN)))
        return out

    def __repr__(self) -> str:
        return f"WordleGame(words={len(self._words)}, length={len(self._answer)}, lives={self._lives})"
