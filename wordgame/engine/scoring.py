"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions (LetterScore, with the pattern symbol used in plain-text output):
  - CORRECT 'G' : correct letter in the correct position
  - PRESENT 'Y' : correct letter in the wrong position
  - WRONG   '-' : letter not present (or present fewer times than guessed)
  - UNKNOWN '.' : letter not typed yet (keyboard memory only)

The tiers are ordered UNKNOWN < WRONG < PRESENT < CORRECT so remembered
per-letter feedback can be upgraded with max().

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters of the answer.
  2) Second pass marks a letter present only while the answer still has an
     unclaimed occurrence of it, consuming one occurrence each time.

So for any letter, CORRECT + PRESENT marks never exceed its count in the
answer, and exact matches always win over misplaced ones.
"""

from collections import Counter
from enum import IntEnum
from typing import Iterable, List


class LetterScore(IntEnum):
    UNKNOWN = 0
    WRONG = 1
    PRESENT = 2
    CORRECT = 3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    LetterScore.UNKNOWN: ".",
    LetterScore.WRONG: "-",
    LetterScore.PRESENT: "Y",
    LetterScore.CORRECT: "G",
}


def score_guess(guess: str, answer: str) -> List[LetterScore]:
    """
    Compute per-position feedback for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer), both already case-normalized

    Examples:
      score_guess("geese", "those") -> [WRONG, WRONG, WRONG, CORRECT, CORRECT]
      score_guess("added", "dread") -> [PRESENT, PRESENT, WRONG, PRESENT, CORRECT]
    """
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    result = [LetterScore.WRONG] * len(guess)

    # Pass 1: exact matches; everything else in the answer stays available.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            result[i] = LetterScore.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: misplaced letters, capped by what's left of the answer.
    for i, g in enumerate(guess):
        if result[i] is LetterScore.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = LetterScore.PRESENT
            remaining[g] -= 1

    return result


def pattern(scores: Iterable[LetterScore]) -> str:
    """Render scores as a pattern string, e.g. [WRONG, PRESENT, CORRECT] -> "-YG"."""
    return "".join(s.symbol for s in scores)


def score(guess: str, answer: str) -> str:
    """
    Pattern-string form of score_guess, case-insensitive.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return pattern(score_guess(guess.lower(), answer.lower()))
