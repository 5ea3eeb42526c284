from .scoring import LetterScore, score, score_guess, pattern
from .errors import InvalidGuessError, DifferentLengthError, NotAWordError
from .validation import check_guess
from .game import WordleGame

__all__ = [
    "LetterScore", "score", "score_guess", "pattern",
    "InvalidGuessError", "DifferentLengthError", "NotAWordError",
    "check_guess", "WordleGame",
]
