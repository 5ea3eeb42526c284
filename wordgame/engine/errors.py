"""Guess rejections. Recoverable: the game state is left untouched."""


class InvalidGuessError(ValueError):
    """Base class for guesses the game refuses to score."""


class DifferentLengthError(InvalidGuessError):
    def __init__(self, guess: str, length: int, expected: int):
        self.guess = guess
        self.length = length      # length after lowercasing, as compared
        self.expected = expected
        super().__init__(f"'{guess}' has {length} letters, the answer has {expected}")


class NotAWordError(InvalidGuessError):
    def __init__(self, guess: str):
        self.guess = guess
        super().__init__(f"'{guess}' is not in the word list")
