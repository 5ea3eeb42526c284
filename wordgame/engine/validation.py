"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it has exactly the answer's length
  - its lowercased form exists in the game's word list

Shape problems are reported before membership so a player typing too few
letters gets the more useful message.
"""

from typing import Container

from .errors import DifferentLengthError, NotAWordError


def check_guess(word: str, allowed: Container[str], N: int) -> str:
    """
    Return the normalized guess, or raise an InvalidGuessError subclass.

    Args:
      word    : proposed guess, any case
      allowed : lowercase word collection; pass a set/frozenset for O(1) lookups
      N       : required word length

    Raises:
      DifferentLengthError, NotAWordError
    """
    w = word.lower()

    if len(w) != N:
        raise DifferentLengthError(word, len(w), N)
    if w not in allowed:
        raise NotAWordError(word)
    return w
