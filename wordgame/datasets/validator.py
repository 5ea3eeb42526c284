"""
Word list validator for wordgame.

What this module does:
- Validate single words: lowercase-normalize, check length range and that every
  character is alphabetic. ALL problems are collected, never just the first.
- Validate whole lists line by line, keeping the valid words and a report for
  every invalid line (original index, original text, every error).
- Load a list from a file or raw bytes with partial-failure semantics: invalid
  lines never cost you the valid ones. The caller gets the valid subset back on
  the raised InvalidWordsError and decides whether it's still playable.
- Ship a pre-vetted default list (data/word_list.txt).

Typical use:
    from wordgame.datasets import load_words, InvalidWordsError
    try:
        words = load_words("my_words.txt")
    except InvalidWordsError as e:
        print(e)            # every bad line, with its errors
        words = e.words     # still usable if non-empty
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .io import read_lines, split_lines

logger = logging.getLogger(__name__)

# Inclusive length range for playable words, counted in characters (code points), not bytes.
WORD_MIN_LEN = 3
WORD_MAX_LEN = 7

DEFAULT_WORD_LIST = Path(__file__).parent / "data" / "word_list.txt"


# -----------------------------
# Per-word errors
# -----------------------------

@dataclass(frozen=True)
class InvalidLength:
    """Word length falls outside [WORD_MIN_LEN, WORD_MAX_LEN]."""
    length: int

    def __str__(self) -> str:
        return f"Length of {self.length}, it should be between {WORD_MIN_LEN} and {WORD_MAX_LEN}"


@dataclass(frozen=True)
class InvalidCharacter:
    """Non-alphabetic character at a 0-based position."""
    position: int
    char: str

    def __str__(self) -> str:
        return f"Invalid character '{self.char}' at index {self.position}"


WordError = Union[InvalidLength, InvalidCharacter]


@dataclass
class InvalidWord:
    """One rejected line of a word list."""
    position: int                  # 0-based line index in the source
    word: str                      # original text, not normalized
    errors: List[WordError] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"- '{self.word}' at index {self.position}:"]
        lines += [f"    - {e}" for e in self.errors]
        return "\n".join(lines)


class WordValidationError(ValueError):
    """A single word failed validation; `.errors` holds every problem found."""

    def __init__(self, word: str, errors: List[WordError]):
        self.word = word
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))


# -----------------------------
# Load-time errors
# -----------------------------

class WordListError(Exception):
    """Base class for word list loading failures."""


class SourceUnreadableError(WordListError):
    def __init__(self, source=None):
        self.source = source
        super().__init__("File cannot be read/does not exist")


class EmptyWordListError(WordListError):
    def __init__(self):
        super().__init__("Word list format is improperly formatted")


class InvalidWordsError(WordListError):
    """
    Some lines were invalid. Non-fatal: `.words` holds the valid subset in
    source order, `.invalid` every rejected line.
    """

    def __init__(self, words: List[str], invalid: List[InvalidWord]):
        self.words = list(words)
        self.invalid = list(invalid)
        super().__init__(
            "Some words have errors:\n" + "\n".join(str(w) for w in self.invalid)
        )


# -----------------------------
# Public API
# -----------------------------

def validate_word(raw: str) -> str:
    """
    Normalize and validate one word.

    Returns:
      the lowercased word

    Raises:
      WordValidationError listing the length error (if any) AND every
      non-alphabetic character, in that order.

    Examples:
      validate_word("Crane") -> "crane"
      validate_word("Ab1")   -> WordValidationError([InvalidCharacter(2, '1')])
    """
    word = raw.lower()
    errors: List[WordError] = []

    if not WORD_MIN_LEN <= len(word) <= WORD_MAX_LEN:
        errors.append(InvalidLength(len(word)))
    for pos, ch in enumerate(word):
        if not ch.isalpha():
            errors.append(InvalidCharacter(pos, ch))

    if errors:
        raise WordValidationError(raw, errors)
    return word


def validate_list(lines: Iterable[str]) -> Tuple[List[str], List[InvalidWord]]:
    """
    Validate every line in order. Never fails as a whole.

    Returns:
      (valid_words, invalid_words); either may be empty.
    """
    valid: List[str] = []
    invalid: List[InvalidWord] = []

    for pos, raw in enumerate(lines):
        try:
            valid.append(validate_word(raw))
        except WordValidationError as e:
            invalid.append(InvalidWord(pos, raw, e.errors))

    return valid, invalid


def load_words_from_lines(lines: Iterable[str]) -> List[str]:
    """
    Turn already-read lines into a word list.

    Raises:
      EmptyWordListError  if there are no lines at all
      InvalidWordsError   if any line is invalid (carries the valid subset)
    """
    lines = list(lines)
    if not lines:
        raise EmptyWordListError()

    valid, invalid = validate_list(lines)
    if invalid:
        logger.debug("rejected %d of %d line(s)", len(invalid), len(lines))
        raise InvalidWordsError(valid, invalid)
    return valid


def load_words(source: Path | str | bytes) -> List[str]:
    """
    Load a word list from a file path, or from raw UTF-8 bytes already in memory.

    Raises:
      SourceUnreadableError  if the file is missing/unreadable or not UTF-8
      EmptyWordListError     if the source contains zero lines
      InvalidWordsError      if some lines are invalid (valid subset attached)
    """
    try:
        if isinstance(source, bytes):
            lines = split_lines(source)
        else:
            lines = read_lines(source)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadableError(source) from e

    words = load_words_from_lines(lines)
    logger.info("Loaded %s words from %s", len(words),
                "<bytes>" if isinstance(source, bytes) else source)
    return words


def default_words() -> List[str]:
    """
    The bundled fallback list. Vetted when it is built and by the test suite,
    so it is not re-validated here.
    """
    return read_lines(DEFAULT_WORD_LIST)


def pretty_summary(words: List[str], invalid: List[InvalidWord]) -> str:
    """
    Compact one-liner for console/logs.

    Example:
        words=2309 (uniq=2309, len=5..5) | invalid=0 | OK
    """
    uniq = len(set(words))
    if words:
        lens = sorted({len(w) for w in words})
        span = f"{lens[0]}..{lens[-1]}"
    else:
        span = "-"
    status = "OK" if words and not invalid else "FAIL"
    return f"words={len(words)} (uniq={uniq}, len={span}) | invalid={len(invalid)} | {status}"
