from .validator import (
    WORD_MIN_LEN,
    WORD_MAX_LEN,
    InvalidLength,
    InvalidCharacter,
    InvalidWord,
    WordValidationError,
    WordListError,
    SourceUnreadableError,
    EmptyWordListError,
    InvalidWordsError,
    validate_word,
    validate_list,
    load_words,
    load_words_from_lines,
    default_words,
    pretty_summary,
)
from .io import read_lines, write_lines

__all__ = [
    "WORD_MIN_LEN", "WORD_MAX_LEN",
    "InvalidLength", "InvalidCharacter", "InvalidWord", "WordValidationError",
    "WordListError", "SourceUnreadableError", "EmptyWordListError", "InvalidWordsError",
    "validate_word", "validate_list", "load_words", "load_words_from_lines",
    "default_words", "pretty_summary", "read_lines", "write_lines",
]
