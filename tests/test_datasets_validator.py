from pathlib import Path

import pytest
from wordgame.datasets import (
    InvalidLength, InvalidCharacter, InvalidWord, WordValidationError,
    WordListError, SourceUnreadableError, EmptyWordListError, InvalidWordsError,
    validate_word, validate_list, load_words, load_words_from_lines,
    default_words, pretty_summary, WORD_MIN_LEN, WORD_MAX_LEN,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


# --- single words ---
@pytest.mark.parametrize("raw,expected", [
    ("crane", "crane"),
    ("CRANE", "crane"),
    ("Cat", "cat"),
    ("letters", "letters"),
    ("café", "café"),
])
def test_validate_word_ok(raw, expected):
    assert validate_word(raw) == expected

def test_validate_word_digit_only_character_error():
    with pytest.raises(WordValidationError) as exc:
        validate_word("Ab1")
    assert exc.value.errors == [InvalidCharacter(2, "1")]

def test_validate_word_collects_all_errors():
    with pytest.raises(WordValidationError) as exc:
        validate_word("a1-")
    assert exc.value.errors == [InvalidCharacter(1, "1"), InvalidCharacter(2, "-")]

    with pytest.raises(WordValidationError) as exc:
        validate_word("x9")
    assert exc.value.errors == [InvalidLength(2), InvalidCharacter(1, "9")]

@pytest.mark.parametrize("raw", ["ab", "abcdefgh", ""])
def test_validate_word_length_bounds(raw):
    with pytest.raises(WordValidationError) as exc:
        validate_word(raw)
    assert exc.value.errors == [InvalidLength(len(raw))]

def test_error_messages():
    assert str(InvalidCharacter(2, "1")) == "Invalid character '1' at index 2"
    assert str(InvalidLength(12)) == f"Length of 12, it should be between {WORD_MIN_LEN} and {WORD_MAX_LEN}"
    bad = InvalidWord(0, "a1", [InvalidLength(2), InvalidCharacter(1, "1")])
    assert str(bad) == (
        "- 'a1' at index 0:\n"
        f"    - Length of 2, it should be between {WORD_MIN_LEN} and {WORD_MAX_LEN}\n"
        "    - Invalid character '1' at index 1"
    )


# --- lists ---
def test_validate_list_partial_failure():
    valid, invalid = validate_list(["cat", "", "toolong12345"])
    assert valid == ["cat"]
    assert [(b.position, b.word) for b in invalid] == [(1, ""), (2, "toolong12345")]
    assert invalid[0].errors == [InvalidLength(0)]
    assert invalid[1].errors == [InvalidLength(12)] + [
        InvalidCharacter(pos, ch) for pos, ch in zip(range(7, 12), "12345")
    ]

def test_validate_list_keeps_original_text_and_duplicates():
    valid, invalid = validate_list(["Crane", "crane", "Tw0"])
    assert valid == ["crane", "crane"]
    assert invalid[0].word == "Tw0"

def test_validate_list_empty_input():
    assert validate_list([]) == ([], [])


# --- loading ---
def test_load_words_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["Crane", "raise", "those"])
    assert load_words(p) == ["crane", "raise", "those"]
    assert load_words(str(p)) == ["crane", "raise", "those"]

def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(SourceUnreadableError) as exc:
        load_words(tmp_path / "nope.txt")
    assert str(exc.value) == "File cannot be read/does not exist"

def test_load_words_directory_is_unreadable(tmp_path: Path):
    with pytest.raises(SourceUnreadableError):
        load_words(tmp_path)

def test_load_words_empty_file(tmp_path: Path):
    p = tmp_path / "empty.txt"
    p.write_text("", encoding="utf-8")
    with pytest.raises(EmptyWordListError):
        load_words(p)

def test_load_words_invalid_lines_keep_valid_subset(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nab\nth0se\nraise\n", encoding="utf-8")
    with pytest.raises(InvalidWordsError) as exc:
        load_words(p)
    err = exc.value
    assert isinstance(err, WordListError)
    assert err.words == ["crane", "raise"]
    assert [b.position for b in err.invalid] == [1, 2]
    msg = str(err)
    assert msg.startswith("Some words have errors:\n")
    assert "- 'ab' at index 1:" in msg
    assert "Invalid character '0' at index 2" in msg

def test_load_words_all_invalid_has_empty_subset():
    with pytest.raises(InvalidWordsError) as exc:
        load_words_from_lines(["12", "!!!"])
    assert exc.value.words == []
    assert len(exc.value.invalid) == 2

def test_load_words_from_bytes():
    assert load_words("crane\r\nraise\n".encode("utf-8")) == ["crane", "raise"]
    with pytest.raises(SourceUnreadableError):
        load_words(b"\xff\xfe\xfd")
    with pytest.raises(EmptyWordListError):
        load_words(b"")


# --- bundled list ---
def test_default_words_pass_validation():
    words = default_words()
    valid, invalid = validate_list(words)
    assert invalid == []
    assert valid == words
    assert len(words) > 100

def test_pretty_summary():
    valid, invalid = validate_list(["crane", "crane", "cat", "x"])
    s = pretty_summary(valid, invalid)
    assert s == "words=3 (uniq=2, len=3..5) | invalid=1 | FAIL"
    assert pretty_summary(default_words(), []).endswith("| OK")
