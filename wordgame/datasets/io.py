"""
Line-oriented text I/O for word lists.

Word lists are plain UTF-8 text, one entry per line, no header. Blank lines are
kept as entries so the validator can report them with their original index.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def split_lines(source: str | bytes) -> List[str]:
    """
    Split raw text (or UTF-8 bytes) into lines without their CR/LF endings.
    Raises UnicodeDecodeError for bytes that are not valid UTF-8.
    """
    if isinstance(source, bytes):
        source = source.decode("utf-8")
    return source.splitlines()


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return split_lines(p.read_bytes())


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
