"""
Build the bundled default word list.

What it does:
- Downloads a page of past Wordle answers (or reads a local text file with --in).
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Runs every token through the same validator the game uses, so the shipped
  list never needs checking at runtime; rejected tokens are reported.
- De-duplicates while preserving order (optionally sorts) and writes the file.

Usage:
    python -m script.build_word_list
    python -m script.build_word_list --in extra_words.txt --sort
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from wordgame.datasets import pretty_summary, read_lines, validate_list, write_lines
from wordgame.datasets.validator import DEFAULT_WORD_LIST

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Za-z]+)\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")
    text = soup.get_text("\n", strip=True)
    return [m.group(2) for m in ROW_RE.finditer(text)]


def main():
    ap = argparse.ArgumentParser(description="Fetch, vet and write the default word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--in", dest="inp", help="read words from a local file instead of --url")
    ap.add_argument("--out", default=str(DEFAULT_WORD_LIST))
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    raw = read_lines(args.inp) if args.inp else fetch_words(args.url)
    valid, invalid = validate_list(raw)
    for bad in invalid:
        print(bad)

    words = unique_preserve_order(valid)
    if args.sort:
        words = sorted(words)

    print(pretty_summary(words, invalid))
    if not words:
        raise SystemExit("no valid words, nothing written")
    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
