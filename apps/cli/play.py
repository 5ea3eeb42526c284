# apps/cli/play.py
"""
Play the word game in a terminal, one guess per line.

This script:
  1) Loads the word list given on the command line (or the bundled default).
     A list with some bad lines is still playable: the problems are printed
     and, after ENTER, the game continues with the valid words.
  2) Picks an answer (seeded with --seed for reproducible games).
  3) Reads guesses until the game is won, lost or closed (EOF / Ctrl-C),
     printing each try as letters + pattern and the keyboard hints.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play my_words.txt --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List

from wordgame.datasets import InvalidWordsError, WordListError, default_words, load_words
from wordgame.engine import WordleGame, pattern
from wordgame.harness import GameSession, SessionState

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")


def _load(path: str | None) -> List[str] | None:
    """
    Word list for the game, or None if there is nothing playable.
    """
    if path is None:
        return default_words()

    try:
        return load_words(path)
    except InvalidWordsError as e:
        print(e, file=sys.stderr)
        if not e.words:
            print("No word list to play with", file=sys.stderr)
            return None
        print("There are still words left in the word list, playing")
        print("Press ENTER to continue")
        sys.stdin.readline()
        return e.words
    except WordListError as e:
        print(f"{path}: {e}", file=sys.stderr)
        return None


def _keyboard(game: WordleGame) -> str:
    lines = []
    for row in KEYBOARD_ROWS:
        hints = game.known_guesses(row)
        lines.append(" ".join(ch for ch, _ in hints) + "   " + " ".join(s.symbol for _, s in hints))
    return "\n".join(lines)


def _read_guess(prompt: str) -> str | None:
    try:
        return input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        return None


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load words, run the game loop. Returns the exit code.
    """
    ap = argparse.ArgumentParser(prog="word_game", description="Play wordle in terminal")
    ap.add_argument("word_list", nargs="?",
                    help="text file with one word per line (default: bundled list)")
    ap.add_argument("--seed", type=int, help="RNG seed for the answer pick")
    ap.add_argument("--answer", help="play a fixed answer (must be in the list)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    loglevel = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(format='%(levelname)s [%(asctime)s] %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S', level=loglevel)

    words = _load(args.word_list)
    if not words:
        return 1

    try:
        game = WordleGame(words, args.answer, rng=random.Random(args.seed))
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    session = GameSession(game)
    print(f"Guess the {len(game.answer)}-letter word. G = right spot, Y = wrong spot, - = absent.")

    while not session.finished:
        guess = _read_guess(f"[{game.lives} left] > ")
        if guess is None:
            session.close()
            break
        if session.submit(guess) is None:
            print(f"  {session.error}")
            continue

        for word, scores in session.tries:
            print(f"  {word}  {pattern(scores)}")
        print(_keyboard(game))

    if session.state is SessionState.WON:
        print(f"You won in {len(session.tries)}!")
    elif session.state is SessionState.LOST:
        print(f"Out of tries. The word was '{game.answer}'.")
    else:
        print(f"\nBye. The word was '{game.answer}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
