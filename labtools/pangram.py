"""Letter statistics and pangram detection for text and text files."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path
from string import ascii_letters, ascii_lowercase

ALPHABET_SIZE = len(ascii_lowercase)

_ASCII_LETTERS = frozenset(ascii_letters)


def stats(text: str) -> list[int]:
    """Count each ASCII letter in ``text``, case-insensitively, as 26 counters a..z."""
    counts = [0] * ALPHABET_SIZE
    for char in text:
        if char in _ASCII_LETTERS:
            counts[ord(char.lower()) - ord("a")] += 1
    return counts


def is_pangram(counts: Sequence[int]) -> bool:
    """Return True if ``counts`` covers the whole alphabet with every letter present."""
    return len(counts) == ALPHABET_SIZE and all(count > 0 for count in counts)


def _sum_counts(lines: Iterable[str]) -> list[int]:
    totals = [0] * ALPHABET_SIZE
    for line in lines:
        totals = [total + count for total, count in zip(totals, stats(line))]
    return totals


def count_file(path: str | Path) -> list[int]:
    """Return the letter counts of the whole file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return _sum_counts(handle)


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether the file given on the command line is a pangram."""
    parser = argparse.ArgumentParser(
        prog="pangram", description="Check whether a text file is a pangram."
    )
    parser.add_argument("file", help="path of the text file to check")
    args = parser.parse_args(argv)

    if is_pangram(count_file(args.file)):
        print("Il testo è un pangramma!")
    else:
        print("Il testo NON è un pangramma!")
    return 0