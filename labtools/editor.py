"""A line-oriented text editor with regular-expression search."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union


@dataclass
class Match:
    """One occurrence of a pattern: its line, span, text and optional replacement."""

    line: int
    start: int
    end: int
    text: str
    repl: Optional[str] = None


class LineEditor:
    """Holds text as a list of lines and edits spans within them."""

    def __init__(self, text: str) -> None:
        self.lines: List[str] = text.split("\n")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> LineEditor:
        """Load the lines of the file at ``path``, dropping line terminators."""
        editor = cls("")
        with open(path, encoding="utf-8", newline="\n") as handle:
            editor.lines = [
                line.removesuffix("\n").removesuffix("\r") for line in handle
            ]
        return editor

    def all_lines(self) -> List[str]:
        """Return a copy of the current lines."""
        return list(self.lines)

    def replace(self, line: int, start: int, end: int, subst: str) -> None:
        """Replace ``start:end`` of line ``line`` with ``subst``.

        A line index or span outside the text leaves the text unchanged.
        """
        if not 0 <= line < len(self.lines):
            return
        current = self.lines[line]
        if not 0 <= start <= end <= len(current):
            return
        self.lines[line] = current[:start] + subst + current[end:]


def find_matches(lines: Iterable[str], pattern: str) -> List[Match]:
    """Return every match of ``pattern`` in ``lines``, in line then position order."""
    regex = re.compile(pattern)
    return [
        Match(line=index, start=found.start(), end=found.end(), text=found.group())
        for index, line in enumerate(lines)
        for found in regex.finditer(line)
    ]