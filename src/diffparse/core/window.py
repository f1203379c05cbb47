"""Cursor-based lookahead window over the lines of a diff"""

import re
from typing import Iterable


class ParseWindow:
    """Owns the line buffer of one parse and exposes the lines around a cursor.

    The cursor starts before the first line; ``slide_forward`` moves it. Lines
    fully matching an ignore pattern are dropped up front and never reach the
    state machine. ``insert_line`` is the only mutation of the buffer.
    """

    def __init__(self, lines: Iterable[str], ignore_patterns: Iterable[str] = ()):
        compiled = [re.compile(p) for p in ignore_patterns]
        self._lines: list[str] = [
            line for line in lines if not any(p.fullmatch(line) for p in compiled)
        ]
        self._cursor = -1

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def line_number(self) -> int:
        """1-based position of the focus line in the (possibly spliced) buffer."""
        return self._cursor + 1

    @property
    def lines(self) -> list[str]:
        """Snapshot of the buffer including any inserted delimiters."""
        return list(self._lines)

    def _at(self, index: int) -> str | None:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def focus_line(self) -> str:
        """The line under the cursor."""
        line = self._at(self._cursor)
        if line is None:
            raise IndexError("no focus line: the window has not been slid onto a line")
        return line

    def future_line(self, offset: int) -> str | None:
        """The line offset positions after the cursor, None past the end."""
        return self._at(self._cursor + offset)

    def past_line(self, offset: int) -> str | None:
        """The line offset positions before the cursor, None before the start."""
        return self._at(self._cursor - offset)

    def insert_line(self, offset: int, content: str) -> None:
        """Splice content in at cursor + offset, shifting every later line by one."""
        if offset < 1:
            raise ValueError(f"can only insert ahead of the focus line, got offset {offset}")
        self._lines.insert(self._cursor + offset, content)

    def slide_forward(self) -> str | None:
        """Move the cursor to the next line and return it, None once exhausted."""
        if self._cursor < len(self._lines):
            self._cursor += 1
        return self._at(self._cursor)
