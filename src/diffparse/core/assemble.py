"""Build Diff/Hunk/Line objects from a stream of classified lines"""

from diffparse.core.errors import MalformedHunkHeaderError
from diffparse.core.models import Diff, Hunk, Line, LineType, Range
from diffparse.core.states import HUNK_START_RE, ParserState


_LINE_TYPES: dict[ParserState, LineType] = {
    ParserState.FROM_LINE: LineType.FROM,
    ParserState.TO_LINE: LineType.TO,
    ParserState.NEUTRAL_LINE: LineType.NEUTRAL,
}


def parse_file_name(line: str) -> str:
    """Strip the ---/+++ marker, any tab-separated timestamp/revision, and whitespace."""
    return line[3:].split("\t", 1)[0].strip()


def parse_ranges(line: str) -> tuple[Range, Range]:
    """Return (from_range, to_range) of a '@@ -a,b +c,d @@' header; counts default to 1."""
    m = HUNK_START_RE.match(line)
    if not m:
        raise MalformedHunkHeaderError(line)
    from_start, from_count, to_start, to_count = m.groups()
    return (
        Range(line_start=int(from_start), line_count=int(from_count) if from_count else 1),
        Range(line_start=int(to_start), line_count=int(to_count) if to_count else 1),
    )


def _line_content(state: ParserState, line: str) -> str:
    """FROM/TO lines lose their marker; neutral lines stay verbatim."""
    return line if state == ParserState.NEUTRAL_LINE else line[1:]


class DiffAssembler:
    """Accumulates diffs from (state, line) events in input order."""

    def __init__(self):
        self.diffs: list[Diff] = []
        self._current: Diff | None = None
        self._hunk: Hunk | None = None
        self._pending_header: list[str] = []

    def feed(self, state: ParserState, line: str) -> None:
        if state == ParserState.INITIAL:
            return
        if state == ParserState.HEADER:
            self._pending_header.append(line)
        elif state == ParserState.FROM_FILE:
            self._close()
            self._current = Diff(from_file_name=parse_file_name(line), header_lines=self._pending_header)
            self._pending_header = []
        elif state == ParserState.TO_FILE:
            self._current.to_file_name = parse_file_name(line)
        elif state == ParserState.HUNK_START:
            from_range, to_range = parse_ranges(line)
            self._hunk = Hunk(from_range=from_range, to_range=to_range)
            self._current.hunks.append(self._hunk)
        elif state in _LINE_TYPES:
            self._hunk.lines.append(Line(type=_LINE_TYPES[state], content=_line_content(state, line)))
        elif state == ParserState.END:
            self._close()
            self._pending_header = []

    def _close(self) -> None:
        """Close the open hunk and diff, keeping the diff unless it is empty."""
        if self._current is not None and not self._current.is_empty:
            self.diffs.append(self._current)
        self._current = None
        self._hunk = None

    def finish(self) -> list[Diff]:
        """Close whatever is still open and return every diff in input order."""
        self._close()
        self._pending_header = []
        return self.diffs
