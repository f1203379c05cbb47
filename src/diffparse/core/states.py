"""Line classification state machine for unified diffs.

Each input line is assigned one ParserState. ``next_state`` takes the state of
the previous line and a window focused on the current line and returns the
state of the current line. The transition table lives in ``_TRANSITIONS``, one
small function per state.

Some tools (svn, IntelliJ IDEA, assorted generic exporters) do not separate
file sections with a blank line. When a content line is directly followed by
a ``---``/``+++``/``@@`` triple, a blank delimiter line is spliced into the
window so the next section starts cleanly.
"""

import re
from enum import Enum
from typing import Callable

from diffparse.core.errors import StructuralError
from diffparse.core.window import ParseWindow
from diffparse.logging import get_logger


log = get_logger(__name__)

DEFAULT_SCAN_LIMIT = 6     # longest known tool banner (IDEA) is 6 lines

HUNK_START_RE = re.compile(r'^@@\s+-(\d+)(?:,(\d+))?\s+\+(\d+)(?:,(\d+))?\s+@@.*$')
HEADER_START_RE = re.compile(r'^(?:diff\b|Index:).*$')


class ParserState(str, Enum):
    """Role of a line within a unified diff"""
    INITIAL = "initial"
    HEADER = "header"
    FROM_FILE = "from_file"
    TO_FILE = "to_file"
    HUNK_START = "hunk_start"
    FROM_LINE = "from_line"
    TO_LINE = "to_line"
    NEUTRAL_LINE = "neutral_line"
    END = "end"


CONTENT_STATES = frozenset({ParserState.FROM_LINE, ParserState.TO_LINE, ParserState.NEUTRAL_LINE})


# --- line-shape predicates ---

def matches_from_file(line: str) -> bool:
    return line.startswith('---')


def matches_to_file(line: str) -> bool:
    return line.startswith('+++')


def matches_from_line(line: str) -> bool:
    return line.startswith('-')


def matches_to_line(line: str) -> bool:
    return line.startswith('+')


def matches_hunk_start(line: str) -> bool:
    return HUNK_START_RE.match(line) is not None


def matches_header_start(line: str | None) -> bool:
    return line is not None and HEADER_START_RE.match(line) is not None


def is_blank(line: str | None) -> bool:
    return line is not None and not line.strip()


# --- lookahead tests ---

def matches_whole_diff_header(window: ParseWindow, offset: int) -> bool:
    """True if from-file, to-file and hunk-start lines start offset lines ahead, in order."""
    from_file = window.future_line(offset)
    to_file = window.future_line(offset + 1)
    hunk_start = window.future_line(offset + 2)
    return (
        from_file is not None and to_file is not None and hunk_start is not None
        and matches_from_file(from_file)
        and matches_to_file(to_file)
        and matches_hunk_start(hunk_start)
    )


def _blank_line_ends_section(window: ParseWindow) -> bool:
    """Decide whether the blank focus line is a section delimiter or in-section whitespace."""
    offset = 1
    while (ahead := window.future_line(offset)) is not None:
        if matches_from_file(ahead):
            return True
        if is_blank(ahead):
            return False
        offset += 1
    return True


def _delimiter_offset(window: ParseWindow, section_offset: int) -> int | None:
    """Where a blank delimiter belongs for a section whose ``---`` line is section_offset ahead.

    Prefers the start of the section's banner (``diff ...``/``Index: ...``) when
    one sits between the focus line and the ``---`` line. None means the spot
    already has a delimiter.
    """
    for offset in range(section_offset - 1, 0, -1):
        if matches_header_start(window.future_line(offset)):
            return None if is_blank(window.future_line(offset - 1)) else offset
    return section_offset


def matches_end_pattern(line: str, window: ParseWindow, scan_limit: int = DEFAULT_SCAN_LIMIT) -> bool:
    """True if the focus line is the delimiter that ends the current diff section.

    A non-blank line is never the delimiter itself, but when a new section
    starts within scan_limit lines without a blank line in between, a blank
    delimiter is inserted ahead and the lookahead is repeated on the new buffer.
    """
    if is_blank(line):
        return _blank_line_ends_section(window)

    attempted: set[int] = set()
    while True:
        for offset in range(1, scan_limit + 1):
            if is_blank(window.future_line(offset)):
                return False
            if matches_whole_diff_header(window, offset):
                break
        else:
            return False

        insert_at = _delimiter_offset(window, offset)
        if insert_at is None or insert_at in attempted:
            return False
        attempted.add(insert_at)
        log.debug("insert_delimiter", line_number=window.line_number, offset=insert_at)
        window.insert_line(insert_at, "")


def _split_ahead(line: str, window: ParseWindow) -> None:
    """Insert a delimiter right after a content line that runs straight into a new section."""
    # The line itself stays content and the spliced blank becomes END. Classifying
    # the line as END instead would drop it, and with it one-line hunks.
    if not is_blank(line) and matches_whole_diff_header(window, 1):
        log.debug("insert_delimiter", line_number=window.line_number, offset=1)
        window.insert_line(1, "")


def _content_state(line: str) -> ParserState:
    if matches_from_line(line):
        return ParserState.FROM_LINE
    if matches_to_line(line):
        return ParserState.TO_LINE
    if matches_hunk_start(line):
        return ParserState.HUNK_START
    return ParserState.NEUTRAL_LINE


# --- transitions, keyed by the state of the previous line ---

def _from_initial(line: str, window: ParseWindow, scan_limit: int) -> ParserState:
    return ParserState.FROM_FILE if matches_from_file(line) else ParserState.HEADER


def _from_header(line: str, window: ParseWindow, scan_limit: int) -> ParserState:
    return ParserState.FROM_FILE if matches_from_file(line) else ParserState.HEADER


def _from_from_file(line: str, window: ParseWindow, scan_limit: int) -> ParserState:
    if matches_to_file(line):
        return ParserState.TO_FILE
    raise StructuralError(ParserState.FROM_FILE, "TO_FILE ('+++')", line, window.line_number)


def _from_to_file(line: str, window: ParseWindow, scan_limit: int) -> ParserState:
    if matches_hunk_start(line):
        return ParserState.HUNK_START
    raise StructuralError(ParserState.TO_FILE, "HUNK_START ('@@')", line, window.line_number)


def _from_hunk_start(line: str, window: ParseWindow, scan_limit: int) -> ParserState:
    _split_ahead(line, window)
    if matches_from_line(line):
        return ParserState.FROM_LINE
    if matches_to_line(line):
        return ParserState.TO_LINE
    return ParserState.NEUTRAL_LINE


def _from_content(line: str, window: ParseWindow, scan_limit: int) -> ParserState:
    _split_ahead(line, window)
    if matches_end_pattern(line, window, scan_limit):
        return ParserState.END
    return _content_state(line)


def _from_end(line: str, window: ParseWindow, scan_limit: int) -> ParserState:
    if matches_header_start(line):
        return ParserState.HEADER
    if matches_from_file(line):
        return ParserState.FROM_FILE
    return ParserState.INITIAL


_TRANSITIONS: dict[ParserState, Callable[[str, ParseWindow, int], ParserState]] = {
    ParserState.INITIAL: _from_initial,
    ParserState.HEADER: _from_header,
    ParserState.FROM_FILE: _from_from_file,
    ParserState.TO_FILE: _from_to_file,
    ParserState.HUNK_START: _from_hunk_start,
    ParserState.FROM_LINE: _from_content,
    ParserState.TO_LINE: _from_content,
    ParserState.NEUTRAL_LINE: _from_content,
    ParserState.END: _from_end,
}


def next_state(state: ParserState, window: ParseWindow, scan_limit: int = DEFAULT_SCAN_LIMIT) -> ParserState:
    """Return the state of the window's focus line given the state of the line before it.

    Raises StructuralError when a ``---`` line is not followed by ``+++``, or a
    ``+++`` line not by ``@@``.
    """
    line = window.focus_line()
    new_state = _TRANSITIONS[state](line, window, scan_limit)
    log.debug(
        "transition",
        from_state=state.name,
        to_state=new_state.name,
        line_number=window.line_number,
        line=line,
    )
    return new_state
