"""Diff file discovery, line splitting, and the classify/assemble driving loop"""

import sys
from pathlib import Path
from typing import Iterable, Iterator

from diffparse.config import NO_NEWLINE_MARKER, Settings
from diffparse.core.assemble import DiffAssembler
from diffparse.core.models import Diff, ParsedPatch
from diffparse.core.states import DEFAULT_SCAN_LIMIT, ParserState, next_state
from diffparse.core.window import ParseWindow
from diffparse.logging import get_logger


log = get_logger(__name__)

DIFF_EXTENSIONS = {'.diff', '.patch'}
DEFAULT_IGNORE_PATTERNS = (NO_NEWLINE_MARKER,)
STDIN = '-'


def split_lines(text: str) -> list[str]:
    """Split on universal newlines without keeping line endings."""
    return text.splitlines()


def _iter_states(
    lines: Iterable[str],
    scan_limit: int,
    ignore_patterns: Iterable[str],
    ) -> Iterator[tuple[ParserState, str]]:
    """Drive the state machine over lines, yielding (state, line) per buffer line."""
    window = ParseWindow(lines, ignore_patterns)
    state = ParserState.INITIAL
    while (line := window.slide_forward()) is not None:
        state = next_state(state, window, scan_limit)
        yield state, line


def classify(
    lines: Iterable[str],
    scan_limit: int = DEFAULT_SCAN_LIMIT,
    ignore_patterns: Iterable[str] = DEFAULT_IGNORE_PATTERNS,
    ) -> list[tuple[ParserState, str]]:
    """Return the (state, line) sequence, including any inserted blank delimiters."""
    return list(_iter_states(lines, scan_limit, ignore_patterns))


def parse_lines(
    lines: Iterable[str],
    scan_limit: int = DEFAULT_SCAN_LIMIT,
    ignore_patterns: Iterable[str] = DEFAULT_IGNORE_PATTERNS,
    ) -> list[Diff]:
    """Parse already split lines into Diffs, in input order."""
    assembler = DiffAssembler()
    for state, line in _iter_states(lines, scan_limit, ignore_patterns):
        assembler.feed(state, line)
    return assembler.finish()


def parse_text(
    text: str,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
    ignore_patterns: Iterable[str] = DEFAULT_IGNORE_PATTERNS,
    ) -> list[Diff]:
    """Parse a whole unified-diff text into Diffs."""
    return parse_lines(split_lines(text), scan_limit, ignore_patterns)


def read_source(source: str | Path, encoding: str = 'utf-8') -> str:
    """Read a diff from a path, or from stdin when source is '-'."""
    if str(source) == STDIN:
        return sys.stdin.read()
    return Path(source).read_text(encoding=encoding)


def parse_file(path: str | Path, settings: Settings | None = None) -> ParsedPatch:
    """Parse one diff file (or stdin for '-') into a ParsedPatch."""
    settings = settings or Settings()
    text = read_source(path, settings.encoding)
    diffs = parse_text(text, settings.header_scan_limit, settings.ignore_patterns)
    log.info("parsed", source=str(path), diffs=len(diffs))
    return ParsedPatch(source=str(path), diffs=diffs)


def discover_files(path: Path) -> list[Path]:
    """Return sorted .diff/.patch files under path, or [path] if it is a single file."""
    if path.is_file():
        return [path]
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in DIFF_EXTENSIONS)


def parse_path(path: str, settings: Settings | None = None) -> list[ParsedPatch]:
    """Parse stdin, a single file, or every diff file under a directory."""
    if path == STDIN:
        sources = [STDIN]
    else:
        root = Path(path)
        if not root.exists():
            raise FileNotFoundError(f"No such file or directory: {path}")
        sources = discover_files(root)
    results = []
    for p in sources:
        try:
            results.append(parse_file(p, settings))
        except Exception as e:
            raise RuntimeError(f"Failed to parse {p}: {e}") from e
    return results
