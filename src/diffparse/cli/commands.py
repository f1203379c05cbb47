"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from diffparse.config import Settings, load_config
from diffparse.core.errors import DiffParseError
from diffparse.core.export import diff_stats, format_stats, to_json
from diffparse.core.parse import classify, parse_path, read_source, split_lines
from diffparse.logging import configure_logging, get_logger


log = get_logger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    log.error("parse_failed", error=msg, cause=str(cause) if cause else None)
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings)
    return settings


def _parse(path: str, settings: Settings) -> list:
    try:
        return parse_path(path, settings)
    except FileNotFoundError as e:
        _fail(str(e))
    except (RuntimeError, DiffParseError) as e:
        _fail(str(e))


def parse_cmd(
    path: Annotated[str, typer.Argument(help="Diff file, directory of .diff/.patch files, or '-' for stdin")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write JSON here instead of stdout")] = None,
    scan_limit: Annotated[Optional[int], typer.Option("--scan-limit", help="Max banner lines scanned for a new section")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Encoding of the diff files")] = None,
    ):
    """Parse unified diffs into JSON (diffs -> hunks -> typed lines)."""
    settings = _settings(overrides={"header_scan_limit": scan_limit, "encoding": encoding})
    patches = _parse(path, settings)
    if not patches:
        typer.echo(f"No .diff/.patch files found under {path}.", err=True)
        raise typer.Exit(1)

    payload = to_json(patches)
    if out is None:
        typer.echo(payload)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(payload + "\n", encoding="utf-8")
    typer.echo(f"Wrote {sum(len(p.diffs) for p in patches)} diff(s) to {out}", err=True)


def stats_cmd(
    path: Annotated[str, typer.Argument(help="Diff file, directory of .diff/.patch files, or '-' for stdin")],
    scan_limit: Annotated[Optional[int], typer.Option("--scan-limit", help="Max banner lines scanned for a new section")] = None,
    ):
    """Print added/removed line counts per changed file."""
    settings = _settings(overrides={"header_scan_limit": scan_limit})
    patches = _parse(path, settings)

    files = added = removed = 0
    for patch in patches:
        for diff in patch.diffs:
            stats = diff_stats(diff)
            typer.echo(format_stats(stats))
            files += 1
            added += stats["added"]
            removed += stats["removed"]
    typer.echo(f"{files} file(s) changed, {added} insertion(s)(+), {removed} deletion(s)(-)")


def states_cmd(
    path: Annotated[str, typer.Argument(help="Diff file or '-' for stdin")],
    scan_limit: Annotated[Optional[int], typer.Option("--scan-limit", help="Max banner lines scanned for a new section")] = None,
    ):
    """Show the state assigned to every line (debugging aid)."""
    settings = _settings(overrides={"header_scan_limit": scan_limit})
    try:
        text = read_source(path, settings.encoding)
        states = classify(split_lines(text), settings.header_scan_limit, settings.ignore_patterns)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        _fail(f"Cannot read {path}", e)
    except DiffParseError as e:
        _fail("Parse failed", e)

    for number, (state, line) in enumerate(states, start=1):
        typer.echo(f"{number:>5} {state.name:<12} | {line}")
