"""Integration tests: parse each sample diff under tests/data end to end.

Each test parses one real-world shaped file with default settings and asserts
stable expected values. Read this file top-to-bottom as a reference for how
the diff flavours come out.

    generic.diff   two header-less sections back to back, no blank delimiter
    idea.diff      IntelliJ IDEA export: 'Index:' banners of 2 and 5 lines,
                   tab-suffixed file names, no blank delimiters
    idea_sql.diff  SQL comment lines that look like ---/+++ file markers
    git.diff       'diff --git' headers directly after the previous hunk
    svn.diff       blank-delimited sections with a 'No newline' marker
"""

import pytest

from diffparse.config import Settings
from diffparse.core.models import LineType
from diffparse.core.parse import parse_file


def _types(hunk) -> list[LineType]:
    return [line.type for line in hunk.lines]


# --- generic ---

@pytest.fixture(name="generic")
def generic_fixture(data_dir):
    return parse_file(data_dir / "generic.diff").diffs


def test_generic_file_names(generic):
    assert len(generic) == 2
    assert (generic[0].from_file_name, generic[0].to_file_name) == ("/dev/null", "//depot/SomeClass.java")
    assert (generic[1].from_file_name, generic[1].to_file_name) == (
        "//depot/SomeOtherClass.java", "/depot/SomeOtherClass.java",
    )


def test_generic_new_file(generic):
    added = generic[0]
    assert added.is_new_file
    assert added.header_lines == []
    hunk = added.hunks[0]
    assert (hunk.from_range.line_start, hunk.from_range.line_count) == (0, 0)
    assert (hunk.to_range.line_start, hunk.to_range.line_count) == (1, 12)
    assert _types(hunk) == [LineType.TO] * 12
    assert hunk.lines[-1].content == "}"


def test_generic_modified_file(generic):
    hunk = generic[1].hunks[0]
    assert (hunk.from_range.line_start, hunk.from_range.line_count) == (21, 7)
    assert (hunk.to_range.line_start, hunk.to_range.line_count) == (21, 6)
    assert len(hunk.lines) == 7
    assert hunk.lines[3].type == LineType.FROM
    assert hunk.lines[3].content == "        cleanup();"
    assert hunk.lines[-1].content == " }"


# --- idea ---

@pytest.fixture(name="idea")
def idea_fixture(data_dir):
    return parse_file(data_dir / "idea.diff").diffs


def test_idea_sections(idea):
    assert [d.to_file_name for d in idea] == [
        "src/model/Diff.java", "src/model/SomeClass.java", "build.gradle",
    ]
    assert [len(d.header_lines) for d in idea] == [2, 5, 5]
    assert idea[1].header_lines[0] == "Index: src/model/SomeClass.java"


def test_idea_deleted_and_added_files(idea):
    deleted, added = idea[0], idea[1]
    assert deleted.is_deleted_file
    assert _types(deleted.hunks[0]) == [LineType.FROM] * 5
    assert added.is_new_file
    assert _types(added.hunks[0]) == [LineType.TO] * 4


def test_idea_two_hunks(idea):
    first, second = idea[2].hunks
    assert len(first.lines) == 7
    assert first.lines[2].type == LineType.FROM
    assert first.lines[3].type == LineType.TO
    assert (second.from_range.line_start, second.to_range.line_count) == (13, 4)
    assert len(second.lines) == 4
    assert second.lines[2].type == LineType.TO


def test_idea_short_scan_limit_keeps_banner_in_hunk(data_dir):
    """With a 2-line scan limit the 5-line banners are read as context lines."""
    diffs = parse_file(data_dir / "idea.diff", Settings(header_scan_limit=2)).diffs
    assert len(diffs) == 3
    lines = diffs[0].hunks[0].lines
    assert len(lines) == 10
    assert _types(diffs[0].hunks[0])[5:] == [LineType.NEUTRAL] * 5
    assert lines[5].content == "Index: src/model/SomeClass.java"
    assert diffs[1].header_lines == []
    assert diffs[2].header_lines == []


# --- idea_sql ---

def test_idea_sql_marker_like_content(data_dir):
    """Removed and added lines that start with ---/+++ stay inside the hunk."""
    diffs = parse_file(data_dir / "idea_sql.diff").diffs
    assert len(diffs) == 1
    assert len(diffs[0].header_lines) == 5
    lines = diffs[0].hunks[0].lines
    assert len(lines) == 12
    assert (lines[3].type, lines[3].content) == (LineType.FROM, "--- @author someAuthor -- removed comment line")
    assert (lines[4].type, lines[4].content) == (LineType.FROM, "--- @issue 1234 -- removed comment line")
    assert (lines[5].type, lines[5].content) == (LineType.FROM, "  SELECT * FROM SOME_TABLE")
    assert (lines[6].type, lines[6].content) == (LineType.TO, "-- some new comments -- added comment line")
    assert (lines[7].type, lines[7].content) == (LineType.TO, "++ marker-like added line")
    assert (lines[8].type, lines[8].content) == (LineType.TO, "  SELECT * FROM NEW_TABLE")
    assert (lines[9].type, lines[9].content) == (LineType.NEUTRAL, "  -- some sql comment line")


# --- git ---

def test_git_headers_and_hunks(data_dir):
    diffs = parse_file(data_dir / "git.diff").diffs
    assert [d.from_file_name for d in diffs] == ["a/src/app.py", "a/src/util.py"]
    assert diffs[0].header_lines == [
        "diff --git a/src/app.py b/src/app.py",
        "index 3b18e51..a9c2f4d 100644",
    ]
    assert len(diffs[1].header_lines) == 2
    assert [len(h.lines) for h in diffs[0].hunks] == [4]
    assert [len(h.lines) for h in diffs[1].hunks] == [3, 3]
    assert diffs[1].hunks[1].to_range.line_start == 11


# --- svn ---

def test_svn_blank_delimited(data_dir):
    diffs = parse_file(data_dir / "svn.diff").diffs
    assert [d.to_file_name for d in diffs] == ["trunk/README.txt", "trunk/main.c"]
    assert [len(d.header_lines) for d in diffs] == [2, 2]
    assert len(diffs[0].hunks[0].lines) == 4
    assert len(diffs[1].hunks[0].lines) == 5
    assert diffs[1].added_count == 1


def test_svn_no_newline_marker_kept_on_request(data_dir):
    diffs = parse_file(data_dir / "svn.diff", Settings(ignore_patterns=[])).diffs
    lines = diffs[0].hunks[0].lines
    assert len(lines) == 5
    assert lines[-1].content == "\\ No newline at end of file"
