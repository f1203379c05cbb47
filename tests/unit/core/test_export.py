"""Unit tests for core/export.py"""

import json

import pytest

from diffparse.core.export import diff_stats, diff_to_dict, format_stats, patch_to_dict, to_json
from diffparse.core.models import ParsedPatch
from diffparse.core.parse import parse_text


SAMPLE = """\
--- a/app.py
+++ b/app.py
@@ -1,3 +1,3 @@
 import sys
-print("hi")
+print("hello")
 sys.exit(0)
"""


@pytest.fixture(name="diff")
def diff_fixture():
    return parse_text(SAMPLE)[0]


def test_diff_to_dict(diff):
    data = diff_to_dict(diff)
    assert data["from_file_name"] == "a/app.py"
    assert data["hunks"][0]["from_range"] == {"line_start": 1, "line_count": 3}
    assert data["hunks"][0]["lines"][1] == {"type": "from", "content": 'print("hi")'}


def test_patch_to_dict(diff):
    data = patch_to_dict(ParsedPatch(source="x.diff", diffs=[diff]))
    assert data["source"] == "x.diff"
    assert len(data["diffs"]) == 1


def test_to_json_single_patch_unwrapped(diff):
    payload = json.loads(to_json([ParsedPatch(source="x.diff", diffs=[diff])]))
    assert payload["source"] == "x.diff"


def test_to_json_many_patches_as_list(diff):
    patches = [ParsedPatch(source="x.diff", diffs=[diff]), ParsedPatch(source="y.diff")]
    payload = json.loads(to_json(patches))
    assert [p["source"] for p in payload] == ["x.diff", "y.diff"]
    assert payload[1]["diffs"] == []


def test_diff_stats(diff):
    assert diff_stats(diff) == {
        "from_file": "a/app.py",
        "to_file": "b/app.py",
        "hunks": 1,
        "added": 1,
        "removed": 1,
        "neutral": 2,
    }


def test_format_stats(diff):
    assert format_stats(diff_stats(diff)) == "b/app.py +1 -1 (1 hunk)"


def test_format_stats_deleted_file_uses_from_name():
    stats = {"from_file": "old.txt", "to_file": "/dev/null", "hunks": 2, "added": 0, "removed": 9, "neutral": 0}
    assert format_stats(stats) == "old.txt +0 -9 (2 hunks)"
