"""Export parsed diffs: JSON payloads and per-file change statistics"""

import json

from diffparse.core.models import DEV_NULL, Diff, ParsedPatch


def diff_to_dict(diff: Diff) -> dict:
    """JSON-ready dict of a Diff (line types as their string values)."""
    return diff.model_dump(mode="json")


def patch_to_dict(patch: ParsedPatch) -> dict:
    return {"source": patch.source, "diffs": [diff_to_dict(d) for d in patch.diffs]}


def to_json(patches: list[ParsedPatch], indent: int = 2) -> str:
    """Serialize one or more parse results; a single result is emitted unwrapped."""
    payload = [patch_to_dict(p) for p in patches]
    if len(payload) == 1:
        payload = payload[0]
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def diff_stats(diff: Diff) -> dict:
    """Line counts of one Diff: added (TO), removed (FROM) and context (NEUTRAL)."""
    return {
        "from_file": diff.from_file_name,
        "to_file": diff.to_file_name,
        "hunks": len(diff.hunks),
        "added": diff.added_count,
        "removed": diff.removed_count,
        "neutral": sum(len(h.neutral_lines) for h in diff.hunks),
    }


def format_stats(stats: dict) -> str:
    """One-line summary, e.g. 'src/app.py +3 -1 (2 hunks)'."""
    name = stats["to_file"]
    if name in (None, DEV_NULL):
        name = stats["from_file"]
    hunks = "hunk" if stats["hunks"] == 1 else "hunks"
    return f"{name} +{stats['added']} -{stats['removed']} ({stats['hunks']} {hunks})"
