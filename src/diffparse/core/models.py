"""Output models for parsed unified diffs: Diff -> Hunk -> Line"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


DEV_NULL = "/dev/null"


class LineType(str, Enum):
    """Which side(s) of the diff a hunk line belongs to"""
    FROM = "from"         # removed: only in the original file
    TO = "to"             # added: only in the modified file
    NEUTRAL = "neutral"   # context: in both files


class Line(BaseModel):
    """A single typed line inside a hunk."""
    model_config = ConfigDict(frozen=True)

    type: LineType
    content: str


class Range(BaseModel):
    """Line range of one side of a hunk, as declared in its @@ header."""
    model_config = ConfigDict(frozen=True)

    line_start: int = Field(..., ge=0)
    line_count: int = Field(default=1, ge=0)

    @property
    def is_empty(self) -> bool:
        """True for a 0,0 range (file absent on this side)."""
        return self.line_start == 0 and self.line_count == 0


class Hunk(BaseModel):
    """A contiguous block of changed lines with its from/to ranges."""
    from_range: Range
    to_range: Range
    lines: list[Line] = Field(default_factory=list)

    def _of_type(self, line_type: LineType) -> list[Line]:
        return [line for line in self.lines if line.type == line_type]

    @property
    def from_lines(self) -> list[Line]:
        return self._of_type(LineType.FROM)

    @property
    def to_lines(self) -> list[Line]:
        return self._of_type(LineType.TO)

    @property
    def neutral_lines(self) -> list[Line]:
        return self._of_type(LineType.NEUTRAL)


class Diff(BaseModel):
    """All changes to one file: banner/header lines, file names and hunks."""
    from_file_name: str | None = None
    to_file_name: str | None = None
    header_lines: list[str] = Field(default_factory=list)
    hunks: list[Hunk] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when nothing file-related was parsed into this diff."""
        return self.from_file_name is None and self.to_file_name is None and not self.hunks

    @property
    def latest_hunk(self) -> Hunk | None:
        return self.hunks[-1] if self.hunks else None

    @property
    def added_count(self) -> int:
        return sum(len(h.to_lines) for h in self.hunks)

    @property
    def removed_count(self) -> int:
        return sum(len(h.from_lines) for h in self.hunks)

    @property
    def is_new_file(self) -> bool:
        """The original side is /dev/null or every hunk starts from an empty range."""
        if self.from_file_name == DEV_NULL:
            return True
        return bool(self.hunks) and all(h.from_range.is_empty for h in self.hunks)

    @property
    def is_deleted_file(self) -> bool:
        """The modified side is /dev/null or every hunk ends in an empty range."""
        if self.to_file_name == DEV_NULL:
            return True
        return bool(self.hunks) and all(h.to_range.is_empty for h in self.hunks)


class ParsedPatch(BaseModel):
    """Parse result for one source (a file path, or '-' for stdin)."""
    source: str
    diffs: list[Diff] = Field(default_factory=list)
