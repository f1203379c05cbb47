"""Exceptions raised while classifying and assembling a diff"""


class DiffParseError(ValueError):
    """Base class for all diff parsing failures."""


class StructuralError(DiffParseError):
    """A from-file/to-file/hunk-start adjacency rule was violated; the parse is aborted."""

    def __init__(self, state, expected: str, line: str, line_number: int):
        self.state = state
        self.expected = expected
        self.line = line
        self.line_number = line_number
        super().__init__(
            f"line {line_number}: a {state.name} line must be directly followed by "
            f"a {expected} line, got {line!r}"
        )


class MalformedHunkHeaderError(DiffParseError):
    """A hunk header line whose line ranges cannot be parsed."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(
            f"No line ranges found in hunk header {line!r}; expected something like '@@ -1,5 +3,5 @@'"
        )
