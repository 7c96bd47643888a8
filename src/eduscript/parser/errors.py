"""Syntax error reporting for script parsing."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class SourcePosition:
    """A point in the script text.

    Lines and columns are 1-based, offset is a 0-based character index.
    """

    offset: int
    line: int
    column: int

    @classmethod
    def from_offset(cls, text: str, offset: int) -> "SourcePosition":
        """Compute line and column for a character offset into text."""
        offset = max(0, min(offset, len(text)))
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(offset=offset, line=line, column=offset - line_start + 1)


@dataclass(frozen=True)
class SourceSpan:
    """Start and end of the offending text."""

    start: SourcePosition
    end: SourcePosition


def format_expected(expected: List[str]) -> str:
    """Join expected constructs as 'A', 'A or B', or 'A, B, or C'."""
    items = sorted(set(expected))
    if not items:
        return "nothing"
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} or {items[1]}"
    return ", ".join(items[:-1]) + f", or {items[-1]}"


class ScriptSyntaxError(ValueError):
    """Raised when script text does not match the grammar.

    Attributes:
        message: Human-readable description naming the expected construct.
        location: Span of the first offending text.
        expected: Constructs that would have been accepted, if known.
        found: Description of the text actually found.
    """

    def __init__(
        self,
        message: str,
        location: SourceSpan,
        expected: Optional[List[str]] = None,
        found: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = location
        self.expected = list(expected or [])
        self.found = found

    @property
    def line(self) -> int:
        return self.location.start.line

    @property
    def column(self) -> int:
        return self.location.start.column

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"

    def to_dict(self) -> Dict[str, Any]:
        """Return the error as `{message, location{start, end}}` plain data."""
        return {
            "message": self.message,
            "location": {
                "start": asdict(self.location.start),
                "end": asdict(self.location.end),
            },
        }
