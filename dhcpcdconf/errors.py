"""Exception hierarchy and parse diagnostics.

Only the line assembler raises parse errors. The token reader and the
declaration grammar report "no match" and leave the decision to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from dhcpcdconf.models.document import Line


class ErrorKind(str, Enum):
    """Categories of line failures."""

    UNRECOGNIZED_TOKEN = "unrecognized_token"
    MISSING_ARGUMENT = "missing_argument"
    UNTERMINATED_LINE = "unterminated_line"


@dataclass(frozen=True)
class Diagnostic:
    """Position and description of one failing line.

    Attributes:
        kind: Failure category.
        line: 1-based line number.
        column: 1-based column of the first unmatched character, or of the
            position where a missing argument was expected.
        message: Human-readable expectation.
    """

    kind: ErrorKind
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "line": self.line,
            "column": self.column,
            "message": self.message,
        }


class DhcpcdConfError(Exception):
    """Base class for all dhcpcdconf errors."""
    pass


class LineParseError(DhcpcdConfError):
    """A single line could not be parsed."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


class ConfigParseError(DhcpcdConfError):
    """One or more lines of a configuration failed to parse.

    No ConfigFile is produced on failure. ``lines`` holds the lines that
    did parse, for reporting only.
    """

    def __init__(
        self,
        diagnostics: Sequence[Diagnostic],
        lines: Sequence["Line"] = (),
        source: str = "<string>",
    ):
        self.diagnostics: Tuple[Diagnostic, ...] = tuple(diagnostics)
        self.lines = tuple(lines)
        self.source = source
        super().__init__(self._format())

    def _format(self) -> str:
        count = len(self.diagnostics)
        header = f"{self.source}: {count} line(s) failed to parse"
        details = [f"{self.source}:{d}" for d in self.diagnostics]
        return "\n".join([header, *details])


class ConfigLoadError(DhcpcdConfError):
    """Parser options could not be loaded."""
    pass
