"""Read position over an immutable configuration text.

The cursor is the only mutable state of a parse. Productions take a
`mark()` before trying an alternative and `reset()` to it on failure, so
a failed alternative never consumes input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dhcpcdconf.grammar.charset import NEWLINE


@dataclass(frozen=True)
class Expectation:
    """A required argument that was not found.

    Attributes:
        offset: Absolute offset where the argument was expected.
        message: Human-readable description of what was expected.
    """

    offset: int
    message: str


class Cursor:
    """Character cursor with line bookkeeping.

    Line numbers are 1-based. ``line_start`` is the offset of the first
    character of the current line, used to derive columns.
    """

    def __init__(self, text: str):
        self.text = text
        self.offset = 0
        self.line = 1
        self.line_start = 0
        self.expected: Optional[Expectation] = None

    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> str:
        """Return the current character, or an empty string at end of input."""
        if self.offset >= len(self.text):
            return ""
        return self.text[self.offset]

    def advance(self, count: int = 1) -> None:
        self.offset = min(self.offset + count, len(self.text))

    def at_line_end(self) -> bool:
        """True at a newline or at end of input."""
        return self.at_end() or self.text[self.offset] == NEWLINE

    def mark(self) -> int:
        return self.offset

    def reset(self, mark: int) -> None:
        self.offset = mark

    def column_of(self, offset: int) -> int:
        """Return the 1-based column of ``offset`` on the current line."""
        return offset - self.line_start + 1

    @property
    def column(self) -> int:
        return self.column_of(self.offset)

    def expect(self, offset: int, message: str) -> None:
        """Record a missing argument at ``offset``."""
        self.expected = Expectation(offset, message)

    def clear_expectation(self) -> None:
        self.expected = None

    def skip_to_line_end(self) -> None:
        """Move to the next newline (or end of input) without consuming it."""
        end = self.text.find(NEWLINE, self.offset)
        self.offset = len(self.text) if end == -1 else end

    def consume_newline(self) -> bool:
        """Consume one newline and start a new line.

        Returns:
            bool: False if the cursor was not positioned on a newline.
        """
        if self.peek() != NEWLINE:
            return False
        self.offset += 1
        self.line += 1
        self.line_start = self.offset
        self.expected = None
        return True
