"""Token reader for dhcpcd.conf text.

Whitespace and comments between tokens are discarded. Nothing in this
module ever consumes a newline; line termination is the line assembler's
job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dhcpcdconf.grammar.charset import COMMENT_START, NEWLINE, is_token_char, is_whitespace
from dhcpcdconf.grammar.cursor import Cursor


@dataclass(frozen=True)
class Token:
    """A maximal run of token characters.

    Attributes:
        text: Token text.
        offset: Absolute offset of the first character.
    """

    text: str
    offset: int


def skip_blank(cursor: Cursor) -> None:
    """Skip spaces, tabs and a trailing comment, stopping at a newline."""
    while not cursor.at_end():
        c = cursor.peek()
        if is_whitespace(c):
            cursor.advance()
        elif c == COMMENT_START:
            cursor.skip_to_line_end()
        else:
            break


def read_token(cursor: Cursor) -> Optional[Token]:
    """Read the next token.

    Returns:
        The token, or None when no token characters follow the skipped
        blanks. In that case the cursor is left where it was.
    """
    start_mark = cursor.mark()
    skip_blank(cursor)

    start = cursor.offset
    text = cursor.text
    end = start
    while end < len(text) and is_token_char(text[end]):
        end += 1

    if end == start:
        cursor.reset(start_mark)
        return None

    cursor.advance(end - start)
    return Token(text[start:end], start)


def read_keyword(cursor: Cursor, keyword: str) -> bool:
    """Consume the next token if it is exactly ``keyword``."""
    mark = cursor.mark()
    token = read_token(cursor)
    if token is not None and token.text == keyword:
        return True
    cursor.reset(mark)
    return False


def read_punct(cursor: Cursor, punct: str) -> bool:
    """Consume ``punct`` after optional blanks."""
    assert punct != NEWLINE

    mark = cursor.mark()
    skip_blank(cursor)
    if cursor.text.startswith(punct, cursor.offset):
        cursor.advance(len(punct))
        return True
    cursor.reset(mark)
    return False
