"""dhcpcd.conf grammar building blocks.

This package contains the layers below the line assembler:
- charset: token alphabet and whitespace/comment characters
- cursor: read position with mark/reset backtracking
- tokens: token reader discarding whitespace and comments
- productions: ordered-choice declaration grammar
"""

from .cursor import Cursor, Expectation
from .productions import PRODUCTIONS, match_declaration
from .tokens import Token, read_token

__all__ = [
    "Cursor",
    "Expectation",
    "PRODUCTIONS",
    "Token",
    "match_declaration",
    "read_token",
]
