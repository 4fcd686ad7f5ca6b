"""Character classes for the dhcpcd.conf lexer."""

import string

NEWLINE = "\n"
COMMENT_START = "#"
COMMA = ","

WHITESPACE = frozenset(" \t")

# Keywords, interface names and addresses share one alphabet.
TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + ":/._")


def is_token_char(c: str) -> bool:
    """Return True if ``c`` may appear inside a token."""
    return c in TOKEN_CHARS


def is_whitespace(c: str) -> bool:
    """Return True for intra-line whitespace (never the newline)."""
    return c in WHITESPACE
