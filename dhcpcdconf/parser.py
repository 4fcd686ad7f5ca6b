"""Line and file assembly for dhcpcd.conf text.

A line is zero or more declarations matched greedily, then a newline.
Whatever is left before the newline is a failure for that line. The file
parse collects failures across lines (or stops early, per ParserConfig)
and succeeds only when every line does.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from dhcpcdconf.config.loader import ConfigSource, load_parser_config
from dhcpcdconf.config.schema import ParserConfig
from dhcpcdconf.errors import ConfigParseError, Diagnostic, ErrorKind, LineParseError
from dhcpcdconf.grammar.charset import is_whitespace
from dhcpcdconf.grammar.cursor import Cursor
from dhcpcdconf.grammar.productions import match_declaration
from dhcpcdconf.grammar.tokens import skip_blank
from dhcpcdconf.models.document import ConfigFile, Line

logger = logging.getLogger("dhcpcdconf.parser")


def _unmatched_text(cursor: Cursor) -> str:
    text = cursor.text
    end = cursor.offset
    while end < len(text) and text[end] != "\n" and not is_whitespace(text[end]):
        end += 1
    return text[cursor.offset:end]


def _diagnose(cursor: Cursor, number: int) -> Diagnostic:
    expected = cursor.expected
    if expected is not None:
        return Diagnostic(
            ErrorKind.MISSING_ARGUMENT,
            number,
            cursor.column_of(expected.offset),
            expected.message,
        )
    return Diagnostic(
        ErrorKind.UNRECOGNIZED_TOKEN,
        number,
        cursor.column,
        f"unrecognized input `{_unmatched_text(cursor)}`; expected a declaration",
    )


def parse_line(cursor: Cursor, config: Optional[ParserConfig] = None) -> Line:
    """Parse one line starting at the cursor and consume its newline.

    Args:
        cursor: Cursor positioned at the start of a line.
        config: Parser options; only ``require_trailing_newline`` applies.

    Returns:
        Line: Declarations of the line in source order.

    Raises:
        LineParseError: If characters remain that start no declaration, a
            declaration lacks its argument, or (when required) the line has
            no terminating newline. The cursor is left inside the line.
    """
    config = config or ParserConfig.default()
    number = cursor.line

    declarations = []
    while True:
        declaration = match_declaration(cursor)
        if declaration is None:
            break
        declarations.append(declaration)

    skip_blank(cursor)
    if not cursor.at_line_end():
        raise LineParseError(_diagnose(cursor, number))

    if cursor.at_end():
        if config.require_trailing_newline:
            raise LineParseError(
                Diagnostic(
                    ErrorKind.UNTERMINATED_LINE,
                    number,
                    cursor.column,
                    "expected newline before end of input",
                )
            )
    else:
        cursor.consume_newline()

    return Line(number, tuple(declarations))


def parse_file(
    text: str, config: ConfigSource = None, source: str = "<string>"
) -> ConfigFile:
    """Parse a complete dhcpcd.conf text.

    Args:
        text: File contents using ``\\n`` line terminators.
        config: Parser options or any source accepted by load_parser_config.
        source: Label used in error messages (usually the file path).

    Returns:
        ConfigFile: One Line per physical line.

    Raises:
        ConfigParseError: If any line fails. Carries every collected
            diagnostic and the lines that did parse.
    """
    config = load_parser_config(config)
    cursor = Cursor(text)
    lines: List[Line] = []
    diagnostics: List[Diagnostic] = []

    while not cursor.at_end():
        try:
            lines.append(parse_line(cursor, config))
        except LineParseError as exc:
            diagnostics.append(exc.diagnostic)
            logger.debug("%s:%s", source, exc.diagnostic)
            if config.error_limit_reached(len(diagnostics)):
                break
            cursor.skip_to_line_end()
            cursor.consume_newline()

    if diagnostics:
        raise ConfigParseError(diagnostics, lines, source)

    parsed = ConfigFile(tuple(lines))
    logger.debug(
        "%s: parsed %d line(s), %d declaration(s)",
        source,
        len(parsed),
        sum(len(line) for line in parsed),
    )
    return parsed


def parse_path(path: Union[str, Path], config: ConfigSource = None) -> ConfigFile:
    """Read and parse a dhcpcd.conf file.

    Raises:
        OSError: If the file cannot be read.
        ConfigParseError: If any line fails to parse.
    """
    path = Path(path)
    logger.info("Parsing configuration file: %s", path)
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()
    return parse_file(text, config, source=str(path))


__all__ = ["parse_file", "parse_line", "parse_path"]
