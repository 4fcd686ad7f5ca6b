"""dhcpcdconf - dhcpcd.conf parser.

Parses dhcpcd-style network interface configuration text into ordered,
typed declarations.
"""

from dhcpcdconf.config import ParserConfig, load_parser_config
from dhcpcdconf.errors import (
    ConfigLoadError,
    ConfigParseError,
    DhcpcdConfError,
    Diagnostic,
    ErrorKind,
    LineParseError,
)
from dhcpcdconf.models import ConfigFile, Declaration, Line
from dhcpcdconf.parser import parse_file, parse_line, parse_path

__version__ = "0.1.0"

__all__ = [
    "ConfigFile",
    "ConfigLoadError",
    "ConfigParseError",
    "Declaration",
    "DhcpcdConfError",
    "Diagnostic",
    "ErrorKind",
    "Line",
    "LineParseError",
    "ParserConfig",
    "load_parser_config",
    "parse_file",
    "parse_line",
    "parse_path",
]
