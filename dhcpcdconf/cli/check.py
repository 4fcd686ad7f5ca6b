"""Check command implementation."""

import logging
from pathlib import Path

from pydantic import ValidationError
from rich.table import Table

from dhcpcdconf.cli.common import console, load_config_file, resolve_parser_config
from dhcpcdconf.errors import ConfigLoadError
from dhcpcdconf.export.text import render_declaration
from dhcpcdconf.models import ConfigFile

logger = logging.getLogger("dhcpcdconf.cli.check")


def _declaration_table(config_file: ConfigFile) -> Table:
    table = Table(title="Declarations")
    table.add_column("Line", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    for line in config_file:
        for declaration in line:
            table.add_row(
                str(line.number), type(declaration).__name__, render_declaration(declaration)
            )
    return table


def check_command(args) -> int:
    """Execute check command.

    Args:
        args: Parsed command-line arguments containing:
            - file: dhcpcd.conf path to check
            - list: Print a table of parsed declarations (optional)

    Returns:
        int: Exit code (0 if the file parses, 1 otherwise).
    """
    path = Path(args.file)

    try:
        config = resolve_parser_config(args)
    except (ConfigLoadError, ValidationError) as e:
        logger.error("Invalid parser options: %s", e)
        return 1

    config_file = load_config_file(path, config)
    if config_file is None:
        return 1

    declaration_count = sum(len(line) for line in config_file)
    console.print(
        f"{path}: OK ({len(config_file)} lines, {declaration_count} declarations)",
        markup=False,
        highlight=False,
    )

    if getattr(args, "list", False):
        console.print(_declaration_table(config_file))

    return 0
