"""Export command implementation."""

import logging
from pathlib import Path

from pydantic import ValidationError

from dhcpcdconf.cli.common import report_parse_error, resolve_parser_config
from dhcpcdconf.errors import ConfigLoadError, ConfigParseError
from dhcpcdconf.export.json import export_errors_json, export_json
from dhcpcdconf.parser import parse_path

logger = logging.getLogger("dhcpcdconf.cli.export")


def export_command(args) -> int:
    """Execute export command.

    On a parse failure the output file receives the diagnostics instead
    of the declarations and the command fails.

    Args:
        args: Parsed command-line arguments containing:
            - file: dhcpcd.conf path to parse
            - output: Output JSON file path

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    path = Path(args.file)
    output_path = Path(args.output)

    logger.info("Exporting %s to %s", path, output_path)

    try:
        config = resolve_parser_config(args)
    except (ConfigLoadError, ValidationError) as e:
        logger.error("Invalid parser options: %s", e)
        return 1

    try:
        config_file = parse_path(path, config)
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        return 1
    except ConfigParseError as e:
        report_parse_error(e)
        try:
            export_errors_json(e, output_path)
        except OSError as write_error:
            logger.error("Cannot write %s: %s", output_path, write_error)
        return 1

    try:
        export_json(config_file, output_path)
    except OSError as e:
        logger.error("Cannot write %s: %s", output_path, e)
        return 1

    return 0
