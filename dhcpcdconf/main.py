"""Main CLI entry point for dhcpcdconf.

Provides commands: check, export, format
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from dhcpcdconf.cli.check import check_command
from dhcpcdconf.cli.export import export_command
from dhcpcdconf.cli.format import format_command

logger = logging.getLogger("dhcpcdconf.cli")


def setup_logging(
    verbose: bool = False,
    console: Optional[Console] = None,
    log_file: Optional[str] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
        log_file: Also write log records to this file (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handlers: list[logging.Handler] = [handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=handlers,
    )


def _add_parser_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        help="dhcpcd.conf file to parse",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional parser options. Can be a path to a TOML/JSON file "
            "(e.g. dhcpcdconf.toml) or an inline TOML/JSON string. When "
            "omitted, built-in defaults are used."
        ),
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing line instead of reporting all of them",
    )
    parser.add_argument(
        "--strict-newline",
        action="store_true",
        help="Reject a final line that is not terminated by a newline",
    )


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = argparse.ArgumentParser(
        description="Dhcpcdconf - dhcpcd.conf parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Output log to file (optional), in addition to the console.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Parse a configuration file and report errors",
    )
    _add_parser_options(check_parser)
    check_parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Print a table of the parsed declarations",
    )

    # Export command
    export_parser = subparsers.add_parser(
        "export",
        help="Export parsed declarations as JSON",
    )
    _add_parser_options(export_parser)
    export_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output JSON file",
    )

    # Format command
    format_parser = subparsers.add_parser(
        "format",
        help="Rewrite a configuration file in canonical form",
    )
    _add_parser_options(format_parser)
    format_parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: standard output)",
    )

    args = parser.parse_args()

    setup_logging(args.verbose, log_file=args.log_file)

    if args.command == "check":
        return check_command(args)
    elif args.command == "export":
        return export_command(args)
    elif args.command == "format":
        return format_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
