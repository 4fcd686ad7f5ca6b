"""Format command: rewrite a dhcpcd.conf in canonical form."""

import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from dhcpcdconf.cli.common import load_config_file, resolve_parser_config
from dhcpcdconf.errors import ConfigLoadError
from dhcpcdconf.export.text import export_text, render_file

logger = logging.getLogger("dhcpcdconf.cli.format")


def format_command(args) -> int:
    """Execute format command.

    Comments are not preserved. Without ``--output`` the result goes to
    standard output.
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

    output = getattr(args, "output", None)
    if not output:
        sys.stdout.write(render_file(config_file))
        return 0

    try:
        export_text(config_file, Path(output))
    except OSError as e:
        logger.error("Cannot write %s: %s", output, e)
        return 1

    return 0
