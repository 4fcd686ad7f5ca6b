"""Shared helpers for CLI commands."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console

from dhcpcdconf.config import ParserConfig, load_parser_config
from dhcpcdconf.errors import ConfigParseError
from dhcpcdconf.models import ConfigFile
from dhcpcdconf.parser import parse_path

logger = logging.getLogger("dhcpcdconf.cli.common")

console = Console(soft_wrap=True, emoji=False)


def resolve_parser_config(args) -> ParserConfig:
    """Build parser options from ``--config`` plus flag overrides.

    Raises:
        ConfigLoadError: If ``--config`` cannot be decoded.
        ValidationError: If the options are invalid.
    """
    config = load_parser_config(getattr(args, "config", None))

    overrides = {}
    if getattr(args, "fail_fast", False):
        overrides["fail_fast"] = True
    if getattr(args, "strict_newline", False):
        overrides["require_trailing_newline"] = True

    if overrides:
        config = config.model_copy(update=overrides)
    return config


def report_parse_error(exc: ConfigParseError) -> None:
    """Print every diagnostic of a failed parse."""
    for diagnostic in exc.diagnostics:
        console.print(
            f"{exc.source}:{diagnostic} ({diagnostic.kind.value})",
            markup=False,
            highlight=False,
        )
    console.print(
        f"{exc.source}: {len(exc.diagnostics)} error(s)",
        style="bold red",
        markup=False,
        highlight=False,
    )


def load_config_file(path: Path, config: ParserConfig) -> Optional[ConfigFile]:
    """Parse ``path``, reporting failures.

    Returns:
        The parsed file, or None if it could not be read or parsed.
    """
    try:
        return parse_path(path, config)
    except ConfigParseError as exc:
        report_parse_error(exc)
        return None
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return None
