"""JSON export for parsed configurations."""

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

from dhcpcdconf.errors import ConfigParseError
from dhcpcdconf.models import AddressFamily, ConfigFile, Declaration, Line

logger = logging.getLogger("dhcpcdconf.export.json")


def declaration_to_dict(declaration: Declaration) -> Dict[str, Any]:
    """Convert a declaration to ``{"kind": <class name>, **payload}``."""
    data: Dict[str, Any] = {"kind": type(declaration).__name__}
    for field in fields(declaration):
        value = getattr(declaration, field.name)
        if isinstance(value, AddressFamily):
            value = value.short_name
        elif isinstance(value, tuple):
            value = list(value)
        data[field.name] = value
    return data


def line_to_dict(line: Line) -> Dict[str, Any]:
    return {
        "line": line.number,
        "declarations": [declaration_to_dict(d) for d in line.declarations],
    }


def file_to_dict(config_file: ConfigFile) -> Dict[str, Any]:
    return {"lines": [line_to_dict(line) for line in config_file.lines]}


def errors_to_dict(error: ConfigParseError) -> Dict[str, Any]:
    return {
        "source": error.source,
        "errors": [diagnostic.to_dict() for diagnostic in error.diagnostics],
    }


def export_errors_json(error: ConfigParseError, output_path: Path) -> None:
    """Write the diagnostics of a failed parse to JSON."""
    logger.info("Exporting parse errors to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(errors_to_dict(error), f, indent=2, ensure_ascii=False)


def export_json(config_file: ConfigFile, output_path: Path) -> None:
    """Export a parsed configuration to JSON format.

    Args:
        config_file: Parsed configuration to export.
        output_path: Output file path.
    """
    logger.info("Exporting configuration to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = file_to_dict(config_file)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(
        "JSON export completed: %d lines, %d declarations",
        len(config_file),
        sum(len(line) for line in config_file),
    )
