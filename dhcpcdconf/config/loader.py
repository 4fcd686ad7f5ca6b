"""Helpers for loading parser options from TOML/JSON sources.

This module provides a single entry point `load_parser_config` that
accepts various configuration sources:

* None -> default ParserConfig
* ParserConfig -> returned unchanged
* dict -> ParserConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dhcpcdconf.config.schema import ParserConfig
from dhcpcdconf.errors import ConfigLoadError

logger = logging.getLogger("dhcpcdconf.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], ParserConfig, None]


def _guess_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def _decode(text: str, fmt: str) -> Any:
    try:
        if fmt == "json":
            return json.loads(text)
        return tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigLoadError(f"Invalid {fmt.upper()} configuration: {exc}") from exc


def load_parser_config(source: ConfigSource) -> ParserConfig:
    """Load ParserConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns ParserConfig.default()
            * ParserConfig: returned as is
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        ParserConfig instance.

    Raises:
        ConfigLoadError: If the source cannot be decoded or has the wrong shape.
        ValidationError: If the decoded options are invalid.
    """
    if source is None:
        logger.debug("No config source provided; using default ParserConfig")
        return ParserConfig.default()

    if isinstance(source, ParserConfig):
        return source

    if isinstance(source, dict):
        logger.debug("Loading ParserConfig from provided dict")
        return ParserConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        if os.path.isfile(path):
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _guess_format(text)
            logger.info("Loading parser options from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _guess_format(text)
            logger.info("Loading parser options from inline %s string", fmt)

        data = _decode(text, fmt)
        if not isinstance(data, dict):
            raise ConfigLoadError("Top-level configuration must be a mapping/dict")

        return ParserConfig.from_dict(data)

    raise ConfigLoadError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["ConfigSource", "load_parser_config"]
