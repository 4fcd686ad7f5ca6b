"""Output encodings for parsed configurations."""

from .json import (
    declaration_to_dict,
    errors_to_dict,
    export_errors_json,
    export_json,
    file_to_dict,
)
from .text import export_text, render_declaration, render_file, render_line

__all__ = [
    "declaration_to_dict",
    "errors_to_dict",
    "export_errors_json",
    "export_json",
    "export_text",
    "file_to_dict",
    "render_declaration",
    "render_file",
    "render_line",
]
