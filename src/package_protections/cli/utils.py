"""Shared helpers for the CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union, cast

import click
import yaml

from ..config import ConfigManager


class CLIError(Exception):
    """Base exception for CLI-related errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def get_config_manager(ctx: click.Context) -> ConfigManager:
    """Return the config manager stored on the click context."""
    return cast(ConfigManager, ctx.obj["config"])


def render(data: Union[Dict[str, Any], List[Any]], format_type: str = "yaml") -> str:
    """Render data in the requested format."""
    if format_type == "json":
        return json.dumps(data, indent=2)
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    raise CLIError(f"Unsupported output format: {format_type}")


def write_output(content: str, output_path: Optional[Union[str, Path]] = None) -> None:
    """Write content to a file, or echo it when no path is given."""
    if output_path is None:
        click.echo(content.rstrip("\n"))
        return

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise CLIError(f"Error writing to {path}: {e}") from e
    click.echo(f"✓ Output written to: {path}")


def format_table(headers: List[str], rows: List[List[str]]) -> str:
    """Format rows as a plain-text table."""
    if not headers or not rows:
        return ""

    col_widths = [len(header) for header in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(str(cell)))

    def _line(cells: List[str]) -> str:
        return " | ".join(str(cell).ljust(col_widths[i]) for i, cell in enumerate(cells))

    lines = [_line(headers), "-+-".join("-" * width for width in col_widths)]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)
