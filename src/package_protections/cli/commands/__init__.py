"""Command registration helpers for the CLI."""

from __future__ import annotations

import click

from . import config, protections


def register_all(main: click.Group) -> None:
    """Register all command groups with the root CLI."""
    config.register(main)
    protections.register(main)
