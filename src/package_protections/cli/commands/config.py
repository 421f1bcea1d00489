"""Configuration-related CLI commands."""

from __future__ import annotations

from typing import Optional

import click

from ...logging import get_logger
from ..utils import get_config_manager, render


def register(main: click.Group) -> None:
    """Attach config-centric commands to the root CLI."""

    @main.command("show-config")
    @click.option("--format", "fmt", type=click.Choice(["yaml", "json"]), default="yaml")
    @click.pass_context
    def show_config(ctx: click.Context, fmt: str) -> None:
        """Display the effective configuration."""
        config_manager = get_config_manager(ctx)
        click.echo(f"# {config_manager.config_path}")
        click.echo(render(config_manager.get_config_dict(), fmt).rstrip("\n"))

    @main.command("init-config")
    @click.option(
        "--output", "-o", type=click.Path(dir_okay=False), help="Output path for configuration file"
    )
    @click.pass_context
    def init_config(ctx: click.Context, output: Optional[str]) -> None:
        """Write the effective configuration to a file."""
        config_manager = get_config_manager(ctx)
        logger = get_logger(__name__)

        try:
            path = config_manager.save_config(output)
        except OSError as exc:
            logger.error("Failed to create configuration file", error=str(exc))
            click.echo(f"✗ Failed to create configuration file: {exc}")
            ctx.exit(1)
            return

        logger.info("Configuration file created", path=str(path))
        click.echo(f"✓ Configuration file created at: {path}")
