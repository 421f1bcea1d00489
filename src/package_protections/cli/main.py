"""Root Click group for the package-protections CLI."""

from __future__ import annotations

from typing import Optional

import click

from ..config import ConfigManager
from ..exceptions import ConfigurationError
from ..logging import get_logger, setup_logging
from .commands import register_all


@click.group()
@click.option(
    "--config", "-c", type=click.Path(exists=False, dir_okay=False), help="Configuration file path"
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Overrides the configured log level",
)
@click.pass_context
def main(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """Resolve per-package protection settings into enforcement configuration."""
    ctx.ensure_object(dict)

    try:
        config_manager = ConfigManager(config_path=config)
    except ConfigurationError as exc:
        click.echo(f"✗ {exc}", err=True)
        ctx.exit(2)
        return
    ctx.obj["config"] = config_manager

    settings = config_manager.settings
    setup_logging(
        log_level=log_level or settings.log_level,
        log_format=settings.log_format,
    )

    logger = get_logger(__name__)
    logger.debug(
        "package-protections CLI initialized",
        config_path=str(config_manager.config_path),
    )


register_all(main)


if __name__ == "__main__":  # pragma: no cover
    main()  # pylint: disable=no-value-for-parameter
