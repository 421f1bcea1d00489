"""Protection resolution CLI commands."""

from __future__ import annotations

from typing import List, Optional

import click

from ...exceptions import PackageProtectionsError, PolicyValidationError
from ...loader import load_packages
from ...logging import get_logger
from ...models import PreconditionViolation
from ...registry import default_registry
from ...resolver import PolicyResolver
from ..utils import CLIError, format_table, get_config_manager, render, write_output

MANIFEST = click.Path(exists=False, dir_okay=False)


def _resolver(ctx: click.Context) -> PolicyResolver:
    return PolicyResolver(registry=default_registry(), config=get_config_manager(ctx).settings)


def _report_violations(violations: List[PreconditionViolation]) -> None:
    click.echo(f"✗ {len(violations)} package protection precondition(s) failed:")
    for violation in violations:
        click.echo(f"  - {violation.message}")


def _fail(ctx: click.Context, error: Exception) -> None:
    logger = get_logger(__name__)
    exit_code = error.exit_code if isinstance(error, CLIError) else 1
    logger.error("Command failed", error=str(error))
    click.echo(f"✗ {error}")
    ctx.exit(exit_code)


def register(main: click.Group) -> None:
    """Attach protection commands to the root CLI."""

    @main.command()
    @click.argument("manifest", type=MANIFEST)
    @click.option(
        "--format", "fmt", type=click.Choice(["yaml", "json"]), default="yaml", show_default=True
    )
    @click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write to file")
    @click.pass_context
    def resolve(ctx: click.Context, manifest: str, fmt: str, output: Optional[str]) -> None:
        """Resolve a package manifest into the enforcement configuration."""
        try:
            document = _resolver(ctx).resolve(load_packages(manifest))
            write_output(render(document.to_dict(), fmt), output)
        except PolicyValidationError as exc:
            _report_violations(exc.violations)
            ctx.exit(1)
        except (PackageProtectionsError, CLIError) as exc:
            _fail(ctx, exc)

    @main.command()
    @click.argument("manifest", type=MANIFEST)
    @click.pass_context
    def validate(ctx: click.Context, manifest: str) -> None:
        """Check every package's protection configuration."""
        try:
            violations = _resolver(ctx).validate(load_packages(manifest))
        except PackageProtectionsError as exc:
            _fail(ctx, exc)
            return

        if violations:
            _report_violations(violations)
            ctx.exit(1)
        click.echo("✓ All package protection preconditions passed")

    @main.command("list-protections")
    @click.option(
        "--format", "fmt", type=click.Choice(["table", "json", "yaml"]), default="table"
    )
    def list_protections(fmt: str) -> None:
        """List the registered protections."""
        summaries = default_registry().describe()
        if fmt != "table":
            click.echo(render(summaries, fmt).rstrip("\n"))
            return
        rows = [
            [item["identifier"], item["name"], item["default_behavior"]] for item in summaries
        ]
        click.echo(format_table(["Identifier", "Name", "Default"], rows))

    @main.command()
    @click.argument("identifier")
    @click.argument("file")
    @click.pass_context
    def explain(ctx: click.Context, identifier: str, file: str) -> None:
        """Show the message reported when FILE violates a protection."""
        try:
            protection = default_registry().get(identifier)
        except PackageProtectionsError as exc:
            _fail(ctx, exc)
            return
        click.echo(protection.message_for_violation(file))
        click.echo("")
        click.echo(protection.humanized_description.rstrip("\n"))
