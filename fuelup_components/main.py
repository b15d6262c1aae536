"""
fuelup-components — CLI entrypoint.

Usage:
    python -m fuelup_components.main --help
    python -m fuelup_components.main list --plugins
    python -m fuelup_components.main show forc
"""

from __future__ import annotations

import json
import os
import sys

import click

from fuelup_components import __version__
from fuelup_components.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)

# Exit code for a broken embedded manifest (packaging defect, not user error)
EXIT_MANIFEST_ERROR = 2


@click.group()
@click.version_option(version=__version__, prog_name="fuelup-components")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """fuelup components — query the registry of distributed components."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )


def _manifest_error(err: Exception) -> None:
    click.secho(f"❌ Embedded component manifest is invalid: {err}", fg="red", err=True)
    sys.exit(EXIT_MANIFEST_ERROR)


@cli.command("list")
@click.option("--plugins", is_flag=True, help="List plugins instead of main components.")
@click.option("--publishable", is_flag=True, help="List publishable components.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_components(
    ctx: click.Context,
    plugins: bool,
    publishable: bool,
    as_json: bool,
) -> None:
    """List main components (default), plugins, or publishable components."""
    from fuelup_components.core.config.manifest_loader import ParseError
    from fuelup_components.core.services import component_ops

    if plugins and publishable:
        raise click.UsageError("--plugins and --publishable are mutually exclusive.")

    try:
        if plugins:
            kind, items = "plugin", component_ops.list_plugins()
        elif publishable:
            kind, items = "publishable", component_ops.list_publishable()
        else:
            kind, items = "main", component_ops.list_excluding_plugins()
    except ParseError as e:
        _manifest_error(e)
        return

    if as_json:
        click.echo(json.dumps([i.model_dump() for i in items], indent=2))
        return

    if not ctx.obj.get("quiet", False):
        click.secho(f"\n📦 {kind.capitalize()} components: {len(items)}", fg="cyan", bold=True)
        click.echo()
    for item in items:
        click.echo(f"   • {item.name}  → {', '.join(item.executables)}")


@cli.command()
@click.argument("name")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def show(name: str, as_json: bool) -> None:
    """Show a single component by name."""
    from fuelup_components.core.config.manifest_loader import ParseError
    from fuelup_components.core.services.component_ops import NotFoundError, get_by_name

    try:
        component = get_by_name(name)
    except NotFoundError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)
    except ParseError as e:
        _manifest_error(e)
        return

    if as_json:
        click.echo(json.dumps(component.model_dump(), indent=2))
        return

    if component.is_main:
        kind = "main"
    elif component.is_plugin:
        kind = "plugin"
    else:
        kind = "non-plugin"
    click.secho(f"\n📋 {component.name}", fg="cyan", bold=True)
    click.echo(f"   Kind:        {kind}")
    click.echo(f"   Repository:  {component.repository_name}")
    click.echo(f"   Tarball:     {component.tarball_prefix}")
    click.echo(f"   Executables: {', '.join(component.executables)}")
    click.echo(f"   Targets:     {', '.join(component.targets)}")
    click.echo(f"   Publishable: {'yes' if component.is_publishable else 'no'}")
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def executables(as_json: bool) -> None:
    """List every executable provided by plugins."""
    from fuelup_components.core.config.manifest_loader import ParseError
    from fuelup_components.core.services.component_ops import list_plugin_executables

    try:
        names = list_plugin_executables()
    except ParseError as e:
        _manifest_error(e)
        return

    if as_json:
        click.echo(json.dumps(names, indent=2))
        return

    for exe in names:
        click.echo(exe)


@cli.command()
@click.argument("name")
def published(name: str) -> None:
    """Check whether NAME is among the published components.

    Exits 0 when it is, 1 otherwise.
    """
    from fuelup_components.core.config.manifest_loader import ParseError
    from fuelup_components.core.services.component_ops import is_name_published

    try:
        result = is_name_published(name)
    except ParseError as e:
        _manifest_error(e)
        return

    click.echo("yes" if result else "no")
    sys.exit(0 if result else 1)


if __name__ == "__main__":
    cli()
