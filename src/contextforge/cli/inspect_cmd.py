"""Inspection commands: show a context's hook pipeline and the settings."""

from dataclasses import asdict
from pathlib import Path

import click

from contextforge.config import Settings, import_string
from contextforge.contexts.base import BaseContext
from contextforge.errors import ConfigurationError
from contextforge.hooks.types import HOOK_POINTS


@click.command()
@click.argument("target")
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    default=False,
    help="Also list hook points with no registered hooks.",
)
def hooks(target: str, show_all: bool):
    """Show the hook pipeline of a context class (MODULE:CLASS)."""
    try:
        context_class = import_string(target)
    except ConfigurationError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    if not isinstance(context_class, type) or not issubclass(context_class, BaseContext):
        click.echo(click.style(f"Error: {target} is not a context class", fg="red"), err=True)
        raise SystemExit(1)

    registry = context_class.hooks
    extra_points = [name for name in registry.list_registered() if name not in HOOK_POINTS]

    click.echo(f"{context_class.__qualname__} ({len(registry)} hook(s))")
    for point in list(HOOK_POINTS) + extra_points:
        entries = registry.get(point)
        if not entries and not show_all:
            continue
        click.echo(f"  {point}")
        for entry in entries:
            kind = "method" if entry.bound else "function"
            click.echo(f"    - {entry.name} [{kind}]")


@click.command()
@click.option(
    "--file",
    "settings_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML settings file to load before environment overrides.",
)
def config(settings_file: Path | None):
    """Show the resolved contextforge settings."""
    try:
        settings = Settings.load(settings_file)
    except ConfigurationError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    for key, value in asdict(settings).items():
        click.echo(f"{key}: {value if value is not None else '-'}")
