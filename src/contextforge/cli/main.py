"""contextforge CLI entry point."""

import click


@click.group()
def cli():
    """contextforge action context tooling."""
    pass


# Register subcommands
from contextforge.cli.inspect_cmd import config, hooks  # noqa: E402

cli.add_command(hooks)
cli.add_command(config)
