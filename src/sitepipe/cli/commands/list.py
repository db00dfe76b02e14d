"""List command - show pipelines and their steps."""

import sys

import click

from ...context import pass_context
from ...exceptions import ConfigurationError


@click.command(name="list")
@pass_context
def list_pipelines(ctx):
    """List pipelines and the steps they run."""
    try:
        config = ctx.load_config()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Configuration: {config.name}")
    for name, steps in config.pipelines.items():
        click.echo(f"  {name}: {' → '.join(steps)}")
