"""sitepipe CLI main entry point with global options."""

from pathlib import Path

import click

from .. import __version__
from ..config import VARIANTS
from ..context import SitepipeContext, configure_logging


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (overrides $SITEPIPE_CONFIG and ./sitepipe.json)",
)
@click.option(
    "--variant",
    type=click.Choice(sorted(VARIANTS)),
    default=None,
    help="Built-in configuration to use when no config file is found [default: grunt]",
)
@click.option(
    "--workdir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory paths are resolved against (default: current directory)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every step to stderr")
@click.version_option(__version__, prog_name="sitepipe")
@click.pass_context
def cli(ctx, config_path, variant, workdir, verbose):
    """sitepipe - clean, build and publish a documentation site."""
    ctx.ensure_object(SitepipeContext)
    configure_logging(verbose)

    ctx.obj.config_path = config_path
    ctx.obj.variant = variant
    ctx.obj.workdir = workdir


# Register commands at module level so tests can import cli with commands attached
from .commands.check import check
from .commands.list import list_pipelines
from .commands.run import default, publish, run

cli.add_command(run)
cli.add_command(default)
cli.add_command(publish)
cli.add_command(list_pipelines)
cli.add_command(check)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
