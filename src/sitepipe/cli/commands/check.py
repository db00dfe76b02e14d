"""Check command - report output/deploy path inconsistencies."""

import sys

import click

from ...checks import compare_variants, has_errors, path_issues, resolved_paths
from ...config import get_variant
from ...context import pass_context
from ...exceptions import ConfigurationError


@click.command()
@click.option(
    "--against",
    metavar="VARIANT",
    help="Also list path settings that differ from this built-in variant",
)
@pass_context
def check(ctx, against):
    """Check that deploy publishes what generation builds.

    Exits 1 when any error-level issue is found.
    """
    try:
        config = ctx.load_config()
        other = get_variant(against, config.workdir) if against else None
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for key, value in resolved_paths(config).items():
        click.echo(f"{key}: {value}")

    if other is not None:
        for key, (mine, theirs) in compare_variants(config, other).items():
            click.echo(f"differs from {other.name}: {key}: {mine} != {theirs}")

    issues = path_issues(config)
    for issue in issues:
        click.echo(str(issue), err=issue.level == "error")
    if has_errors(issues):
        sys.exit(1)
    if not issues:
        click.echo("ok")
