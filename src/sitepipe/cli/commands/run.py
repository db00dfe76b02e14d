"""Run commands - execute a named pipeline."""

import sys

import click

from ...context import pass_context
from ...exceptions import ConfigurationError, StepFailure
from ...runner import Orchestrator


def run_pipeline(ctx, name: str, dry_run: bool = False) -> None:
    """Run ``name`` and exit nonzero on the first failure."""
    try:
        orchestrator = Orchestrator(ctx.load_config())
        steps = orchestrator.plan(name)
        if dry_run:
            for index, step in enumerate(steps, start=1):
                click.echo(f"[{index}/{len(steps)}] {step}")
            return

        def announce(index: int, total: int, step: str) -> None:
            click.echo(f"[{index}/{total}] {step}", err=True)

        report = orchestrator.run(name, on_step=announce)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except StepFailure as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for step in report.completed:
        output = report.results[step].stdout.decode("utf-8", "replace")
        if output:
            click.echo(output, nl=False)
    click.echo(f"Pipeline {name} completed: {', '.join(report.completed)}")


@click.command()
@click.argument("name")
@click.option("--dry-run", is_flag=True, help="Print the steps without running them")
@pass_context
def run(ctx, name, dry_run):
    """Run pipeline NAME.

    Examples:
        sitepipe run publish
        sitepipe --variant book run publish --dry-run
    """
    run_pipeline(ctx, name, dry_run)


@click.command()
@pass_context
def default(ctx):
    """Generate the site (generation)."""
    run_pipeline(ctx, "default")


@click.command()
@pass_context
def publish(ctx):
    """Clean, generate and publish the site (cleanup → generation → deploy)."""
    run_pipeline(ctx, "publish")
