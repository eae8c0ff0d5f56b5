"""Require command implementation."""

import click

from shell.reporter import ConsoleReporter

MISSING_VALUE_EXIT_CODE = 101


@click.command()
@click.option("--target", "target", default=None, help="Target triple to build for.")
@click.pass_context
def require(ctx: click.Context, target: str | None) -> None:
    """Check that --target was given a value and echo it."""
    reporter: ConsoleReporter = ctx.obj["reporter"]
    if not target:
        reporter.fatal_usage("--target", MISSING_VALUE_EXIT_CODE)
    reporter.debug(f"target given on the command line: {target}")
    reporter.print(target)
