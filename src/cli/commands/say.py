"""Say command implementation."""

import click

from shell.reporter import ConsoleReporter

LEVELS = ("error", "warn", "note", "status", "print", "info", "debug")


@click.command()
@click.argument("level", type=click.Choice(LEVELS))
@click.argument("message")
@click.pass_context
def say(ctx: click.Context, level: str, message: str) -> None:
    """Emit MESSAGE through the reporter at LEVEL.

    Examples:
      cross say warn "deprecated flag"
      cross --quiet say print "result: 42"
    """
    reporter: ConsoleReporter = ctx.obj["reporter"]
    getattr(reporter, level)(message)
