"""Config command implementation."""

from __future__ import annotations

import click

from cli.errors import handle_cross_errors
from config import ConsoleSettings
from shell.policy import resolve_color_mode
from shell.reporter import ConsoleReporter


@click.group()
def config() -> None:
    """Configuration inspection commands."""
    pass


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the resolved color mode and verbosity."""
    settings: ConsoleSettings = ctx.obj["settings"]
    reporter: ConsoleReporter = ctx.obj["reporter"]
    reporter.print(f"color: {reporter.color_mode.value}")
    reporter.print(f"verbosity: {reporter.verbosity.name.lower()}")
    reporter.debug(f"raw settings: {settings.model_dump()}")


@config.command()
@click.argument("value")
@click.pass_context
@handle_cross_errors
def check(ctx: click.Context, value: str) -> None:
    """Validate VALUE as a --color setting."""
    reporter: ConsoleReporter = ctx.obj["reporter"]
    mode = resolve_color_mode(value)
    reporter.info(f"'{value}' is a valid color mode ({mode.name.lower()})")
