"""CLI commands module."""

import click

from cli.commands.config import config
from cli.commands.progress import progress
from cli.commands.require import require
from cli.commands.say import say


def register_commands(app: click.Group) -> None:
    """Register all CLI commands with the app."""
    app.add_command(say)
    app.add_command(progress)
    app.add_command(require)
    app.add_command(config)
