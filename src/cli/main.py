"""cross CLI main entry point."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from cli.commands import register_commands
from cli.core import level_for_verbosity, prepare_initial_settings
from console_singleton import set_reporter
from logging_utils.logger import configure_logging


def _describe_invalid_settings(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a cross.yaml or .env file.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Print debug messages.",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only print errors and required output.",
)
@click.option(
    "--color",
    "color",
    metavar="WHEN",
    help="Coloring: auto, always, never.",
)
@click.pass_context
def app(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    quiet: bool,
    color: str | None,
) -> None:
    """cross: colorized, verbosity-aware console output."""
    try:
        settings = prepare_initial_settings(config_file, verbose, quiet, color)
    except ValidationError as exc:
        raise click.UsageError(_describe_invalid_settings(exc)) from exc
    reporter = settings.build_reporter()
    configure_logging(level=level_for_verbosity(reporter.verbosity))
    reporter.log_debug("Resolved %r", reporter)
    set_reporter(reporter)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["reporter"] = reporter


# Register all commands
register_commands(app)


if __name__ == "__main__":
    app()
