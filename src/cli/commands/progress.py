"""Progress command implementation."""

import time

import click

from shell.reporter import ConsoleReporter
from shell.streams import StreamId


@click.command()
@click.argument("steps", nargs=-1, required=True)
@click.option(
    "--delay",
    type=float,
    default=0.0,
    show_default=True,
    help="Seconds to pause after each step.",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Draw the progress line on stdout instead of stderr.",
)
@click.pass_context
def progress(ctx: click.Context, steps: tuple[str, ...], delay: float, to_stdout: bool) -> None:
    """Show each of STEPS as an in-place progress line, then print 'done'."""
    reporter: ConsoleReporter = ctx.obj["reporter"]
    stream_id = StreamId.STDOUT if to_stdout else StreamId.STDERR
    total = len(steps)
    for index, step in enumerate(steps, start=1):
        reporter.progress(f"[{index}/{total}] {step}", stream_id)
        if delay:
            time.sleep(delay)
    if stream_id is StreamId.STDERR:
        reporter.status(f"finished {total} step(s)")
    reporter.print("done")
