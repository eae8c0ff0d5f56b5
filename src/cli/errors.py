"""Centralized error handling decorators for CLI commands."""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar, cast

from console_singleton import get_reporter
from exceptions import CrossError

F = TypeVar("F", bound=Callable)


def handle_cross_errors(func: F) -> F:
    """Decorator to standardize error handling for cross commands.

    Catches CrossError, reports it as a fatal error and exits with code 1.

    Usage:
        @click.command()
        @handle_cross_errors
        def my_command(ctx: click.Context):
            ...  # May raise CrossError
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CrossError as e:
            get_reporter().fatal(e, 1)

    return cast(F, wrapper)
