"""Custom exceptions for the cross console layer."""

from __future__ import annotations


class CrossError(Exception):
    """Base exception for all cross errors."""

    pass


class InvalidArgumentError(CrossError):
    """Raised when a configuration value is malformed.

    This is recoverable: the caller decides how to abort startup.
    """

    def __init__(self, option: str, value: object, expected: tuple[str, ...]):
        """Initialize error with context.

        Args:
            option: Name of the offending option (e.g. "--color")
            value: The rejected value
            expected: Accepted literal values, in display order
        """
        self.option = option
        self.value = value
        self.expected = expected
        super().__init__(self._get_message())

    def _get_message(self) -> str:
        if len(self.expected) > 1:
            choices = ", ".join(self.expected[:-1]) + f", or {self.expected[-1]}"
        else:
            choices = "".join(self.expected)
        return f"argument for {self.option} must be {choices}, but found `{self.value}`"


class FatalExit(SystemExit):
    """Raised to terminate the process after a fatal diagnostic.

    Subclassing SystemExit lets the interpreter (or click's runner) turn it
    into the process exit status, while tests can intercept it directly.
    """

    def __init__(self, code: int):
        super().__init__(code)
        self.exit_code = code
