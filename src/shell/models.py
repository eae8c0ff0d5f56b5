from __future__ import annotations

from enum import Enum, IntEnum


class VerbosityLevel(IntEnum):
    """The requested verbosity of output, ordered by information volume."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2

    @property
    def is_verbose(self) -> bool:
        return self is VerbosityLevel.VERBOSE


class ColorMode(str, Enum):
    """Whether messages should use color output."""

    ALWAYS = "always"  # force color output
    NEVER = "never"  # force plain output
    AUTO = "auto"  # decide per write from the destination stream
