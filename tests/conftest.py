from __future__ import annotations

import logging

import pytest

from console_singleton import set_reporter
from logging_utils.logger import configure_logging


@pytest.fixture(autouse=True)
def reset_global_output_state():
    """Undo process-wide changes made by the CLI (shared reporter, log level)."""
    yield
    set_reporter(None)
    configure_logging(level=logging.WARNING)
