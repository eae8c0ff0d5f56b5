from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from exceptions import FatalExit, InvalidArgumentError
from shell.models import ColorMode, VerbosityLevel
from shell.policy import VERBOSITY_CONFLICT_EXIT_CODE, resolve_color_mode, resolve_verbosity

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        (None, ColorMode.AUTO),
        ("always", ColorMode.ALWAYS),
        ("never", ColorMode.NEVER),
        ("auto", ColorMode.AUTO),
    ],
)
def test_resolve_color_mode_accepts_known_values(requested, expected) -> None:
    assert resolve_color_mode(requested) is expected


@pytest.mark.parametrize("requested", ["", "Always", "NEVER", " auto", "yes", "true"])
def test_resolve_color_mode_rejects_everything_else(requested) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        resolve_color_mode(requested)
    assert f"but found `{requested}`" in str(exc_info.value)
    assert exc_info.value.option == "--color"


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (True, False, VerbosityLevel.VERBOSE),
        (False, True, VerbosityLevel.QUIET),
        (False, False, VerbosityLevel.NORMAL),
    ],
)
def test_resolve_verbosity(verbose, quiet, expected, capsys) -> None:
    assert resolve_verbosity(ColorMode.NEVER, verbose, quiet) is expected
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_resolve_verbosity_conflict_reports_and_exits(capsys) -> None:
    with pytest.raises(FatalExit) as exc_info:
        resolve_verbosity(ColorMode.NEVER, True, True)

    assert exc_info.value.code == VERBOSITY_CONFLICT_EXIT_CODE == 101
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[cross] error: cannot set both --verbose and --quiet\n"


def test_resolve_verbosity_conflict_terminates_process() -> None:
    script = (
        "from shell.models import ColorMode\n"
        "from shell.policy import resolve_verbosity\n"
        "resolve_verbosity(ColorMode.ALWAYS, True, True)\n"
        "print('unreachable')\n"
    )
    env = dict(os.environ, PYTHONPATH=str(SRC_DIR))
    result = subprocess.run(
        [sys.executable, "-c", script], env=env, capture_output=True, text=True, check=False
    )

    assert result.returncode == 101
    assert result.stdout == ""
    assert "\x1b[1;31m[cross] error\x1b[0m" in result.stderr
    assert "verbose" in result.stderr
    assert "quiet" in result.stderr
