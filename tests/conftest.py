"""Shared fixtures and helpers for optman tests."""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from optman.common import OptionSpec, PrefixMode
from optman.manager import OptionsManager

CONTEXT = "test-app"


def sample_options() -> list[OptionSpec]:
    """The options used by most tests: one flag, one required, one optional argument."""
    return [
        OptionSpec("v", "version", False, False, "Prints version information"),
        OptionSpec("f", "file", True, True, "The file to read"),
        OptionSpec("o", "output", False, True, "The file to write to"),
    ]


def make_manager(
    options: list[OptionSpec] | None = None,
    prefix_mode: PrefixMode = PrefixMode.STRIP_ALL,
) -> OptionsManager:
    if options is None:
        options = sample_options()
    return OptionsManager(CONTEXT, options, prefix_mode)


def parse_line(line: str, manager: OptionsManager) -> list[OptionSpec]:
    """Split a command line on whitespace and parse it."""
    return manager.parse(line.split())


@pytest.fixture
def manager() -> OptionsManager:
    return make_manager()


@pytest.fixture
def optional_manager() -> OptionsManager:
    """A manager without required options."""
    return make_manager(
        [
            OptionSpec("v", "version", False, False, "Prints version information"),
            OptionSpec("o", "output", False, True, "The file to write to"),
        ]
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the `optman` logger level changed by the example program."""
    yield
    logging.getLogger("optman").setLevel(logging.NOTSET)
