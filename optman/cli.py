"""Option declarations for the example program."""

from optman.common import OptionSpec
from optman.manager import OptionsManager

CONTEXT = "optman (Python Command Line Interface Parser)"

# Checked before parsing so the parser's own traces can be shown
DEBUG_FLAGS = ("-d", "--debug")


def declared_options() -> list[OptionSpec]:
    return [
        OptionSpec("v", "verbose", False, False, "Verbose output"),
        OptionSpec("d", "debug", False, False, "Show option parsing details"),
        OptionSpec("f", "file", True, True, "The file to read"),
        OptionSpec("o", "output", False, True, "The file to write to"),
    ]


def build_manager() -> OptionsManager:
    """Build the options manager of the example program."""
    return OptionsManager(CONTEXT, declared_options())


def wants_debug(argv: list[str]) -> bool:
    return any(arg in DEBUG_FLAGS for arg in argv)
