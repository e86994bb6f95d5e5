"""Help screen rendering."""

import sys
from typing import Iterable, TextIO

from optman.common import OptionSpec

ARGUMENT_PLACEHOLDER = " <arg>"
REQUIRED_MARKER = " (required)"
OPTION_INDENT = "  "
DESCRIPTION_INDENT = "      "


def format_option(option: OptionSpec) -> str:
    argument = ARGUMENT_PLACEHOLDER if option.has_argument else ""
    required = REQUIRED_MARKER if option.required else ""
    return (
        f"{OPTION_INDENT}-{option.short_name}, --{option.long_name}{argument}{required}\n"
        f"{DESCRIPTION_INDENT}{option.description}\n"
    )


def format_help(context: str, options: Iterable[OptionSpec]) -> str:
    """Render the help screen for `context` listing `options` in order."""
    lines = [f"{context} - Help: \n"]
    lines.extend(format_option(option) for option in options)
    return "".join(lines)


def print_help(
    context: str, options: Iterable[OptionSpec], file: TextIO | None = None
):
    if file is None:
        file = sys.stdout
    file.write(format_help(context, options))
