"""Declaring, parsing and querying command-line options.

Example:

    options = [
        OptionSpec("f", "file", True, True, "The file to read"),
        OptionSpec("o", "output", False, True, "The file to write to"),
    ]
    manager = OptionsManager("MyApp", options)
    try:
        manager.parse(sys.argv[1:])
    except ParseError as exc:
        print(exc)
        manager.print_help()
    else:
        if manager.is_present("o"):
            print(f"Output file: {manager.argument('o')}")

A `-h`/`--help` option is always added to the declared options. When it is
given, the help screen is printed during `parse` and required options are not
checked.
"""

import logging
from typing import Iterable, Sequence, TextIO

from optman.common import HELP_SHORT, Cursor, OptionSpec, PrefixMode, help_option
from optman.error import OptionError, ParseError
from optman.help import print_help
from optman.scanner import ArgumentScanner, build_name_table

logger = logging.getLogger(__name__)


class OptionsManager:
    def __init__(
        self,
        context: str,
        options: Iterable[OptionSpec],
        prefix_mode: PrefixMode = PrefixMode.STRIP_ALL,
    ):
        self._context = context
        self._options: tuple[OptionSpec, ...] = (*options, help_option())
        self.prefix_mode = prefix_mode
        self.present_options: list[OptionSpec] = []
        self.last_error: OptionError | None = None

    @property
    def context(self) -> str:
        return self._context

    @property
    def options(self) -> tuple[OptionSpec, ...]:
        """Every declared option in declaration order, help option last."""
        return self._options

    @property
    def parse_failed(self) -> bool:
        return self.last_error is not None

    def parse(self, args: Sequence[str]) -> list[OptionSpec]:
        """Parse `args` and return the options present in them.

        The result is also kept for `is_present` and `argument`. If parsing
        fails, `ParseError` is raised, nothing is reported as present and
        `last_error` describes the failure.
        """
        self.present_options = []
        self.last_error = None
        try:
            matched = self._parse(args)
        except ParseError as exc:
            logger.debug(f"Parsing failed: {exc.error.format()}")
            self.last_error = exc.error
            raise

        self.present_options = matched
        return list(matched)

    def _parse(self, args: Sequence[str]) -> list[OptionSpec]:
        names = build_name_table(self._options)
        scanner = ArgumentScanner(Cursor(sequence=args), names, self.prefix_mode)
        matched = scanner.scan()
        logger.debug(f"Matched {len(matched)} option(s) in {len(args)} argument(s)")

        if any(option.matches(HELP_SHORT) for option in matched):
            self.print_help()
            return matched

        for option in self._options:
            if not option.required:
                continue
            if not any(_same_option(option, present) for present in matched):
                raise ParseError(
                    OptionError.missing_required(option.short_name, option.long_name)
                )
        return matched

    def is_present(self, name: str) -> bool:
        """Check whether the option called `name` was given to the last parse."""
        return any(option.matches(name) for option in self.present_options)

    def argument(self, name: str) -> str:
        """Return the argument given to the option called `name`.

        An empty string is returned when the option is absent or takes no
        argument, which cannot be told apart from an empty argument.
        """
        for option in self.present_options:
            if option.has_argument and option.matches(name):
                return option.argument
        return ""

    def print_help(self, file: TextIO | None = None):
        print_help(self._context, self._options, file)


def _same_option(declared: OptionSpec, present: OptionSpec) -> bool:
    return (
        present.short_name == declared.short_name
        or present.long_name == declared.long_name
    )
