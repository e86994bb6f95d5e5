"""Error reporting for option parsing.

Every failure of `OptionsManager.parse` is described by one `OptionError`
and raised wrapped in a `ParseError`. The message texts are stable and meant
to be shown to users as-is.
"""

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO


class ErrorKind(Enum):
    """Categories of parse errors."""

    UNKNOWN_OPTION = auto()
    MISSING_ARGUMENT = auto()
    MISSING_REQUIRED = auto()


@dataclass
class OptionError:
    """A single parse error and the option it concerns."""

    kind: ErrorKind
    message: str
    option: str

    @classmethod
    def unknown_option(cls, flag: str) -> "OptionError":
        return cls(ErrorKind.UNKNOWN_OPTION, f"Unknown option: {flag}", flag)

    @classmethod
    def missing_argument(cls, flag: str) -> "OptionError":
        return cls(
            ErrorKind.MISSING_ARGUMENT, f"Option {flag} requires an argument.", flag
        )

    @classmethod
    def missing_required(cls, short_name: str, long_name: str) -> "OptionError":
        return cls(
            ErrorKind.MISSING_REQUIRED,
            f"Required option -{short_name} or --{long_name} is missing.",
            long_name or short_name,
        )

    def format(self) -> str:
        """Format this error as a one-line diagnostic."""
        return f"error[{self.kind.name}]: {self.message}"


class ParseError(Exception):
    """Carries the `OptionError` that stopped a parse."""

    def __init__(self, error: OptionError):
        self.error = error
        super().__init__(error.message)

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


def report_error(error: OptionError, file: TextIO | None = None):
    """Print the error to stderr."""
    if file is None:
        file = sys.stderr
    print(error.format(), file=file)
