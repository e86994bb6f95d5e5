from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Generic, Self, Sequence, TypeVar

T = TypeVar("T")

HELP_SHORT = "h"
HELP_LONG = "help"
HELP_DESCRIPTION = "Displays the help screen"


class PrefixMode(Enum):
    """How a flag token is turned into the name looked up in the catalog."""

    # `--name` -> `name`, `-name` -> `name`
    STRIP_ALL = auto()
    # Only the first character is dropped: `--name` -> `-name`
    FIRST_CHAR = auto()


@dataclass(frozen=True)
class OptionSpec:
    """A declared command-line option, or one matched while parsing.

    Declared options keep `argument` empty. Matched options are copies of the
    declaration carrying the consumed argument, if the option takes one.
    """

    short_name: str
    long_name: str
    required: bool
    has_argument: bool
    description: str
    argument: str = ""

    def matches(self, name: str) -> bool:
        return name in (self.short_name, self.long_name)

    def with_argument(self, argument: str) -> Self:
        return replace(self, argument=argument)

    def render(self) -> str:
        required = str(self.required).lower()
        has_argument = str(self.has_argument).lower()
        return f"short:{self.short_name}, long:{self.long_name}, required:{required}, has argument:{has_argument}, description:{self.description}"

    def __str__(self) -> str:
        return self.render()


def help_option() -> OptionSpec:
    return OptionSpec(HELP_SHORT, HELP_LONG, False, False, HELP_DESCRIPTION)


@dataclass
class Cursor(Generic[T]):
    sequence: Sequence[T]
    position: int = 0

    def is_finished(self) -> bool:
        return self.position >= len(self.sequence)

    def peek(self) -> T | None:
        if self.is_finished():
            return None
        return self.sequence[self.position]

    def pop(self) -> T | None:
        x = self.peek()
        if x is not None:
            self.position += 1
        return x
