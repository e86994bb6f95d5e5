import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, assert_never

from optman.common import Cursor, OptionSpec, PrefixMode
from optman.error import OptionError, ParseError

FLAG_PREFIX = "-"
LONG_FLAG_PREFIX = "--"

logger = logging.getLogger(__name__)


def flag_name(token: str, prefix_mode: PrefixMode) -> str | None:
    """Return the catalog name a flag token refers to, `None` for non-flags."""
    if not token.startswith(FLAG_PREFIX):
        return None

    match prefix_mode:
        case PrefixMode.FIRST_CHAR:
            return token[len(FLAG_PREFIX) :]
        case PrefixMode.STRIP_ALL:
            if token.startswith(LONG_FLAG_PREFIX):
                return token[len(LONG_FLAG_PREFIX) :]
            return token[len(FLAG_PREFIX) :]
        case _:
            assert_never(prefix_mode)


def build_name_table(options: Iterable[OptionSpec]) -> dict[str, OptionSpec]:
    """Map every short and long name to its option, first declaration wins."""
    names: dict[str, OptionSpec] = {}
    for option in options:
        names.setdefault(option.short_name, option)
        names.setdefault(option.long_name, option)
    return names


@dataclass(slots=True)
class ArgumentScanner:
    cursor: Cursor[str]
    names: Mapping[str, OptionSpec]
    prefix_mode: PrefixMode = PrefixMode.STRIP_ALL

    def scan(self) -> list[OptionSpec]:
        matched: list[OptionSpec] = []
        while not self.cursor.is_finished():
            if option := self.scan_token():
                matched.append(option)
        return matched

    def scan_token(self) -> OptionSpec | None:
        token = self.cursor.pop()
        assert token is not None, "Scanned past the end of the arguments"

        name = flag_name(token, self.prefix_mode)
        if name is None:
            logger.debug(f"Ignoring non-option argument `{token}`")
            return None

        declared = self.names.get(name)
        if declared is None:
            raise ParseError(OptionError.unknown_option(token))

        if not declared.has_argument:
            logger.debug(f"Matched option `{token}`")
            return declared.with_argument("")

        argument = self.cursor.pop()
        if argument is None:
            raise ParseError(OptionError.missing_argument(token))
        logger.debug(f"Matched option `{token}` with argument `{argument}`")
        return declared.with_argument(argument)
