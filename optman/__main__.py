import logging
import sys

from optman.cli import build_manager, wants_debug
from optman.common import HELP_SHORT
from optman.error import ParseError, report_error

PACKAGE_LOGGER = "optman"

logger = logging.getLogger(PACKAGE_LOGGER)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(format=f"[%(levelname)s] %(message)s")
    logger.setLevel(logging.DEBUG if wants_debug(argv) else logging.WARNING)

    manager = build_manager()
    try:
        present_options = manager.parse(argv)
    except ParseError as exc:
        report_error(exc.error)
        manager.print_help()
        return 1

    if manager.is_present("verbose") and not manager.is_present("debug"):
        logger.setLevel(logging.INFO)

    if manager.is_present(HELP_SHORT):
        return 0

    logger.info(f"Parsed {len(present_options)} option(s)")
    for option in present_options:
        logger.info(f"Option: {option}")
        if option.has_argument:
            print(f"-{option.short_name}, --{option.long_name}: {option.argument}")
        else:
            print(f"-{option.short_name}, --{option.long_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
