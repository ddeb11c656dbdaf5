"""Command-line interface for xcvt.

    convert -f <from_unit> -t <to_unit> <value>
"""

import argparse
import logging
import sys
from dataclasses import dataclass

from xcvt import __version__
from xcvt.config import config
from xcvt.errors import ConversionError, InvalidArgument, MissingArguments, MissingFlagValue
from xcvt.services.aliases import normalize
from xcvt.services.catalog import get_supported_units
from xcvt.services.conversion_service import convert

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: convert -f <from_unit> -t <to_unit> <value>\n"
    "Options:\n"
    "  -h, --help        Show this help message\n"
    "  -l, --list        List supported units\n"
    "  -v, --version     Show version\n"
    "  -f, --from        Unit to convert from\n"
    "  -t, --to          Unit to convert to\n"
)

_GREEN = "\033[1;32m"
_RED_BOLD = "\033[1;31m"
_RED = "\033[31m"
_RESET = "\033[0m"

# Flags that take a unit argument
_UNIT_FLAGS = {"-f/--from", "-t/--to"}
_UNIT_OPTIONS = {"-f", "--from", "-t", "--to"}


@dataclass
class Args:
    """Parsed command line."""

    from_unit: str = ""
    to_unit: str = ""
    value: float | None = None
    show_help: bool = False
    list_units: bool = False
    show_version: bool = False

    @property
    def informational(self) -> bool:
        return self.show_help or self.list_units or self.show_version


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message):
        raise InvalidArgument(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="convert", add_help=False, allow_abbrev=False, exit_on_error=False)
    parser.add_argument("-h", "--help", dest="show_help", action="store_true")
    parser.add_argument("-l", "--list", "--units", dest="list_units", action="store_true")
    parser.add_argument("-v", "--version", dest="show_version", action="store_true")
    parser.add_argument("-f", "--from", dest="from_unit", metavar="UNIT")
    parser.add_argument("-t", "--to", dest="to_unit", metavar="UNIT")
    return parser


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def _split_values(argv: list[str]) -> tuple[list[str], list[str]]:
    """Separate value tokens from options, keeping both in order.

    argparse only reads plain negatives like "-40" as positionals, so any
    dash token that parses as a float ("-1e3") is taken as a value here.
    The token after -f/-t always stays with its flag.
    """
    options: list[str] = []
    values: list[str] = []
    takes_unit = False
    for token in argv:
        if takes_unit:
            options.append(token)
            takes_unit = False
        elif token in _UNIT_OPTIONS:
            options.append(token)
            takes_unit = True
        elif not token.startswith("-") or _is_number(token):
            values.append(token)
        else:
            options.append(token)
    return options, values


def parse_args(argv: list[str]) -> Args:
    """Parse command-line arguments.

    Unit arguments are normalized through the alias table. When several
    values are given the last one wins.

    Raises:
        MissingFlagValue: If -f/--from or -t/--to has no unit after it.
        InvalidArgument: If a value is not a number or an option is unknown.
        MissingArguments: If from/to/value are incomplete and no
            informational flag was given.
    """
    options, values = _split_values(argv)
    parser = _build_parser()
    try:
        namespace = parser.parse_args(options)
    except argparse.ArgumentError as e:
        if e.argument_name in _UNIT_FLAGS:
            raise MissingFlagValue(f"'{e.argument_name}' flag requires a unit.") from e
        raise InvalidArgument(str(e)) from e

    args = Args(
        show_help=namespace.show_help,
        list_units=namespace.list_units,
        show_version=namespace.show_version,
    )
    if namespace.from_unit is not None:
        args.from_unit = normalize(namespace.from_unit)
    if namespace.to_unit is not None:
        args.to_unit = normalize(namespace.to_unit)

    for token in values:
        try:
            args.value = float(token)
        except ValueError as e:
            raise InvalidArgument("Value must be a valid number.") from e

    if not args.informational:
        if not args.from_unit or not args.to_unit or args.value is None:
            raise MissingArguments()

    return args


def _colorize(text: str, code: str) -> str:
    if not config.color:
        return text
    return f"{code}{text}{_RESET}"


def format_value(value: float, precision: int | None = None) -> str:
    """Render a number with a fixed count of significant digits."""
    if precision is None:
        precision = config.precision
    return f"{value:.{precision}g}"


def print_usage() -> None:
    print(USAGE)


def print_units() -> None:
    print("Supported units:\n")
    blocks = [
        f"{category}:\n  " + "  ".join(units)
        for category, units in get_supported_units().items()
    ]
    print("\n\n".join(blocks))


def print_version() -> None:
    print(f"Current Version:\t{_colorize(__version__, _GREEN)}")


def print_error(message: str) -> None:
    if config.color:
        print(f"{_RED_BOLD}Error: {_RED}{message}{_RESET}", file=sys.stderr)
    else:
        print(f"Error: {message}", file=sys.stderr)


def run(argv: list[str]) -> int:
    """Run one invocation and return the process exit status."""
    try:
        args = parse_args(argv)

        if args.show_help:
            print_usage()
            print("For a list of units, use the -l or --list flag.")
            return 0

        if args.list_units:
            print_units()
            return 0

        if args.show_version:
            print_version()
            return 0

        result = convert(args.from_unit, args.to_unit, args.value)

        print(f"From: {args.from_unit}")
        print(f"To: {args.to_unit}")
        print(f"Value: {_colorize(format_value(result) + args.to_unit, _GREEN)}")
        return 0
    except ConversionError as e:
        logger.debug("Conversion failed: %s", e, exc_info=True)
        print_error(str(e))
        print_usage()
        return 1


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``convert`` console script."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if argv is None:
        argv = sys.argv[1:]
    return run(argv)


if __name__ == "__main__":
    sys.exit(main())
