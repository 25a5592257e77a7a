"""Command-line interface for colextract.

CLI argument parsing, logging configuration, and the ``main()`` entry point live here.  The extraction itself is
delegated to the runner module, and error handling is centralized around the custom exceptions defined in the
exceptions module.
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

from colextract import __version__
from colextract.config import Settings
from colextract.exceptions import CliError, ExitCode
from colextract.runner import ColumnExtractorRunner

DESCRIPTION = "Extract the specified columns from FILES or stdin."

EPILOG = """\
Column numbering starts at 1, not 0; column 0 is the entire line, just like awk.
Column numbers that are out of bounds are silently ignored.  When each line is
split, empty leading or trailing columns are discarded before columns are
extracted.

Negative column numbers are accepted; -1 is the last column, -2 is the second
last, etc.  With a variable number of columns per line, column -1 refers to a
different column number on each line.  Put -- before the first range that
starts with a negative number, otherwise it is read as an unknown option.

Column ranges of the form 3:8, -3:1, 7:-7 and -1:-3 are accepted.  Both start
and end are required.  An end point past the end of the line is not an error,
so 3:1000 prints every column from 3 onwards.  A range whose start comes after
its end is printed in reverse order.
"""


def setup_logging(verbosity_level: int) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity_level: 0=WARNING, 1=INFO, 2+=DEBUG
    """
    if verbosity_level == 0:
        level = logging.WARNING
    elif verbosity_level == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(
        prog="colextract",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        exit_on_error=True,
    )
    argument_parser.add_argument(
        "-d",
        "--delimiter",
        default=None,
        help=r"Regex delimiting input columns (default: whitespace, i.e. \s+)",
    )
    argument_parser.add_argument(
        "-s",
        "--separator",
        default=None,
        help="Separator between output columns (default: a single space); backslash escapes are expanded",
    )
    argument_parser.add_argument("-c", "--config", default=None, metavar="FILE", help="YAML file with default settings")
    argument_parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    )
    argument_parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    argument_parser.add_argument(
        "columns_then_files",
        nargs="*",
        metavar="COLUMN|FILE",
        help="Leading arguments that look like column specifiers are used as column specifiers, "
        "the remaining arguments are used as filenames ('-' is stdin)",
    )
    return argument_parser


def main(command_line_args: Optional[list[str]] = None) -> int:
    """Main entry point for command line execution.

    Args:
        command_line_args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code for the process
    """
    parsed_args = build_parser().parse_args(command_line_args)

    setup_logging(parsed_args.verbose)

    settings = Settings()
    if parsed_args.config:
        settings.load(Path(parsed_args.config))
    settings.override(delimiter=parsed_args.delimiter, separator=parsed_args.separator)

    runner = ColumnExtractorRunner()
    return runner.run(parsed_args.columns_then_files, settings)


def run() -> None:
    """Console script entry point: run :func:`main` and turn errors into exit codes."""
    try:
        sys.exit(main())
    except CliError as e:
        logging.error(e)
        sys.exit(e.exit_code)
    except BrokenPipeError:
        # Output closed early, e.g. piped into head
        sys.stderr.close()
        sys.exit(ExitCode.OK)
    except Exception:
        logging.error("internal error (use -vv for traceback)")
        known_args, _unknown = build_parser().parse_known_args(sys.argv[1:])
        if known_args.verbose >= 2:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL)


if __name__ == "__main__":
    run()
