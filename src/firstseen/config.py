"""
Command-line configuration boundary.

Parsing never terminates the process: it returns a ConfigResult whose outcome
tells the caller whether to run, print help, or fail. Mapping outcomes to exit
codes happens in exactly one place (CLIApplication.run).
"""
import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from firstseen.core.errors import ConfigurationError
from firstseen.core.models import RunParams

DESCRIPTION = "firstseen — index files by xxHash3 digest and report duplicates"

EPILOG_TEXT = """
Output:
  A database named <unix-epoch-seconds>.db is written to the output directory.
  Each line is <digest>|<path> for the first file seen with that digest.
  Collisions and unreadable files are reported on stderr.

Examples:
  Index the Downloads folder into the current directory
  %(prog)s -d ~/Downloads

  Write the database somewhere else
  %(prog)s -d ~/Downloads -o /tmp
"""


class ConfigOutcome(Enum):
    OK = "ok"
    HELP = "help"
    ERROR = "error"


@dataclass
class ConfigResult:
    outcome: ConfigOutcome
    params: Optional[RunParams] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is ConfigOutcome.OK


HELP_FLAGS = ("-h", "--help")
# Short options that consume the rest of their cluster (or the next token) as a value
VALUE_FLAGS = ("-d", "-o")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigurationError instead of exiting."""

    def error(self, message: str):
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="firstseen",
        description=DESCRIPTION,
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=EPILOG_TEXT,
        add_help=False,
    )

    # Required argument, checked after --help so that help always wins
    parser.add_argument(
        "--dir", "-d",
        dest="dir",
        type=str,
        metavar="DIR",
        help="Root directory to index (required)"
    )
    parser.add_argument(
        "--output-dir", "-o",
        dest="output_dir",
        default=".",
        type=str,
        metavar="DIR",
        help="Directory for the <epoch>.db database. Default: current directory"
    )

    # Accepted and stored, not consumed by the pipeline
    parser.add_argument(
        "--dry-run", "-y",
        dest="dry_run",
        action="store_true",
        help="Reserved: accepted but currently has no effect"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Reserved: accepted but currently has no effect"
    )
    parser.add_argument(
        "--help", "-h",
        action="store_true",
        help="Show this help message and exit"
    )
    return parser


def format_help() -> str:
    return build_parser().format_help()


def requests_help(argv: List[str]) -> bool:
    """
    True if -h/--help appears among the options, even when the rest of the
    command line would not parse. Scanning stops at "--".
    """
    for token in argv:
        if token == "--":
            return False
        if token in HELP_FLAGS:
            return True
        if token.startswith("--"):
            name = token.split("=", 1)[0]
            # argparse accepts unambiguous prefixes such as --he
            if len(name) > 2 and "--help".startswith(name):
                return True
            continue
        if token.startswith("-"):
            for char in token[1:]:
                if char == "h":
                    return True
                if f"-{char}" in VALUE_FLAGS:
                    break
    return False


def parse_config(argv: Optional[List[str]] = None) -> ConfigResult:
    """
    Parse command-line arguments into RunParams.
    Args:
        argv: Arguments without the program name; None means sys.argv[1:]
    Returns:
        ConfigResult with outcome OK (params set), HELP, or ERROR (message set)
    """
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else list(argv)

    # Help wins over every other option, valid or not
    if requests_help(argv):
        return ConfigResult(ConfigOutcome.HELP, message=parser.format_help())

    try:
        args = parser.parse_args(argv)
    except ConfigurationError as e:
        return ConfigResult(ConfigOutcome.ERROR, message=str(e))

    if not args.dir:
        return ConfigResult(ConfigOutcome.ERROR, message="Option <dir> must be supplied!")

    output_path = Path(args.output_dir)
    if not output_path.is_dir():
        return ConfigResult(ConfigOutcome.ERROR, message=f"Output path is not a directory: {args.output_dir}")

    try:
        params = RunParams(
            root_dir=args.dir,
            output_dir=args.output_dir,
            dry_run=args.dry_run,
            verbose=args.verbose,
        )
    except ValueError as e:
        return ConfigResult(ConfigOutcome.ERROR, message=f"Parameter error: {e}")

    return ConfigResult(ConfigOutcome.OK, params=params)
