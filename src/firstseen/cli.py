#!/usr/bin/env python3
"""
firstseen CLI — index a directory tree by content digest and report duplicates.
Read-only: files are hashed and listed, never modified, moved or deleted.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import logging
import os
import sys
from typing import List, NoReturn, Optional

from firstseen.commands import IndexCommand
from firstseen.config import ConfigOutcome, parse_config
from firstseen.core.errors import InvalidRootError
from firstseen.core.models import RunParams, RunStats

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logging() -> None:
    """ERROR by default; DEBUG when the DEBUG environment variable is set."""
    level = logging.DEBUG if os.environ.get("DEBUG") else logging.ERROR
    logging.basicConfig(level=level, format=LOG_FORMAT)


class CLIApplication:
    """Main CLI application controller."""

    @staticmethod
    def error(message: str) -> None:
        """Print an error message to stderr."""
        print(f"Error: {message}", file=sys.stderr)

    def run_index(self, params: RunParams) -> RunStats:
        """Execute the indexing workflow."""
        command = IndexCommand()
        stats = command.execute(params)
        logger.debug(stats.print_summary())
        return stats

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Single decision point mapping configuration outcomes and fatal
        errors to exit codes. Never calls sys.exit itself.
        """
        config = parse_config(argv)

        if config.outcome is ConfigOutcome.HELP:
            print(config.message)
            return EXIT_OK

        if config.outcome is ConfigOutcome.ERROR:
            self.error(config.message)
            return EXIT_FAILURE

        try:
            self.run_index(config.params)
        except InvalidRootError:
            self.error("<dir> must be a directory!")
            return EXIT_FAILURE
        except OSError as e:
            self.error(f"Traversal failed: {e}")
            return EXIT_FAILURE

        return EXIT_OK


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """Application entry point."""
    configure_logging()
    app = CLIApplication()
    try:
        code = app.run(argv)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    sys.exit(code)


if __name__ == "__main__":
    main()
