"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/database.py
Append-only text database of accepted (digest, path) pairs.

Format: one record per line, `<decimal digest>|<path>\n`, no header or footer.
The file is named after the wall-clock second it was opened in: `<epoch>.db`.
There is no atomic-write guarantee; an interrupted run leaves a partial file
made of complete lines.
"""

import logging
import os
import time
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from firstseen.core.interfaces import DatabaseWriter
from firstseen.core.models import DATABASE_SUFFIX

logger = logging.getLogger(__name__)


def database_filename(timestamp: float) -> str:
    """Builds the database file name for a wall-clock timestamp (seconds resolution)."""
    return f"{int(timestamp)}{DATABASE_SUFFIX}"


def format_record(digest: int, path: Union[str, Path]) -> str:
    """Canonical text form of one record, newline included."""
    return f"{digest}|{path}\n"


class DatabaseWriterImpl(DatabaseWriter):
    """
    Writes records to `<output_dir>/<epoch>.db`.
    Usable as a context manager; close() is safe to call more than once.
    """

    def __init__(self, stream: TextIO, path: str):
        self._stream: Optional[TextIO] = stream
        self.path = path
        self.records_written = 0

    @classmethod
    def create(
            cls,
            output_dir: Union[str, Path] = ".",
            clock: Optional[Callable[[], float]] = None
    ) -> "DatabaseWriterImpl":
        """
        Opens a new database file. An existing file with the same name is truncated.
        Undecodable path bytes are written back unchanged (surrogateescape).
        """
        path = os.path.join(str(output_dir), database_filename((clock or time.time)()))
        stream = open(path, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
        logger.debug(f"Opened database: {path}")
        return cls(stream, path)

    @property
    def closed(self) -> bool:
        return self._stream is None

    def append(self, digest: int, path: Union[str, Path]) -> None:
        if self._stream is None:
            raise ValueError(f"Database is closed: {self.path}")
        self._stream.write(format_record(digest, path))
        self.records_written += 1

    def close(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.flush()
        finally:
            self._stream.close()
            self._stream = None
        logger.debug(f"Closed database: {self.path} ({self.records_written} records)")

    def __enter__(self) -> "DatabaseWriterImpl":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self):
        return f"<DatabaseWriter path={self.path}, records={self.records_written}>"
