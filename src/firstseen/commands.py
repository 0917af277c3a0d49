"""
Run controller for an indexing pass.
Wires walker → hasher → duplicate index → database writer and owns the
error/recovery policy. Used by the CLI, usable directly from Python.
"""
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Optional

from firstseen.core.database import DatabaseWriterImpl
from firstseen.core.errors import HashIOError
from firstseen.core.hasher import HasherImpl
from firstseen.core.interfaces import DatabaseWriter, Hasher
from firstseen.core.index import DuplicateIndexImpl
from firstseen.core.models import Collision, RunParams, RunState, RunStats
from firstseen.core.walker import DirectoryWalkerImpl

logger = logging.getLogger(__name__)

BYTES_PER_MEBIBYTE = 1024 * 1024


def print_diagnostic(message: str) -> None:
    """Default diagnostic sink: one line on stderr."""
    print(message, file=sys.stderr)


class IndexCommand:
    """
    Orchestrates one indexing run:
    1. Validate that the root is a directory (no database is created otherwise)
    2. Open the `<epoch>.db` database
    3. Walk the tree; hash, index and record or report every file
    4. Close the database and return statistics

    A file that cannot be read is reported and skipped. A digest collision is
    reported and the later file is dropped. Neither stops the run.

    Usage:
        params = RunParams(root_dir="/data")
        command = IndexCommand()
        stats = command.execute(params)
    """

    def __init__(self, hasher: Optional[Hasher] = None, clock: Optional[Callable[[], float]] = None):
        self._hasher = hasher
        self._clock = clock or time.time
        self.index = DuplicateIndexImpl()
        self.state = RunState.VALIDATING

    def execute(
            self,
            params: RunParams,
            report: Optional[Callable[[str], None]] = None,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> RunStats:
        """
        Execute an indexing run with given parameters.

        Args:
            params: Validated run parameters
            report: (message: str) -> None, receives collision and read-error lines
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            RunStats for the run

        Raises:
            InvalidRootError: If params.root_dir is not a directory
            OSError: If a directory cannot be listed during traversal
        """
        report = report or print_diagnostic
        hasher = self._hasher or HasherImpl(chunk_size=params.chunk_size)
        stats = RunStats()
        self.index = DuplicateIndexImpl()
        total_start_time = time.time()

        self.state = RunState.VALIDATING
        walker = DirectoryWalkerImpl(params.root_dir, sort_children=params.sort_children)
        walker.validate_root()

        with DatabaseWriterImpl.create(params.output_dir, clock=self._clock) as database:
            stats.database_path = database.path
            self.state = RunState.TRAVERSING
            for node in walker.walk(validate=False):
                stats.files_seen += 1
                self._process_file(node, hasher, database, stats, report)
                self.state = RunState.TRAVERSING
                if progress_callback:
                    progress_callback('indexing', stats.files_seen, None)

        self.state = RunState.DONE
        stats.total_time = time.time() - total_start_time
        logger.info(f"Run finished: {stats!r}")
        return stats

    def _process_file(
            self,
            node: Path,
            hasher: Hasher,
            database: DatabaseWriter,
            stats: RunStats,
            report: Callable[[str], None]
    ) -> None:
        path = str(node)

        self.state = RunState.HASHING
        start_time = time.perf_counter()
        try:
            digest = hasher.compute_digest(node)
        except HashIOError as e:
            self.state = RunState.REPORTING
            stats.hash_errors += 1
            logger.debug(f"Skipping {path}: {e}")
            report(str(e))
            return
        stats.bytes_hashed += hasher.last_bytes_read
        self._log_throughput(node, digest, hasher.last_bytes_read, time.perf_counter() - start_time)

        self.state = RunState.INDEXING
        result = self.index.try_insert(digest, path)

        if isinstance(result, Collision):
            self.state = RunState.REPORTING
            stats.collisions += 1
            report(f"[COLLISION] {result.existing_path} hashed to the same value as {result.rejected_path}")
            return

        self.state = RunState.RECORDING
        database.append(digest, path)
        stats.files_indexed += 1

    @staticmethod
    def _log_throughput(node: Path, digest: int, size: int, elapsed: float) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        size_mib = size / BYTES_PER_MEBIBYTE
        rate = size_mib / elapsed if elapsed > 0 else float("inf")
        logger.debug(f"{digest} for {node}, {rate:.2f} MiB/s")
