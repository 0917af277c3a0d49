"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for the traversal → hash → index → persist pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


DEFAULT_CHUNK_SIZE = 64 * 1024  # bytes per read while hashing
DATABASE_SUFFIX = ".db"


# =============================
# Enums
# =============================

class RunState(Enum):
    """Lifecycle of a single indexing run."""
    VALIDATING = "validating"
    TRAVERSING = "traversing"
    HASHING = "hashing"
    INDEXING = "indexing"
    RECORDING = "recording"
    REPORTING = "reporting"
    DONE = "done"

    def __repr__(self) -> str:
        return self.value


# ======================
#  Index results
# ======================

@dataclass(frozen=True)
class Accepted:
    """The digest was new; the path is now the canonical path for it."""
    digest: int
    path: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Collision:
    """
    The digest was already indexed.
    `existing_path` is the canonical path, `rejected_path` the one that was dropped.
    """
    digest: int
    existing_path: str
    rejected_path: str

    @property
    def accepted(self) -> bool:
        return False


# ======================
#  Parameters and stats
# ======================

@dataclass
class RunParams:
    """Parameters for one indexing run with validation."""
    root_dir: str
    output_dir: str = "."
    chunk_size: int = DEFAULT_CHUNK_SIZE
    sort_children: bool = False
    # Accepted on the command line but not consumed by the pipeline.
    dry_run: bool = False
    verbose: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if not self.output_dir:
            raise ValueError("Output directory cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")


@dataclass
class RunStats:
    """
    Statistics collected during an indexing run.
    """
    files_seen: int = 0
    files_indexed: int = 0
    collisions: int = 0
    hash_errors: int = 0
    bytes_hashed: int = 0
    total_time: float = 0.0
    database_path: Optional[str] = None

    @property
    def files_skipped(self) -> int:
        return self.collisions + self.hash_errors

    def print_summary(self) -> str:
        lines = [
            "Indexing Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files seen: {self.files_seen}",
            f"Files indexed: {self.files_indexed}",
            f"Collisions: {self.collisions}",
            f"Read errors: {self.hash_errors}",
            f"Bytes hashed: {self.bytes_hashed}",
        ]
        if self.database_path:
            lines.append(f"Database: {self.database_path}")
        return "\n".join(lines)

    def __repr__(self):
        return (f"<RunStats seen={self.files_seen}, indexed={self.files_indexed}, "
                f"collisions={self.collisions}, errors={self.hash_errors}>")
