"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the indexing pipeline.
These protocols use Python's `typing.Protocol` for structural typing, so any
object with the right methods can be plugged into the Run Controller.

Key Components:
---------------
- StreamingHashAlgorithm: incremental 64-bit hash primitive (reset / update / finalize).
- Hasher: computes the digest of a whole file through a StreamingHashAlgorithm.
- DirectoryWalker: yields every non-directory entry below a root.
- DuplicateIndex: digest → first path mapping with first-writer-wins insertion.
- DatabaseWriter: append-only (digest, path) record sink.
"""

from pathlib import Path
from typing import Protocol, Iterator, Union
from firstseen.core.models import Accepted, Collision


# ===== Interfaces =====

class StreamingHashAlgorithm(Protocol):
    """
    Interface for streaming hash functions.

    Allows plugging in a different 64-bit hash without affecting the rest of
    the pipeline.
    """

    def reset(self) -> None:
        """Initializes hashing state."""
        ...

    def update(self, data: bytes) -> None:
        """Folds a chunk of bytes into the state. Callable repeatedly."""
        ...

    def finalize(self) -> int:
        """Returns the 64-bit digest. Called once per reset cycle."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    last_bytes_read: int

    def compute_digest(self, path: Union[str, Path]) -> int: ...


class DirectoryWalker(Protocol):
    """
    Interface for enumerating files below a root directory.

    Methods:
        walk: Yields every non-directory entry, one at a time.
    """
    def walk(self) -> Iterator[Path]: ...


class DuplicateIndex(Protocol):
    """
    Interface for the digest → canonical path mapping.

    `try_insert` is the only mutating operation; entries are never removed.
    """
    def try_insert(self, digest: int, path: str) -> Union[Accepted, Collision]: ...

    def __len__(self) -> int: ...


class DatabaseWriter(Protocol):
    """Interface for the append-only record sink."""
    def append(self, digest: int, path: str) -> None: ...

    def close(self) -> None: ...
