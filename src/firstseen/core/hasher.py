"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming file hashing using pluggable hash algorithms.

HasherImpl reads a file in fixed-size chunks and folds every chunk into a
StreamingHashAlgorithm, so memory use does not depend on file size.
Equal digests are treated as equal content; no byte comparison is done.
"""

import logging
from pathlib import Path
from typing import Union

import xxhash

from firstseen.core.errors import HashIOError
from firstseen.core.interfaces import Hasher, StreamingHashAlgorithm
from firstseen.core.models import DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other streaming hash algorithm
class XXH3HashAlgorithmImpl(StreamingHashAlgorithm):
    """XXH3 64-bit, seed 0."""

    def __init__(self):
        self._state = xxhash.xxh3_64()

    def reset(self) -> None:
        self._state.reset()

    def update(self, data: bytes) -> None:
        self._state.update(data)

    def finalize(self) -> int:
        return self._state.intdigest()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the
    StreamingHashAlgorithm interface.
    """

    def __init__(self, algorithm: StreamingHashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or XXH3HashAlgorithmImpl()
        self.chunk_size = chunk_size
        self.last_bytes_read = 0  # size of the most recently hashed input

    def compute_digest(self, path: Union[str, Path]) -> int:
        """
        Computes the digest of the full content of a file.
        Args:
            path: File to hash
        Returns:
            64-bit digest as int
        Raises:
            HashIOError: if the file cannot be opened or a read fails before end-of-stream
        """
        self.algorithm.reset()
        self.last_bytes_read = 0
        try:
            with open(path, 'rb') as f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    self.algorithm.update(chunk)
                    self.last_bytes_read += len(chunk)
        except OSError as e:
            logger.debug(f"Read failed for {path}: {e}")
            raise HashIOError(path, e.strerror or str(e)) from e
        return self.algorithm.finalize()

    def compute_bytes_digest(self, data: bytes) -> int:
        """Computes the digest of an in-memory buffer, using the same chunking as files."""
        self.algorithm.reset()
        self.last_bytes_read = len(data)
        for offset in range(0, len(data), self.chunk_size):
            self.algorithm.update(data[offset:offset + self.chunk_size])
        return self.algorithm.finalize()
