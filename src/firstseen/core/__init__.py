"""
Core indexing engine: walker, hasher, duplicate index and database writer.

- DirectoryWalkerImpl: iterative depth-first traversal with an explicit stack
- HasherImpl + XXH3HashAlgorithmImpl: streaming xxHash3 64-bit content digests
- DuplicateIndexImpl: digest → first path, first-writer-wins
- DatabaseWriterImpl: append-only `<epoch>.db` record file
- Models: RunParams, RunStats, Accepted / Collision results

All components are synchronous and single-threaded.
"""

from .errors import FirstSeenError, ConfigurationError, InvalidRootError, HashIOError
from .walker import DirectoryWalkerImpl
from .hasher import HasherImpl, XXH3HashAlgorithmImpl
from .index import DuplicateIndexImpl
from .database import DatabaseWriterImpl, database_filename, format_record
from .models import Accepted, Collision, RunParams, RunState, RunStats, DEFAULT_CHUNK_SIZE

__all__ = [
    "FirstSeenError",
    "ConfigurationError",
    "InvalidRootError",
    "HashIOError",
    "DirectoryWalkerImpl",
    "HasherImpl",
    "XXH3HashAlgorithmImpl",
    "DuplicateIndexImpl",
    "DatabaseWriterImpl",
    "database_filename",
    "format_record",
    "Accepted",
    "Collision",
    "RunParams",
    "RunState",
    "RunStats",
    "DEFAULT_CHUNK_SIZE",
]
