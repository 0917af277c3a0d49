"""
firstseen — read-only duplicate file detector.

Core features:
- Iterative depth-first traversal with an explicit stack
- Streaming xxHash3 64-bit content digests
- First-writer-wins duplicate detection (equal digest means equal content)
- Append-only `<epoch>.db` database of `<digest>|<path>` lines
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("firstseen")
except Exception:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from firstseen.commands import IndexCommand
from firstseen.config import parse_config, ConfigOutcome, ConfigResult
from firstseen.core import (
    RunParams, RunStats, RunState, Accepted, Collision,
    DirectoryWalkerImpl, HasherImpl, XXH3HashAlgorithmImpl,
    DuplicateIndexImpl, DatabaseWriterImpl,
    FirstSeenError, ConfigurationError, InvalidRootError, HashIOError,
)

__all__ = [
    "IndexCommand",
    "parse_config",
    "ConfigOutcome",
    "ConfigResult",
    "RunParams",
    "RunStats",
    "RunState",
    "Accepted",
    "Collision",
    "DirectoryWalkerImpl",
    "HasherImpl",
    "XXH3HashAlgorithmImpl",
    "DuplicateIndexImpl",
    "DatabaseWriterImpl",
    "FirstSeenError",
    "ConfigurationError",
    "InvalidRootError",
    "HashIOError",
    "__version__",
]
