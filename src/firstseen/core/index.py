"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
In-memory digest → canonical path mapping with first-writer-wins insertion.
"""

from typing import Dict, Iterator, Optional, Tuple, Union

from firstseen.core.interfaces import DuplicateIndex
from firstseen.core.models import Accepted, Collision


class DuplicateIndexImpl(DuplicateIndex):
    """
    Holds at most one path per digest: the first one offered.
    Entries are never removed or replaced.
    """

    def __init__(self):
        self._entries: Dict[int, str] = {}

    def try_insert(self, digest: int, path: str) -> Union[Accepted, Collision]:
        """
        Offers a (digest, path) pair to the index.
        Returns Accepted if the digest was new, otherwise Collision naming the
        path already stored for it. A Collision leaves the index unchanged,
        including when the same path is offered twice.
        """
        path = str(path)
        existing = self._entries.get(digest)
        if existing is not None:
            return Collision(digest=digest, existing_path=existing, rejected_path=path)
        self._entries[digest] = path
        return Accepted(digest=digest, path=path)

    def get(self, digest: int) -> Optional[str]:
        return self._entries.get(digest)

    def items(self) -> Iterator[Tuple[int, str]]:
        """Entries in insertion order."""
        return iter(self._entries.items())

    def __contains__(self, digest: int) -> bool:
        return digest in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"<DuplicateIndex entries={len(self._entries)}>"
