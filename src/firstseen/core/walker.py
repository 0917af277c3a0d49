"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Iterative depth-first directory traversal.
Features:
- Uses pathlib.Path for cross-platform path handling
- Explicit LIFO stack instead of recursion, so nesting depth never grows the call stack
- Yields every non-directory entry, one at a time

Visitation order is NOT deterministic: siblings come out in reverse native
listing order, and native listing order depends on the filesystem.
Callers must not rely on it unless `sort_children` is set.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Union

from firstseen.core.errors import InvalidRootError
from firstseen.core.interfaces import DirectoryWalker

logger = logging.getLogger(__name__)


class DirectoryWalkerImpl(DirectoryWalker):
    """
    Walks a directory tree with an explicit stack.

    Symbolic links are not special-cased: a link to a directory is expanded
    like a directory (no cycle detection), any other link is yielded.
    FIFOs, sockets and device nodes are yielded like regular files; hashing
    opens them with a blocking read, so a FIFO with no writer stalls the run.

    Attributes:
        root_dir: Root directory to walk
        sort_children: Visit siblings in ascending name order instead of
            reverse native listing order
    """

    def __init__(self, root_dir: Union[str, Path], sort_children: bool = False):
        self.root_dir = Path(root_dir)
        self.sort_children = sort_children

    def validate_root(self) -> None:
        """Raises InvalidRootError unless the root is a directory."""
        if not self.root_dir.is_dir():
            logger.error(f"Not a directory: {self.root_dir}")
            raise InvalidRootError(self.root_dir)

    def walk(self, validate: bool = True) -> Iterator[Path]:
        """
        Yields every non-directory entry below the root.
        With `validate` the root is checked before anything is yielded; callers
        that already ran validate_root() pass validate=False.
        OSError from listing a directory propagates to the caller.
        """
        if validate:
            self.validate_root()
        logger.debug(f"Walking directory: {self.root_dir}")

        stack: List[Path] = [self.root_dir]
        while stack:
            node = stack.pop()

            if node.is_dir():
                stack.extend(self._children(node))
                continue

            yield node

    def _children(self, directory: Path) -> List[Path]:
        children = list(directory.iterdir())
        if self.sort_children:
            # Pushed in descending order so they pop in ascending order
            children.sort(key=lambda p: p.name, reverse=True)
        return children
