"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy shared by the core pipeline and the CLI.
"""
from pathlib import Path
from typing import Union


class FirstSeenError(Exception):
    """Base class for all errors raised by firstseen."""


class ConfigurationError(FirstSeenError):
    """Missing required option, unknown flag or invalid option value."""


class InvalidRootError(FirstSeenError):
    """The root search path is not a directory."""

    def __init__(self, root: Union[str, Path]):
        self.root = str(root)
        super().__init__(f"Not a directory: {self.root}")


class HashIOError(FirstSeenError):
    """A file could not be read through to end-of-stream while hashing."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Error reading {self.path}!"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
