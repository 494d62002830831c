"""Exception types raised while scrubbing a tree.

Every error is fatal to the walk. Each class also derives from the matching
builtin so callers can catch either form.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ScrubError(Exception):
    """Base class for all namescrub failures."""

    def __init__(self, message: str, *, path: Optional[Path | str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return self.message


class NotFoundError(ScrubError, FileNotFoundError):
    """The path did not exist when it was visited."""


class ReadOnlyError(ScrubError, PermissionError):
    """The path's permission bits mark it read-only."""


class InvalidNameError(ScrubError, ValueError):
    """The path has no usable final name component."""


class ScrubIOError(ScrubError, OSError):
    """Listing, renaming or log-file creation failed."""
