"""
namescrub.core

Single import path for the shared plumbing:
  - Logging
  - Errors
  - Filesystem primitives
  - Run configuration and context
"""

from namescrub.core.logging import setup_logging, get_logger, ScrubLogger
from namescrub.core.errors import (
    ScrubError,
    NotFoundError,
    ReadOnlyError,
    InvalidNameError,
    ScrubIOError,
)
from namescrub.core.fs import check_writable, display_path, is_read_only, list_children, rename_path
from namescrub.core.context import RunConfig, RunContext

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "ScrubLogger",

    # Errors
    "ScrubError",
    "NotFoundError",
    "ReadOnlyError",
    "InvalidNameError",
    "ScrubIOError",

    # Filesystem
    "check_writable",
    "display_path",
    "is_read_only",
    "list_children",
    "rename_path",

    # Context
    "RunConfig",
    "RunContext",
]
