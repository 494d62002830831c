"""Filesystem primitives used by the walker.

Thin wrappers that translate ``OSError`` into namescrub errors so the walker
never has to handle raw filesystem exceptions.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import List

from .errors import NotFoundError, ReadOnlyError, ScrubIOError
from .logging import get_logger

log = get_logger(__name__)

WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def display_path(path: Path | str) -> str:
    """Printable form of ``path``; bytes that are not valid UTF-8 become U+FFFD."""
    return os.fsencode(path).decode("utf-8", "replace")


def is_read_only(path: Path) -> bool:
    """True when none of the write bits are set on ``path`` (symlinks followed)."""
    return not (stat.S_IMODE(path.stat().st_mode) & WRITE_BITS)


def check_writable(path: Path) -> None:
    """
    Verify ``path`` exists and is not read-only.

    Raises:
        NotFoundError: The path does not exist.
        ReadOnlyError: The path carries no write permission bits.
        ScrubIOError: The metadata could not be read.
    """
    shown = display_path(path)
    try:
        exists = path.exists()
        read_only = exists and is_read_only(path)
    except OSError as exc:
        raise ScrubIOError(f"Cannot read metadata for {shown}: {_reason(exc)}", path=path) from exc
    if not exists:
        raise NotFoundError(f"Path does not exist: {shown}", path=path)
    if read_only:
        raise ReadOnlyError(f"Path is readonly, cannot modify: {shown}", path=path)


def is_walkable_dir(path: Path) -> bool:
    """Directories are descended into; symlinks to directories are not."""
    return path.is_dir() and not path.is_symlink()


def list_children(directory: Path) -> List[Path]:
    """Immediate children of ``directory`` in the order the filesystem returns them."""
    try:
        with os.scandir(directory) as entries:
            return [directory / entry.name for entry in entries]
    except OSError as exc:
        raise ScrubIOError(f"Cannot list directory {display_path(directory)}: {_reason(exc)}", path=directory) from exc


def rename_path(src: Path, dst: Path) -> None:
    """Rename ``src`` to ``dst`` in place."""
    try:
        os.rename(src, dst)
    except OSError as exc:
        log.debug("Rename failed %s -> %s: %s", src, dst, exc)
        raise ScrubIOError(f"Failed to rename {display_path(src)} -> {display_path(dst)}: {_reason(exc)}", path=src) from exc
    log.debug("Renamed on disk %s -> %s", src, dst)
