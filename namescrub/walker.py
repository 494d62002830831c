"""
namescrub.walker

Depth-first traversal that strips control characters from entry names.

Directories are handled post-order: every child is fully processed (and
renamed) before the directory itself, so the paths collected for children
never carry a stale parent component. The traversal uses an explicit stack
instead of recursion, so very deep trees do not hit the recursion limit.

The first error anywhere aborts the walk. Renames already applied stay
applied.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from namescrub.core.context import RunContext
from namescrub.core.errors import InvalidNameError
from namescrub.core.fs import check_writable, display_path, is_walkable_dir, list_children, rename_path
from namescrub.sanitize import clean_name, describe_name


@dataclass(frozen=True)
class RenameIntent:
    source: Path
    old_name: str
    new_name: str

    @property
    def target(self) -> Path:
        return self.source.with_name(self.new_name)


@dataclass
class WalkStats:
    visited: int = 0
    renamed: int = 0
    unchanged: int = 0


def plan_rename(path: Path) -> Optional[RenameIntent]:
    """
    Work out the rename needed for ``path``, or None when its name is clean.

    Raises:
        InvalidNameError: The path has no final component, or its name is
            made only of control characters.
    """
    name = path.name
    if name in ("", ".", ".."):
        raise InvalidNameError(f"Invalid filename for path: {display_path(path)}", path=path)

    cleaned = clean_name(name)
    if cleaned == name:
        return None
    if not cleaned:
        raise InvalidNameError(
            f"Name consists only of control characters, refusing to rename: {describe_name(str(path))}",
            path=path,
        )
    return RenameIntent(source=path, old_name=name, new_name=cleaned)


class TreeWalker:
    """Walks a tree and applies (or reports) control-character renames."""

    def __init__(self, context: Optional[RunContext] = None) -> None:
        self.context = context or RunContext()
        self.log = self.context.log
        self.stats = WalkStats()

    @property
    def dry_run(self) -> bool:
        return self.context.dry_run

    def walk(self, root: Path | str) -> WalkStats:
        # Each frame is (path, children_done). A directory is pushed back
        # with children_done=True above its children so it is renamed last.
        stack: List[Tuple[Path, bool]] = [(Path(root), False)]

        while stack:
            path, children_done = stack.pop()
            if children_done:
                self._rename(path)
                continue

            check_writable(path)
            self.stats.visited += 1

            if is_walkable_dir(path):
                children = list_children(path)
                self.log.debug("Entering %s (%d entries)", describe_name(str(path)), len(children))
                stack.append((path, True))
                stack.extend((child, False) for child in reversed(children))
            else:
                self._rename(path)

        return self.stats

    def _rename(self, path: Path) -> None:
        intent = plan_rename(path)
        if intent is None:
            self.stats.unchanged += 1
            self.log.debug("Unchanged: %s", describe_name(str(path)))
            return

        target = intent.target
        change = f"{display_path(path)} -> {display_path(target)}"
        if self.dry_run:
            self.context.report(f"Would rename: {change}")
        else:
            rename_path(path, target)
            self.context.report(f"Renamed: {change}")
        self.stats.renamed += 1
        self.log.info(
            "%s %s -> %s",
            "[DRY-RUN] Would rename" if self.dry_run else "Renamed",
            describe_name(intent.old_name),
            describe_name(intent.new_name),
        )


def walk(
    path: Path | str,
    dry_run: Optional[bool] = None,
    context: Optional[RunContext] = None,
) -> WalkStats:
    """
    Strip control characters from every name under ``path`` (inclusive).

    Args:
        path: File or directory to process.
        dry_run: Report intended renames without touching the filesystem.
            Defaults to the context's flag (False without a context).
        context: Logger and report sink; a default one writing to stdout is
            used when omitted.

    Returns:
        Counters for the completed walk.

    Raises:
        NotFoundError, ReadOnlyError, InvalidNameError, ScrubIOError: on the
        first failure, after which nothing else is processed.
    """
    if context is None:
        context = RunContext()
    if dry_run is not None and dry_run != context.dry_run:
        context = dataclasses.replace(context, dry_run=dry_run)
    return TreeWalker(context).walk(path)
