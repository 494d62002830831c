"""
namescrub.core.context

Run configuration and the context object handed to the walker.

The context is built once at startup and owns everything process-wide:
the configured logger, the dry-run flag and the stream that receives
report lines. Tests build their own with a capturing stream.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from .logging import DEFAULT_LEVEL, ScrubLogger, get_logger, setup_logging


@dataclass(frozen=True)
class RunConfig:
    path: Path
    dry_run: bool = False
    log_file: Optional[Path] = None
    log_level: str = DEFAULT_LEVEL
    use_rich: bool = True

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunConfig":
        return cls(
            path=Path(args.path),
            dry_run=bool(args.dry_run),
            log_file=Path(args.log_file).expanduser() if args.log_file else None,
            log_level=args.log_level,
            use_rich=not args.no_rich,
        )


@dataclass
class RunContext:
    """Process-wide collaborators for a single walk."""

    log: ScrubLogger = field(default_factory=get_logger)
    dry_run: bool = False
    out: Optional[TextIO] = None

    @classmethod
    def create(cls, config: RunConfig) -> "RunContext":
        """Configure logging from ``config`` and return the run context."""
        log = setup_logging(config.log_level, use_rich=config.use_rich, log_file=config.log_file)
        return cls(log=log, dry_run=config.dry_run)

    def report(self, line: str) -> None:
        """Write one report line to the output stream (stdout unless overridden)."""
        stream = self.out if self.out is not None else sys.stdout
        print(line, file=stream, flush=True)
