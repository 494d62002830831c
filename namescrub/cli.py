"""
namescrub.cli

Command-line entry point.

Provides:
 - Base parser with the shared global options (log level, dry-run, log file)
 - Shell completion through argcomplete
 - Safe execution wrapper with consistent exit codes
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

import argcomplete
from rich.console import Console

from namescrub import __version__
from namescrub.core.context import RunConfig, RunContext
from namescrub.core.errors import ScrubError
from namescrub.core.logging import get_logger
from namescrub.walker import walk

log = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


# ----------------------------------------------------------------------
# PARSER
# ----------------------------------------------------------------------

def build_base_parser(description: str = "Strip control characters from file and directory names.") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="namescrub", description=description)
    parser.add_argument("path", help="File or directory to process.")
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Show what would be renamed without making changes.",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write diagnostics to this file instead of stderr.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging verbosity (default: WARNING).",
    )
    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Use plain console logging instead of Rich.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ----------------------------------------------------------------------
# COMMAND
# ----------------------------------------------------------------------

def scrub(config: RunConfig, context: RunContext) -> int:
    log.info("🚀 Scrubbing %s%s", config.path, " (dry run)" if config.dry_run else "")
    stats = walk(config.path, dry_run=config.dry_run, context=context)
    log.info(
        "✅ Done: %d visited, %d %s, %d unchanged",
        stats.visited,
        stats.renamed,
        "would be renamed" if config.dry_run else "renamed",
        stats.unchanged,
    )
    return EXIT_OK


# ----------------------------------------------------------------------
# WRAPPER FUNCTION
# ----------------------------------------------------------------------

def _report_error(message: str, context: Optional[RunContext]) -> None:
    # Printed regardless of the log level so every failure reaches stderr.
    Console(stderr=True, highlight=False).print(f"Error: {message}", markup=False, soft_wrap=True)
    if context is not None and context.log.log_file is not None:
        log.error("❌ %s", message)


def run_cli(
    main_func: Callable[[RunConfig, RunContext], int],
    parser: argparse.ArgumentParser,
    argv: Optional[Sequence[str]] = None,
) -> int:
    """
    Parse ``argv``, configure logging, run ``main_func`` and map failures to
    exit codes.
    """
    argcomplete.autocomplete(parser)
    args = parser.parse_args(list(argv) if argv is not None else None)
    config = RunConfig.from_args(args)

    context: Optional[RunContext] = None
    try:
        context = RunContext.create(config)
        log.debug("Arguments: %s", args)
        return main_func(config, context)
    except ScrubError as exc:
        _report_error(str(exc), context)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        log.warning("⚠️ Operation cancelled by user.")
        return EXIT_INTERRUPTED
    except Exception as exc:
        log.debug("Unexpected failure", exc_info=True)
        _report_error(f"Unexpected error: {exc}", context)
        return EXIT_FAILURE


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run_cli(scrub, build_base_parser(), argv)


if __name__ == "__main__":
    sys.exit(main())
