"""
namescrub.core.logging

Typed logging for namescrub.

Features:
 - Custom ScrubLogger subclass with Rich flag and log file attributes
 - Rich console handler bound to stderr (stdout is reserved for the report)
 - Plain ANSI/emoji console fallback when Rich output is disabled
 - Optional log file that replaces the console destination
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, cast

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .errors import ScrubIOError

LOGGER_NAME = "namescrub"
DEFAULT_LEVEL = "WARNING"


# ----------------------------------------------------------------------
# LEVEL STYLE METADATA
# ----------------------------------------------------------------------

ANSI_RESET = "\033[0m"

LEVEL_STYLES: Dict[int, Dict[str, str]] = {
    logging.DEBUG: {"emoji": "🐛", "ansi": "\033[36m", "rich": "bright_cyan"},
    logging.INFO: {"emoji": "ℹ️", "ansi": "\033[32m", "rich": "green"},
    logging.WARNING: {"emoji": "⚠️", "ansi": "\033[33m", "rich": "yellow"},
    logging.ERROR: {"emoji": "❌", "ansi": "\033[31m", "rich": "red"},
    logging.CRITICAL: {"emoji": "💥", "ansi": "\033[95m", "rich": "bold magenta"},
}
DEFAULT_STYLE = LEVEL_STYLES[logging.INFO]


def _level_style(record: logging.LogRecord) -> Dict[str, str]:
    return LEVEL_STYLES.get(record.levelno, DEFAULT_STYLE)


# ----------------------------------------------------------------------
# FORMATTERS
# ----------------------------------------------------------------------

class ColorEmojiFormatter(logging.Formatter):
    """Console formatter that injects colored level names and emojis."""

    def format(self, record: logging.LogRecord) -> str:
        style = _level_style(record)
        display = f"{style['emoji']} {record.levelname}"
        record.level_display = f"{style['ansi']}{display}{ANSI_RESET}"  # type: ignore[attr-defined]
        try:
            return super().format(record)
        finally:
            del record.level_display  # type: ignore[attr-defined]


class EmojiFormatter(logging.Formatter):
    """File formatter that prefixes log lines with the level emoji."""

    def format(self, record: logging.LogRecord) -> str:
        record.level_emoji = _level_style(record)["emoji"]  # type: ignore[attr-defined]
        return super().format(record)


class ScrubRichHandler(RichHandler):
    """Rich console handler with emoji-enhanced level column."""

    def get_level_text(self, record: logging.LogRecord) -> Text:
        style = _level_style(record)
        text = Text()
        text.append(f"{style['emoji']} ", style=style["rich"])
        text.append(record.levelname, style=style["rich"])
        return text


# ----------------------------------------------------------------------
# LOGGER CLASS
# ----------------------------------------------------------------------

class ScrubLogger(logging.Logger):
    """Logger carrying the active output settings."""

    rich_enabled: bool = False
    log_file: Optional[Path] = None


def _normalize_level(value: Any) -> str:
    if isinstance(value, str):
        candidate = value.strip().upper()
        if candidate in logging._nameToLevel:  # type: ignore[attr-defined]
            return candidate
    elif isinstance(value, int):
        label = logging.getLevelName(value)
        if isinstance(label, str) and not label.startswith("Level "):
            return label
    return DEFAULT_LEVEL


def _base_logger() -> ScrubLogger:
    logging.setLoggerClass(ScrubLogger)
    return cast(ScrubLogger, logging.getLogger(LOGGER_NAME))


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _console_handler(use_rich: bool) -> logging.Handler:
    if use_rich:
        return ScrubRichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_level=True,
            show_path=False,
            log_time_format="[%X]",
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ColorEmojiFormatter(
            fmt="%(asctime)s %(level_display)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    try:
        handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    except OSError as exc:
        raise ScrubIOError(f"Cannot create log file: {log_file} ({exc.strerror or exc})", path=log_file) from exc
    handler.setFormatter(
        EmojiFormatter(
            fmt="%(asctime)s %(level_emoji)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


# ----------------------------------------------------------------------
# SETUP
# ----------------------------------------------------------------------

def setup_logging(
    level: str | int | None = None,
    use_rich: bool = True,
    log_file: Optional[Path | str] = None,
) -> ScrubLogger:
    """
    Configure and return the package logger.

    Args:
        level: Logging level name or number. Defaults to WARNING.
        use_rich: Render console output through Rich (ignored with a log file).
        log_file: Send diagnostics to this file instead of stderr. The file is
            truncated on every run.

    Raises:
        ScrubIOError: The log file could not be created.
    """
    logger = _base_logger()
    logger.setLevel(_normalize_level(level))

    if log_file is not None:
        path = Path(log_file).expanduser()
        handler = _file_handler(path)
        logger.rich_enabled = False
        logger.log_file = path
    else:
        handler = _console_handler(use_rich)
        logger.rich_enabled = use_rich
        logger.log_file = None

    # Rebuild from scratch on every call.
    _reset_handlers(logger)
    handler.setLevel(logging.NOTSET)
    logger.addHandler(handler)
    logger.propagate = False
    logger._initialized = True  # type: ignore[attr-defined]

    logger.debug(
        "Logger initialized at level %s (Rich=%s, file=%s)",
        logging.getLevelName(logger.level),
        "ON" if logger.rich_enabled else "OFF",
        logger.log_file or "-",
    )
    return logger


def get_logger(name: str = LOGGER_NAME) -> ScrubLogger:
    """Retrieve a namespaced logger (configured later via setup_logging)."""

    base = _base_logger()
    if not getattr(base, "_initialized", False) and not base.handlers:
        base.addHandler(logging.NullHandler())

    if not name or name == LOGGER_NAME:
        return base
    if name.startswith(LOGGER_NAME + "."):
        name = name[len(LOGGER_NAME) + 1:]
    return cast(ScrubLogger, base.getChild(name))
