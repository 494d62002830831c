from __future__ import annotations

import logging
from pathlib import Path

import pytest

from namescrub.core.errors import ScrubIOError
from namescrub.core.logging import (
    ColorEmojiFormatter,
    ScrubRichHandler,
    get_logger,
    setup_logging,
)


def test_get_logger_returns_children_of_package_logger() -> None:
    child = get_logger("namescrub.walker")
    assert child.name == "namescrub.walker"
    assert get_logger().name == "namescrub"


def test_setup_logging_uses_rich_handler_by_default() -> None:
    logger = setup_logging("info")

    assert logger.level == logging.INFO
    assert logger.rich_enabled is True
    assert logger.log_file is None
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], ScrubRichHandler)
    assert logger.propagate is False


def test_setup_logging_plain_console_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    logger = setup_logging("WARNING", use_rich=False)

    assert isinstance(logger.handlers[0].formatter, ColorEmojiFormatter)
    get_logger("namescrub.test").warning("careful")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "careful" in captured.err
    assert "WARNING" in captured.err


def test_setup_logging_redirects_to_log_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_file = tmp_path / "run.log"
    logger = setup_logging("DEBUG", log_file=log_file)

    get_logger("namescrub.test").info("hello file")
    for handler in logger.handlers:
        handler.flush()

    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""
    assert logger.log_file == log_file
    content = log_file.read_text(encoding="utf-8")
    assert "[INFO] namescrub.test: hello file" in content


def test_setup_logging_rebuilds_handlers(tmp_path: Path) -> None:
    setup_logging("INFO", log_file=tmp_path / "first.log")
    logger = setup_logging("INFO", use_rich=False)

    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], logging.FileHandler)
    assert logger.log_file is None


def test_setup_logging_unknown_level_falls_back_to_warning() -> None:
    logger = setup_logging("chatty", use_rich=False)
    assert logger.level == logging.WARNING


def test_setup_logging_reports_uncreatable_log_file(tmp_path: Path) -> None:
    with pytest.raises(ScrubIOError, match="Cannot create log file"):
        setup_logging("INFO", log_file=tmp_path / "missing" / "run.log")
