from __future__ import annotations

import logging

import pytest

from namescrub.core.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_namescrub_logger():
    """Drop handlers installed by a previous test so each run starts clean."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger._initialized = False  # type: ignore[attr-defined]
