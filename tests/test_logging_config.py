"""Tests for the logging setup helper."""

from __future__ import annotations

import logging

import pytest

from greeting_service.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    uvicorn_levels = {
        name: logging.getLogger(name).level
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
    }
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, previous in uvicorn_levels.items():
        logging.getLogger(name).setLevel(previous)


def test_configure_logging_sets_levels_and_format(restore_logging) -> None:
    configure_logging("DEBUG")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG
