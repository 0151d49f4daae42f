# topmark:header:start
#
#   project      : editml-clean
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Unit tests for the logging helpers."""

from __future__ import annotations

import logging

import pytest

from editml_clean.config.logging import (
    TRACE_LEVEL,
    EditmlLogger,
    get_logger,
    resolve_env_log_level,
)
from editml_clean.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)

    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace() -> None:
    logger = get_logger("editml_clean.tests.trace")

    assert isinstance(logger, EditmlLogger)
    logger.trace("trace message %s", "works")
