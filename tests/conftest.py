# topmark:header:start
#
#   project      : editml-clean
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Pytest configuration for the editml-clean test suite.

This file sets up global fixtures, a scriptable fake markup engine, and the
logging configuration for test runs.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

import pytest

from editml_clean.config import logging
from editml_clean.constants import LOG_LEVEL_ENV_VAR
from editml_clean.diagnostic.model import Issue, Severity

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_engine: DecoratorType[Any] = as_typed_mark(pytest.mark.engine)


def warning(message: str = "benign warning", line: int = 1, column: int = 1) -> Issue:
    """Return a warning issue for tests."""
    return Issue(Severity.WARNING, message, line, column)


def error(message: str = "fatal error", line: int = 1, column: int = 1) -> Issue:
    """Return an error issue for tests."""
    return Issue(Severity.ERROR, message, line, column)


@dataclass
class FakeEngine:
    """Scriptable markup engine that records the calls it receives.

    ``parse`` returns ``nodes`` and ``parse_issues``; ``transform_clean_view``
    returns ``clean_text`` and ``transform_issues``.
    """

    clean_text: str = ""
    parse_issues: Sequence[Issue] = ()
    transform_issues: Sequence[Issue] = ()
    nodes: Sequence[Any] = ("node",)
    calls: list[tuple[str, Any]] = field(default_factory=lambda: [])

    def parse(self, text: str) -> tuple[Sequence[Any], Sequence[Issue]]:
        self.calls.append(("parse", text))
        return self.nodes, self.parse_issues

    def transform_clean_view(self, nodes: Sequence[Any]) -> tuple[str, Sequence[Issue]]:
        self.calls.append(("transform", nodes))
        return self.clean_text, self.transform_issues


@pytest.fixture(autouse=True)
def silence_editml_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise on stderr when the developer has
    exported the log-level variable in their shell; CLI tests assert on stderr.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so library tests exercise every log call.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
