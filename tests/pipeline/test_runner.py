# topmark:header:start
#
#   project      : editml-clean
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Unit tests for `editml_clean.pipeline.runner.run`.

The runner is exercised against a scripted `FakeEngine` so phase ordering and
best-effort continuation can be observed directly.
"""

from __future__ import annotations

from hypothesis import given

from editml_clean.diagnostic.model import Issue
from editml_clean.pipeline.runner import RunResult, merge_issues, run
from tests.conftest import FakeEngine, error, mark_pipeline, warning
from tests.strategies import issue_lists


@mark_pipeline
def test_run_without_issues_returns_clean_text() -> None:
    engine = FakeEngine(clean_text="clean")

    result: RunResult = run("raw", engine)

    assert result == RunResult(clean_text="clean", issues=())
    assert engine.calls == [("parse", "raw"), ("transform", ("node",))]


@mark_pipeline
def test_transform_runs_after_parse_error() -> None:
    """Best-effort continuation: a parse error does not skip the transform phase."""
    engine = FakeEngine(clean_text="partial", parse_issues=[error("broken")])

    result: RunResult = run("raw", engine)

    assert [name for name, _ in engine.calls] == ["parse", "transform"]
    assert result.clean_text == "partial"
    assert result.issues == (error("broken"),)


@mark_pipeline
def test_transform_receives_parse_nodes() -> None:
    nodes = ("a", "b", "c")
    engine = FakeEngine(nodes=nodes)

    run("raw", engine)

    assert engine.calls[1] == ("transform", nodes)


@mark_pipeline
def test_parse_issues_precede_transform_issues() -> None:
    late = error("transform", line=1, column=1)
    early = warning("parse", line=9, column=9)
    engine = FakeEngine(parse_issues=[early], transform_issues=[late])

    result: RunResult = run("raw", engine)

    # not re-sorted by position
    assert result.issues == (early, late)


@mark_pipeline
def test_duplicates_are_kept() -> None:
    same = warning("dup")
    engine = FakeEngine(parse_issues=[same, same], transform_issues=[same])

    result: RunResult = run("raw", engine)

    assert result.issues == (same, same, same)
    assert result.stats().n_warning == 3


@mark_pipeline
@given(parse_issues=issue_lists(), transform_issues=issue_lists())
def test_merge_is_concatenation(parse_issues: list[Issue], transform_issues: list[Issue]) -> None:
    engine = FakeEngine(parse_issues=parse_issues, transform_issues=transform_issues)

    result: RunResult = run("raw", engine)

    assert list(result.issues) == parse_issues + transform_issues
    assert result.issues == merge_issues(parse_issues, transform_issues)


@mark_pipeline
def test_default_engine_is_editml() -> None:
    result: RunResult = run("Hello{+ world+}.")

    assert result.clean_text == "Hello world."
    assert result.issues == ()
