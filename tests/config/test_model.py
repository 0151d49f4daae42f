# topmark:header:start
#
#   project      : editml-clean
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Unit tests for `RunConfig` construction."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from editml_clean.config.model import RunConfig


def test_defaults_use_standard_streams() -> None:
    config = RunConfig.from_cli()

    assert config == RunConfig()
    assert config.reads_stdin
    assert config.writes_stdout


def test_paths_are_resolved() -> None:
    config = RunConfig.from_cli(input_path="in.editml", output_short="out.txt")

    assert config.input_path == Path("in.editml")
    assert config.output_path == Path("out.txt")
    assert not config.reads_stdin
    assert not config.writes_stdout


@pytest.mark.parametrize(
    ("short", "long", "expected"),
    [
        ("s.txt", None, Path("s.txt")),
        (None, "l.txt", Path("l.txt")),
        ("s.txt", "l.txt", Path("l.txt")),
        ("s.txt", "", Path("s.txt")),
        ("", "", None),
    ],
)
def test_long_output_wins(short: str | None, long: str | None, expected: Path | None) -> None:
    config = RunConfig.from_cli(output_short=short, output_long=long)

    assert config.output_path == expected


@pytest.mark.parametrize("value", [None, "", "-"])
def test_stdin_markers(value: str | None) -> None:
    assert RunConfig.from_cli(input_path=value).input_path is None


def test_flags_are_carried() -> None:
    config = RunConfig.from_cli(debug=True, strict=True)

    assert (config.debug, config.strict) == (True, True)


def test_config_is_frozen() -> None:
    config = RunConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.strict = True  # type: ignore[misc]
