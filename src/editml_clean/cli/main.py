# topmark:header:start
#
#   project      : editml-clean
#   file         : main.py
#   file_relpath : src/editml_clean/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""The ``editml-clean`` command.

Flow of a run:

1. ``--version`` short-circuits from its eager callback, before any input is touched
   or the remaining arguments are validated.
2. Otherwise the options are parsed once into an immutable `RunConfig`.
3. The input is read (file or stdin) and passed through the pipeline.
4. With ``--debug``, every issue is reported on stderr.
5. The severity policy decides the exit status; output is written only for a
   successful outcome, so an error never leaves a partial payload behind.

Fatal I/O problems surface as `EditmlCleanError` exceptions and are turned
into a message and an exit status by Click's top-level handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from editml_clean.cli.console import ClickConsole
from editml_clean.cli.emitters.debug import emit_issues
from editml_clean.cli.errors import EditmlCleanUnexpectedError
from editml_clean.cli.io import read_input, write_output
from editml_clean.config.logging import get_logger, setup_logging
from editml_clean.config.model import RunConfig
from editml_clean.constants import APP_NAME, APP_VERSION
from editml_clean.core.exit_codes import ExitCode
from editml_clean.pipeline import classify_outcome, exit_code_for, run, should_write

if TYPE_CHECKING:
    from editml_clean.cli.console import ConsoleLike
    from editml_clean.config.logging import EditmlLogger
    from editml_clean.pipeline import Outcome, RunResult

logger: EditmlLogger = get_logger(__name__)


class EditmlCleanCommand(click.Command):
    """Click command that reports usage errors with ``ExitCode.USAGE_ERROR``.

    Click exits with 2 on usage errors, which would be indistinguishable from
    the strict-warnings status.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Parse ``args``, re-coding any `click.UsageError` to ``USAGE_ERROR``."""
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = ExitCode.USAGE_ERROR
            raise


def version_text() -> str:
    """Return the fixed version banner."""
    return f"{APP_NAME} version {APP_VERSION}"


def init_console(ctx: click.Context) -> ConsoleLike:
    """Attach (or reuse) the program-output console on the Click context."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole()
        ctx.obj["console"] = console
    return console


def print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print the version banner and exit with ``SUCCESS``.

    Runs during option parsing (``is_eager=True``), so input, output and any
    extra positional arguments are never looked at.
    """
    if not value or ctx.resilient_parsing:
        return
    init_console(ctx).print(version_text())
    ctx.exit(ExitCode.SUCCESS)


def process(config: RunConfig, console: ConsoleLike) -> ExitCode:
    """Run one invocation described by ``config``.

    Args:
        config (RunConfig): The frozen run configuration.
        console (ConsoleLike): Console for diagnostics.

    Returns:
        ExitCode: The status the process should exit with.

    Raises:
        EditmlCleanUnexpectedError: If the markup engine fails unexpectedly.
    """
    input_text: str = read_input(config.input_path)

    try:
        result: RunResult = run(input_text)
    except Exception as exc:
        logger.exception("markup engine failed: %s", exc)
        raise EditmlCleanUnexpectedError(f"markup engine failed: {exc}") from exc

    if config.debug:
        emit_issues(result.issues, console)

    outcome: Outcome = classify_outcome(result.issues, strict=config.strict)
    exit_code: ExitCode = exit_code_for(outcome)
    logger.info(
        "outcome: %s (exit %d), issues: %s",
        outcome.value,
        exit_code,
        result.stats().to_dict(),
    )
    if not should_write(outcome):
        return exit_code

    write_output(result.clean_text, config.output_path)
    return exit_code


@click.command(
    name=APP_NAME,
    cls=EditmlCleanCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Strip EditML markup from INPUT (or stdin) and write the clean text.\n\n"
        "Exit status: 0 on success, 1 if an error was found, 2 if only warnings "
        "were found and --strict is set."
    ),
)
@click.argument("input_path", metavar="[INPUT]", required=False)
@click.option(
    "--version",
    is_flag=True,
    default=False,
    is_eager=True,
    expose_value=False,
    callback=print_version,
    help="Print version and exit.",
)
@click.option(
    "-o",
    "output_short",
    metavar="PATH",
    default=None,
    help="Write output to PATH instead of stdout (shorthand).",
)
@click.option(
    "--output",
    "output_long",
    metavar="PATH",
    default=None,
    help="Write output to PATH instead of stdout. Takes precedence over -o.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Emit parse/transform issues (warnings/errors) to stderr.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 2, without output, when warnings occurred.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    input_path: str | None,
    output_short: str | None,
    output_long: str | None,
    debug: bool,
    strict: bool,
) -> None:
    """Entry point for the editml-clean CLI.

    Args:
        ctx (click.Context): Current Click context; ``obj`` receives the console and config.
        input_path (str | None): Positional input path (``-`` or absent means stdin).
        output_short (str | None): Value of ``-o``.
        output_long (str | None): Value of ``--output``.
        debug (bool): Emit one stderr line per issue.
        strict (bool): Escalate warning-only runs to exit status 2.
    """
    setup_logging()
    console: ConsoleLike = init_console(ctx)

    config: RunConfig = RunConfig.from_cli(
        debug=debug,
        strict=strict,
        input_path=input_path,
        output_short=output_short,
        output_long=output_long,
    )
    ctx.obj["config"] = config
    logger.debug("config: %s", config)

    exit_code: ExitCode = process(config, console)
    if exit_code != ExitCode.SUCCESS:
        ctx.exit(exit_code)


if __name__ == "__main__":
    cli()
