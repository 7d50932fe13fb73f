"""CLI entry point for trycmd."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

import click

from trycmd import __version__, bootstrap
from trycmd.cases import TestCases
from trycmd.executors import executor_manager
from trycmd.reporting import JsonReporter, Reporter, TerminalReporter
from trycmd.suite import load_suite


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"trycmd {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the trycmd version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for trycmd."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option(
    "--suite",
    "suite_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="YAML suite file listing case patterns and defaults.",
)
@click.option("--executor", "executor_name", type=str, help="Registered executor to use (overrides the suite).")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option(
    "--report-path",
    type=str,
    default="trycmd-report.json",
    show_default=True,
    help="When --report json, write to this path.",
)
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.argument("filters", nargs=-1)
@click.pass_obj
def run(
    state: CliState,
    suite_path: str,
    executor_name: Optional[str],
    report_format: str,
    report_path: str,
    no_color: bool,
    filters: Tuple[str, ...],
) -> None:
    """Execute the cases of a suite file.

    FILTERS are ``trycmd=<substring>`` tokens restricting which tests run.
    """

    try:
        suite = load_suite(suite_path)
        name = executor_name or suite.executor
        executor = executor_manager.get(name) if name else None
        reporter: Reporter
        if report_format == "json":
            reporter = JsonReporter(path=report_path)
        else:
            reporter = TerminalReporter(use_color=not no_color)
        cases = suite.apply(TestCases(filters, executor=executor, reporter=reporter))
        report = cases.run()
    except KeyError as exc:
        raise click.ClickException(str(exc.args[0]) if exc.args else str(exc)) from exc
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    assert report is not None
    raise click.exceptions.Exit(0 if report.passed else 1)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="trycmd", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
