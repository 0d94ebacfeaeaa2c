"""
Command-line entry point: ``blazelint PLAN [--backup-confirmed]``.

Exit codes: 0 when the plan passes, 1 when destructive operations lack a
backup acknowledgment, 2 when the plan or configuration cannot be read
or the report cannot be written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .config import LintConfig
from .errors import ConfigurationError, ParseError
from .parsing import parse_file
from .report import ReportEmitter, build_report
from .utils import get_logger, set_log_level, time_call
from .utils.logging import set_correlation_id

EXIT_ERROR = 2

logger = get_logger("cli")

app = typer.Typer(
    name="blazelint",
    help="Check a migration plan for destructive operations before it reaches production.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError, version as pkg_version

        try:
            v = pkg_version("blazelint")
        except PackageNotFoundError:
            from . import __version__ as v
        typer.echo(f"blazelint {v}")
        raise typer.Exit()


@app.command()
def check(
    plan: str = typer.Argument(
        ..., help="Plan file with 'kind,entity,field' lines or a JSON array; '-' reads stdin."
    ),
    backup_confirmed: Optional[bool] = typer.Option(
        None,
        "--backup-confirmed/--no-backup-confirmed",
        help="Acknowledge (or revoke) that a verified backup exists; overrides BLAZELINT_BACKUP_CONFIRMED.",
    ),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Report format: text or json."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the report to this file instead of stdout."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Classify every operation in PLAN and report a PASS or FAIL verdict."""

    set_correlation_id()
    try:
        config = LintConfig.from_env().with_overrides(
            backup_confirmed=backup_confirmed, fmt=fmt, verbose=verbose
        )
    except ConfigurationError as exc:
        typer.echo(f"blazelint: configuration error: {exc}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from exc
    set_log_level(config.log_level)

    try:
        parsed = parse_file(plan)
    except ParseError as exc:
        typer.echo(f"blazelint: cannot parse plan {plan}", err=True)
        for line in exc.lines():
            typer.echo(f"  {line}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from exc

    with time_call("lint", logger, source=plan):
        report = build_report(parsed, backup_confirmed=config.backup_confirmed)
        if output is not None:
            try:
                with output.open("w", encoding="utf-8") as sink:
                    code = ReportEmitter(sink, fmt=config.fmt).emit(report)
            except OSError as exc:
                reason = exc.strerror or str(exc)
                typer.echo(f"blazelint: cannot write report {output}: {reason}", err=True)
                raise typer.Exit(code=EXIT_ERROR) from exc
        else:
            code = ReportEmitter(fmt=config.fmt).emit(report)

    raise typer.Exit(code=code)


def main() -> None:
    app()
