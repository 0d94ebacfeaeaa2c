"""
Utility helpers for running the release gate example end-to-end.

A release is a sequence of migration plans. Each plan is linted first in
staging, where restoring from a snapshot is routine, and then for production,
where the operator must acknowledge a verified backup before anything
destructive is allowed through.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

from blazelint import ParseError, Report, Verdict, build_report, parse_file

PLAN_DIR = Path(__file__).parent / "plans"


def lint_bundled_plan(name: str, *, backup_confirmed: bool = False) -> Report:
    """
    Parse and classify one of the bundled plan files.
    """

    return build_report(parse_file(PLAN_DIR / name), backup_confirmed=backup_confirmed)


def gate_release(names: Iterable[str], *, backup_confirmed: bool = False) -> Dict[str, str]:
    """
    Lint every plan of a release and map each plan to its verdict.

    Plans that cannot be parsed are reported as ``ERROR`` rather than stopping
    the remaining checks.
    """

    verdicts: Dict[str, str] = {}
    for name in names:
        try:
            report = lint_bundled_plan(name, backup_confirmed=backup_confirmed)
        except ParseError:
            verdicts[name] = "ERROR"
            continue
        verdicts[name] = report.verdict.value
    return verdicts


def bundled_plans() -> List[str]:
    return sorted(path.name for path in PLAN_DIR.iterdir() if path.suffix in (".csv", ".json"))


def run_demo() -> Dict[str, Dict[str, str]]:
    """
    Gate every bundled plan without and then with a backup acknowledgment.
    """

    names = bundled_plans()
    return {
        "unconfirmed": gate_release(names),
        "confirmed": gate_release(names, backup_confirmed=True),
    }


def releasable(verdicts: Dict[str, str]) -> bool:
    return all(verdict == Verdict.PASS.value for verdict in verdicts.values())
