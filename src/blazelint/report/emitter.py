"""
Report building and rendering for classified plans.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TextIO, Tuple

from ..core.operations import Plan
from ..safety import Classification, ClassifiedOperation, Verdict, classify_plan, evaluate
from ..utils import get_logger

FORMATS = ("text", "json")

UNCONFIRMED_SUFFIX = "  (backup not confirmed)"


@dataclass(frozen=True)
class Report:
    operations: Tuple[ClassifiedOperation, ...]
    backup_confirmed: bool
    verdict: Verdict
    source: Optional[str] = None

    @property
    def exit_code(self) -> int:
        return self.verdict.exit_code

    def counts(self) -> Dict[Classification, int]:
        totals = {classification: 0 for classification in Classification}
        for item in self.operations:
            totals[item.classification] += 1
        return totals

    def lines(self) -> List[str]:
        rendered = [self._render_operation(item) for item in self.operations]
        counts = self.counts()
        summary = ", ".join(
            f"{counts[classification]} {classification.value.lower().replace('_', '-')}"
            for classification in Classification
        )
        rendered.append(f"Summary: {len(self.operations)} operation(s): {summary}")
        rendered.append(f"Verdict: {self.verdict.value}")
        return rendered

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "backup_confirmed": self.backup_confirmed,
            "operations": [
                {
                    "kind": item.operation.kind.value,
                    "entity": item.operation.entity,
                    "field": item.operation.field,
                    "classification": item.classification.value,
                    "confirmed": self.backup_confirmed or not item.destructive,
                }
                for item in self.operations
            ],
            "summary": {classification.value: total for classification, total in self.counts().items()},
            "verdict": self.verdict.value,
        }

    def _render_operation(self, item: ClassifiedOperation) -> str:
        line = f"[{item.classification.value}] {item.operation.describe()}"
        if item.destructive and not self.backup_confirmed:
            line += UNCONFIRMED_SUFFIX
        return line


def build_report(plan: Plan, *, backup_confirmed: bool = False) -> Report:
    classified = tuple(classify_plan(plan))
    verdict = evaluate(classified, backup_confirmed=backup_confirmed)
    return Report(
        operations=classified,
        backup_confirmed=backup_confirmed,
        verdict=verdict,
        source=plan.source,
    )


class ReportEmitter:
    """
    Writes reports to a text sink and hands back the process exit code.
    """

    def __init__(self, sink: TextIO | None = None, *, fmt: str = "text") -> None:
        if fmt not in FORMATS:
            raise ValueError(f"Unknown report format {fmt!r}; expected one of: {', '.join(FORMATS)}")
        self.sink = sink
        self.fmt = fmt
        self.logger = get_logger("report")

    def render(self, report: Report) -> str:
        if self.fmt == "json":
            return json.dumps(report.to_dict(), indent=2) + "\n"
        return "\n".join(report.lines()) + "\n"

    def emit(self, report: Report) -> int:
        sink = self.sink if self.sink is not None else sys.stdout
        sink.write(self.render(report))
        sink.flush()
        self.logger.info(
            "Plan %s: verdict %s (%s operation(s), backup_confirmed=%s)",
            report.source or "<memory>",
            report.verdict.value,
            len(report.operations),
            report.backup_confirmed,
        )
        return report.exit_code
