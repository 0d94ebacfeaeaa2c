"""
blazelint public package initialization.

Exposes the plan model, parser, classifier and report APIs used by the
``blazelint`` command.
"""

from .core import Operation, OperationKind, Plan  # noqa: F401
from .errors import BlazeLintError, ConfigurationError, ParseError  # noqa: F401
from .parsing import parse_file, parse_json, parse_lines, parse_records  # noqa: F401
from .report import Report, ReportEmitter, build_report  # noqa: F401
from .safety import Classification, ClassifiedOperation, Verdict, classify, classify_plan  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Operation",
    "OperationKind",
    "Plan",
    "BlazeLintError",
    "ConfigurationError",
    "ParseError",
    "parse_file",
    "parse_json",
    "parse_lines",
    "parse_records",
    "Classification",
    "ClassifiedOperation",
    "Verdict",
    "classify",
    "classify_plan",
    "Report",
    "ReportEmitter",
    "build_report",
]
