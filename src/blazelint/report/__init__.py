"""
Human-readable and JSON report output.
"""

from .emitter import FORMATS, Report, ReportEmitter, build_report

__all__ = ["FORMATS", "Report", "ReportEmitter", "build_report"]
