"""
Core data model for migration plans.
"""

from .operations import Operation, OperationKind, Plan

__all__ = ["Operation", "OperationKind", "Plan"]
