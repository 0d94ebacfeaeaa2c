"""
Risk classification of plan operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List

from ..core.operations import Operation, OperationKind, Plan


class Classification(str, Enum):
    SAFE = "SAFE"
    NEEDS_DATA_MIGRATION = "NEEDS_DATA_MIGRATION"
    DESTRUCTIVE = "DESTRUCTIVE"

    def __str__(self) -> str:
        return self.value


CLASSIFICATIONS = MappingProxyType(
    {
        OperationKind.ADD_COLUMN: Classification.SAFE,
        OperationKind.RENAME_COLUMN: Classification.NEEDS_DATA_MIGRATION,
        OperationKind.DROP_COLUMN: Classification.DESTRUCTIVE,
        OperationKind.DROP_TABLE: Classification.DESTRUCTIVE,
        OperationKind.ADD_CONSTRAINT: Classification.NEEDS_DATA_MIGRATION,
    }
)


@dataclass(frozen=True)
class ClassifiedOperation:
    operation: Operation
    classification: Classification

    @property
    def destructive(self) -> bool:
        return self.classification is Classification.DESTRUCTIVE


def classify(operation: Operation) -> Classification:
    return CLASSIFICATIONS[operation.kind]


def classify_plan(plan: Plan) -> List[ClassifiedOperation]:
    """
    Pair every operation with its classification, keeping plan order.
    """

    return [ClassifiedOperation(operation, classify(operation)) for operation in plan]
