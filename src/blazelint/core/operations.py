"""
Operation and plan types describing a proposed migration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


class OperationKind(str, Enum):
    """
    Schema change kinds understood by the linter.
    """

    ADD_COLUMN = "add-column"
    DROP_COLUMN = "drop-column"
    DROP_TABLE = "drop-table"
    RENAME_COLUMN = "rename-column"
    ADD_CONSTRAINT = "add-constraint"

    @property
    def field_rule(self) -> str:
        """
        One of ``required``, ``optional`` or ``forbidden`` for the field slot.
        """

        return _FIELD_RULES[self]

    def __str__(self) -> str:
        return self.value


_FIELD_RULES = {
    OperationKind.ADD_COLUMN: "required",
    OperationKind.DROP_COLUMN: "required",
    OperationKind.RENAME_COLUMN: "required",
    OperationKind.DROP_TABLE: "forbidden",
    OperationKind.ADD_CONSTRAINT: "optional",
}


@dataclass(frozen=True)
class Operation:
    kind: OperationKind
    entity: str
    field: Optional[str] = None
    position: Optional[int] = None

    @property
    def target(self) -> str:
        if self.field:
            return f"{self.entity}.{self.field}"
        return self.entity

    def describe(self) -> str:
        return f"{self.kind.value} {self.target}"


@dataclass(frozen=True)
class Plan:
    """
    Ordered sequence of operations forming one migration unit.
    """

    operations: Tuple[Operation, ...] = ()
    source: Optional[str] = None

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)
