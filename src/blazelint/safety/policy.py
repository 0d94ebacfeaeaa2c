"""Backup acknowledgment rules for destructive operations."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List

from ..utils import get_logger
from .classifier import ClassifiedOperation

logger = get_logger("safety.policy")


class Verdict(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"

    @property
    def exit_code(self) -> int:
        return 0 if self is Verdict.PASS else 1

    def __str__(self) -> str:
        return self.value


def unconfirmed_operations(
    classified: Iterable[ClassifiedOperation], *, backup_confirmed: bool = False
) -> List[ClassifiedOperation]:
    """
    Destructive operations still lacking a backup acknowledgment.
    """

    if backup_confirmed:
        return []
    return [item for item in classified if item.destructive]


def evaluate(classified: Iterable[ClassifiedOperation], *, backup_confirmed: bool = False) -> Verdict:
    items = list(classified)
    for item in items:
        if item.destructive:
            logger.warning(
                "Destructive operation detected: %s (backup_confirmed=%s)",
                item.operation.describe(),
                backup_confirmed,
            )
    if unconfirmed_operations(items, backup_confirmed=backup_confirmed):
        return Verdict.FAIL
    return Verdict.PASS
