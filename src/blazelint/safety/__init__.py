"""Risk classification and verdict rules."""

from .classifier import CLASSIFICATIONS, Classification, ClassifiedOperation, classify, classify_plan
from .policy import Verdict, evaluate, unconfirmed_operations

__all__ = [
    "CLASSIFICATIONS",
    "Classification",
    "ClassifiedOperation",
    "Verdict",
    "classify",
    "classify_plan",
    "evaluate",
    "unconfirmed_operations",
]
