import pytest

from blazelint.core import Operation, OperationKind, Plan
from blazelint.safety import CLASSIFICATIONS, Classification, classify, classify_plan

EXPECTED = {
    OperationKind.ADD_COLUMN: Classification.SAFE,
    OperationKind.RENAME_COLUMN: Classification.NEEDS_DATA_MIGRATION,
    OperationKind.DROP_COLUMN: Classification.DESTRUCTIVE,
    OperationKind.DROP_TABLE: Classification.DESTRUCTIVE,
    OperationKind.ADD_CONSTRAINT: Classification.NEEDS_DATA_MIGRATION,
}


@pytest.mark.parametrize("kind", list(OperationKind))
def test_every_kind_has_exactly_one_classification(kind):
    op = Operation(kind, "users", "email")
    assert classify(op) is EXPECTED[kind]
    assert classify(op) is classify(op)


def test_classification_ignores_entity_and_field():
    first = Operation(OperationKind.DROP_COLUMN, "users", "age", position=1)
    second = Operation(OperationKind.DROP_COLUMN, "orders", "total", position=9)
    assert classify(first) is classify(second) is Classification.DESTRUCTIVE


def test_lookup_table_is_read_only():
    assert dict(CLASSIFICATIONS) == EXPECTED
    with pytest.raises(TypeError):
        CLASSIFICATIONS[OperationKind.DROP_TABLE] = Classification.SAFE


def test_classify_plan_preserves_order():
    plan = Plan(
        operations=(
            Operation(OperationKind.DROP_TABLE, "posts"),
            Operation(OperationKind.ADD_COLUMN, "users", "email"),
            Operation(OperationKind.RENAME_COLUMN, "users", "fullname"),
        )
    )
    classified = classify_plan(plan)
    assert [item.operation for item in classified] == list(plan)
    assert [item.classification for item in classified] == [
        Classification.DESTRUCTIVE,
        Classification.SAFE,
        Classification.NEEDS_DATA_MIGRATION,
    ]
    assert [item.destructive for item in classified] == [True, False, False]
