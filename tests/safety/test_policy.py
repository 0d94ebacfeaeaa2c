import logging

from blazelint.core import Operation, OperationKind, Plan
from blazelint.safety import Verdict, classify_plan, evaluate, unconfirmed_operations


def _classified(*operations):
    return classify_plan(Plan(operations=tuple(operations)))


SAFE_ONLY = (Operation(OperationKind.ADD_COLUMN, "users", "email"),)
WITH_DROP = (
    Operation(OperationKind.ADD_COLUMN, "users", "email"),
    Operation(OperationKind.DROP_TABLE, "posts"),
)


def test_safe_plan_passes_regardless_of_backup():
    assert evaluate(_classified(*SAFE_ONLY), backup_confirmed=False) is Verdict.PASS
    assert evaluate(_classified(*SAFE_ONLY), backup_confirmed=True) is Verdict.PASS


def test_data_migration_operations_do_not_fail_the_plan():
    classified = _classified(
        Operation(OperationKind.RENAME_COLUMN, "users", "fullname"),
        Operation(OperationKind.ADD_CONSTRAINT, "users"),
    )
    assert evaluate(classified) is Verdict.PASS


def test_unconfirmed_destructive_operation_fails():
    classified = _classified(*WITH_DROP)
    assert evaluate(classified, backup_confirmed=False) is Verdict.FAIL
    pending = unconfirmed_operations(classified)
    assert [item.operation.kind for item in pending] == [OperationKind.DROP_TABLE]


def test_confirmed_destructive_operation_passes():
    classified = _classified(*WITH_DROP)
    assert evaluate(classified, backup_confirmed=True) is Verdict.PASS
    assert unconfirmed_operations(classified, backup_confirmed=True) == []


def test_empty_plan_passes():
    assert evaluate([]) is Verdict.PASS


def test_verdict_exit_codes():
    assert Verdict.PASS.exit_code == 0
    assert Verdict.FAIL.exit_code == 1


def test_destructive_operations_are_logged(caplog):
    caplog.set_level(logging.WARNING, logger="blazelint.safety.policy")
    evaluate(_classified(*WITH_DROP), backup_confirmed=True)
    messages = [record.getMessage() for record in caplog.records]
    assert any("Destructive operation detected: drop-table posts" in message for message in messages)
    assert not any("add-column" in message for message in messages)
