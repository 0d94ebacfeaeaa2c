from examples.release_gate import bundled_plans, gate_release, lint_bundled_plan, releasable, run_demo


def test_bundled_plans_are_discovered():
    assert bundled_plans() == [
        "0001_add_user_email.csv",
        "0002_rename_and_constrain.csv",
        "0003_retire_posts.json",
        "0004_broken.csv",
    ]


def test_lint_bundled_destructive_plan():
    report = lint_bundled_plan("0003_retire_posts.json")
    assert report.verdict.value == "FAIL"
    assert [item.operation.describe() for item in report.operations] == [
        "drop-column users.age",
        "drop-table posts",
    ]


def test_gate_release_with_and_without_backup():
    names = ["0001_add_user_email.csv", "0002_rename_and_constrain.csv", "0003_retire_posts.json"]
    unconfirmed = gate_release(names)
    confirmed = gate_release(names, backup_confirmed=True)
    assert unconfirmed == {
        "0001_add_user_email.csv": "PASS",
        "0002_rename_and_constrain.csv": "PASS",
        "0003_retire_posts.json": "FAIL",
    }
    assert not releasable(unconfirmed)
    assert releasable(confirmed)


def test_run_demo_marks_broken_plan_as_error():
    results = run_demo()
    assert results["unconfirmed"]["0004_broken.csv"] == "ERROR"
    assert results["confirmed"]["0004_broken.csv"] == "ERROR"
    assert results["confirmed"]["0003_retire_posts.json"] == "PASS"
