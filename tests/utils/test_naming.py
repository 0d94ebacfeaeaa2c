import pytest

from blazelint.utils import camel_to_snake, normalize_kind


def test_camel_to_snake():
    assert camel_to_snake("AddConstraint") == "add_constraint"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("add-column", "add-column"),
        ("add_column", "add-column"),
        ("AddColumn", "add-column"),
        ("ADD_COLUMN", "add-column"),
        ("add column", "add-column"),
        ("unknown-op", "unknown-op"),
    ],
)
def test_normalize_kind(raw, expected):
    assert normalize_kind(raw) == expected
