"""
Validators applied to parsed record values.
"""

from __future__ import annotations

import re
from typing import Any


class RegexValidator:
    def __init__(self, pattern: str, message: str | None = None) -> None:
        self.pattern = re.compile(pattern)
        self.message = message or "Value does not match required pattern."

    def __call__(self, value: Any) -> None:
        if value is None:
            return
        if not isinstance(value, str):
            raise ValueError("Value must be a string.")
        if not self.pattern.fullmatch(value):
            raise ValueError(self.message)


_IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_$]*"

validate_entity = RegexValidator(
    rf"{_IDENTIFIER}(\.{_IDENTIFIER})*",
    "Entity must be an identifier, optionally schema-qualified (e.g. 'public.users').",
)

validate_field = RegexValidator(_IDENTIFIER, "Field must be a plain identifier.")
