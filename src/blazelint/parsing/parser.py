"""
Plan parser turning operation records into an ordered :class:`Plan`.

Two input shapes are understood:

* line-oriented text, one ``kind,entity[,field]`` record per line, with
  blank lines and ``#`` comments ignored and an optional
  ``kind,entity,field`` header;
* JSON, either an array of ``{"kind", "entity", "field"}`` objects or an
  object holding such an array under ``"operations"``.

Every invalid record is collected before a single :class:`ParseError` is
raised, so an operator sees all problems of a plan at once.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..core.operations import Operation, OperationKind, Plan
from ..errors import ParseError
from ..utils import get_logger, normalize_kind
from .validators import validate_entity, validate_field

logger = get_logger("parsing")

STDIN_PATH = "-"

_ALLOWED_KEYS = frozenset({"kind", "entity", "field"})
_KINDS = {kind.value: kind for kind in OperationKind}
_EXPECTED_KINDS = ", ".join(kind.value for kind in OperationKind)
_HEADER = ("kind", "entity", "field")


def parse_records(records: Iterable[Any], *, source: Optional[str] = None) -> Plan:
    """
    Build a plan from mapping records, numbering them from 1.
    """

    operations: List[Operation] = []
    errors: Dict[str, List[str]] = {}
    for position, record in enumerate(records, start=1):
        messages: List[str] = []
        operation = _build_operation(record, position, messages)
        if messages:
            errors[f"record {position}"] = messages
        elif operation is not None:
            operations.append(operation)
    return _finish(operations, errors, source)


def parse_lines(lines: Iterable[str], *, source: Optional[str] = None) -> Plan:
    operations: List[Operation] = []
    errors: Dict[str, List[str]] = {}
    seen_record = False
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        columns = [column.strip() for column in line.split(",")]
        if not seen_record and tuple(c.lower() for c in columns) == _HEADER:
            seen_record = True
            continue
        seen_record = True
        location = f"line {lineno}"
        if len(columns) > len(_HEADER):
            errors[location] = [
                f"Expected at most {len(_HEADER)} columns (kind,entity,field), got {len(columns)}."
            ]
            continue
        record = dict(zip(_HEADER, columns))
        messages: List[str] = []
        operation = _build_operation(record, lineno, messages)
        if messages:
            errors[location] = messages
        elif operation is not None:
            operations.append(operation)
    return _finish(operations, errors, source)


def parse_json(text: str, *, source: Optional[str] = None) -> Plan:
    location = source or "json"
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError.single(
            location, f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})."
        ) from exc

    if isinstance(payload, Mapping):
        payload = payload.get("operations")
    if not isinstance(payload, list):
        raise ParseError.single(
            location, "Expected a JSON array of operations or an object with an 'operations' array."
        )
    return parse_records(payload, source=source)


def parse_file(path: str | Path) -> Plan:
    """
    Read a plan from ``path``; ``-`` reads standard input.
    """

    if str(path) == STDIN_PATH:
        source = "<stdin>"
        text = sys.stdin.read()
        as_json = text.lstrip()[:1] in ("[", "{")
    else:
        path = Path(path)
        source = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            raise ParseError.single(source, f"Cannot read plan: {reason}.") from exc
        as_json = path.suffix.lower() == ".json"

    logger.debug("Parsing plan from %s (%s)", source, "json" if as_json else "lines")
    if as_json:
        return parse_json(text, source=source)
    return parse_lines(text.splitlines(), source=source)


def _finish(operations: List[Operation], errors: Dict[str, List[str]], source: Optional[str]) -> Plan:
    if errors:
        logger.debug("Rejected plan %s with %s invalid record(s)", source, len(errors))
        raise ParseError(errors)
    return Plan(operations=tuple(operations), source=source)


def _build_operation(record: Any, position: int, messages: List[str]) -> Optional[Operation]:
    if not isinstance(record, Mapping):
        messages.append("Record must be an object with 'kind' and 'entity'.")
        return None

    unknown = sorted(str(key) for key in record if key not in _ALLOWED_KEYS)
    if unknown:
        messages.append(f"Unknown key(s): {', '.join(unknown)}.")

    kind_text = _text(record, "kind", messages)
    entity = _text(record, "entity", messages)
    field = _text(record, "field", messages)

    kind = None
    if kind_text is not None:
        kind = _resolve_kind(kind_text, messages)
    elif _is_blank(record.get("kind")):
        messages.append("Missing required 'kind'.")

    if entity is not None:
        _run(validate_entity, entity, messages)
    elif _is_blank(record.get("entity")):
        messages.append("Missing required 'entity'.")

    if field is not None:
        _run(validate_field, field, messages)

    if kind is not None:
        rule = kind.field_rule
        if rule == "required" and field is None:
            messages.append(f"'{kind.value}' requires a 'field'.")
        elif rule == "forbidden" and field is not None:
            messages.append(f"'{kind.value}' does not take a 'field'.")

    if messages or kind is None or entity is None:
        return None
    return Operation(kind=kind, entity=entity, field=field, position=position)


def _resolve_kind(raw: str, messages: List[str]) -> Optional[OperationKind]:
    kind = _KINDS.get(normalize_kind(raw))
    if kind is None:
        messages.append(f"Unknown operation kind {raw!r}; expected one of: {_EXPECTED_KINDS}.")
    return kind


def _text(record: Mapping[str, Any], key: str, messages: List[str]) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        messages.append(f"'{key}' must be a string.")
        return None
    return value.strip() or None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _run(validator, value: str, messages: List[str]) -> None:
    try:
        validator(value)
    except ValueError as exc:
        messages.append(str(exc))
