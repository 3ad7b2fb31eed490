"""Converts raw submitted values into an ItemForm."""

import re
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from itemservice.core.errors import MalformedInput
from itemservice.models.item import ItemForm, Violation

logger = structlog.get_logger(__name__)

NUMERIC_FIELDS = ('price', 'quantity')

_INTEGER_TEXT = re.compile(r'^\s*[+-]?\d+\s*$')


def _to_integer(value: Any) -> int | None:
    """Whole numbers only: no bools, floats, decimal points or underscores."""
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if not value.strip():
            return None
        if _INTEGER_TEXT.match(value):
            return int(value)
    raise ValueError(value)


def bind_item_form(data: Mapping[str, Any]) -> ItemForm:
    """
    Bind form or JSON data to an ItemForm.

    Blank numeric fields bind to None so the validation rules report them
    as missing. Values that cannot be converted raise MalformedInput with a
    `typeMismatch` violation per field, before any validation rule runs.
    """
    submitted = {key: data.get(key) for key in ItemForm.model_fields}
    raw = dict(submitted)
    mismatched: set[str] = set()

    for key in NUMERIC_FIELDS:
        if raw[key] is None:
            continue
        try:
            raw[key] = _to_integer(raw[key])
        except ValueError:
            mismatched.add(key)
            raw[key] = None

    try:
        form = ItemForm.model_validate(raw)
    except ValidationError as e:
        form = None
        mismatched.update(str(error['loc'][0]) for error in e.errors() if error['loc'])

    if mismatched:
        violations = [
            Violation(code='typeMismatch', field=key, rejected_value=submitted[key])
            for key in ItemForm.model_fields
            if key in mismatched
        ]
        logger.info('malformed_input', fields=[v.field for v in violations])
        raise MalformedInput(violations)

    return form
