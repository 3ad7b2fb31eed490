"""
Item validation rules.

Field rules live in a table (field -> rules) and object rules in a list; a
single runner evaluates both and returns the violations in rule order. An
empty list means the payload is valid.
"""

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable

from itemservice.core.errors import ValidationFailed
from itemservice.models.item import ItemForm, Violation

PRICE_MIN = 1000
PRICE_MAX = 1_000_000
QUANTITY_MAX = 9999
TOTAL_PRICE_MIN = 10000

Validator = Callable[[ItemForm], list[Violation]]


@dataclass(frozen=True)
class FieldRule:
    """Rejects a field value when `rejects` returns True"""

    code: str
    rejects: Callable[[Any], bool]
    arguments: tuple[Any, ...] = ()


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _out_of_price_range(value: int | None) -> bool:
    return value is None or value < PRICE_MIN or value > PRICE_MAX


def _over_quantity_max(value: int | None) -> bool:
    return value is None or value >= QUANTITY_MAX


def check_total_price(payload: ItemForm) -> Violation | None:
    """Price times quantity must reach TOTAL_PRICE_MIN when both are given."""
    if payload.price is None or payload.quantity is None:
        return None

    # python ints do not overflow, so the product is exact for any bounds
    total = payload.price * payload.quantity
    if total < TOTAL_PRICE_MIN:
        return Violation(code='totalPriceMin', arguments=(TOTAL_PRICE_MIN, total))
    return None


FIELD_RULES: dict[str, list[FieldRule]] = {
    'name': [FieldRule('required', _is_blank)],
    'price': [FieldRule('range', _out_of_price_range, (PRICE_MIN, PRICE_MAX))],
    'quantity': [FieldRule('max', _over_quantity_max, (QUANTITY_MAX,))],
}

OBJECT_RULES: list[Callable[[ItemForm], Violation | None]] = [check_total_price]


def validate(payload: ItemForm, *, validate_name_and_price_and_quantity: bool = True) -> list[Violation]:
    """
    Evaluate all item rules against a payload.

    Args:
        payload: Submitted item fields (an ItemForm or a stored Item)
        validate_name_and_price_and_quantity: When False only the object
            rules run; this is the relaxed variant used for edits.

    Returns:
        Field violations in table order followed by object violations
    """
    violations: list[Violation] = []

    if validate_name_and_price_and_quantity:
        for field_name, rules in FIELD_RULES.items():
            value = getattr(payload, field_name, None)
            for rule in rules:
                if rule.rejects(value):
                    violations.append(
                        Violation(code=rule.code, field=field_name, arguments=rule.arguments, rejected_value=value)
                    )

    for object_rule in OBJECT_RULES:
        violation = object_rule(payload)
        if violation is not None:
            violations.append(violation)

    return violations


def ensure_valid(payload: ItemForm, validator: Validator = validate) -> None:
    """Raise ValidationFailed when the validator reports any violation."""
    violations = validator(payload)
    if violations:
        raise ValidationFailed(violations)


def get_update_validator(validate_fields: bool) -> Validator:
    """Validator used for edits, honouring the validate_fields_on_update setting."""
    return partial(validate, validate_name_and_price_and_quantity=validate_fields)
