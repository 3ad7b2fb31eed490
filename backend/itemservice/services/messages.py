"""
Turns violation codes into display messages.

Codes are resolved from most to least specific, so a message can be
tailored per field while generic codes still render something useful:

    field violation:   required.item.name -> required.name -> required
    object violation:  totalPriceMin.item -> totalPriceMin
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from itemservice.models.item import Violation

OBJECT_NAME = 'item'

DEFAULT_MESSAGES: dict[str, str] = {
    'required.item.name': 'Item name is required.',
    'range.item.price': 'Price must be between {0} and {1}.',
    'max.item.quantity': 'Quantity must be at most {0}.',
    'totalPriceMin': 'Price * quantity must be at least {0}. Current value = {1}.',
    'typeMismatch.item.name': 'Please enter text.',
    'typeMismatch': 'Please enter a whole number.',
    'required': 'This field is required.',
    'range': 'Must be between {0} and {1}.',
    'max': 'Must be at most {0}.',
}

_PLACEHOLDER = re.compile(r'\{(\d+)\}')


def _format_argument(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return f'{value:,}'
    return str(value)


class MessageSource:
    """Message lookup over a code -> template table."""

    def __init__(self, messages: Mapping[str, str] | None = None, object_name: str = OBJECT_NAME):
        self.messages = dict(DEFAULT_MESSAGES if messages is None else messages)
        self.object_name = object_name

    def resolve_codes(self, violation: Violation) -> list[str]:
        if violation.field is None:
            return [f'{violation.code}.{self.object_name}', violation.code]
        return [
            f'{violation.code}.{self.object_name}.{violation.field}',
            f'{violation.code}.{violation.field}',
            violation.code,
        ]

    def get_message(self, violation: Violation) -> str:
        template = next((self.messages[c] for c in self.resolve_codes(violation) if c in self.messages), violation.code)

        def substitute(match: re.Match) -> str:
            index = int(match.group(1))
            if index >= len(violation.arguments):
                return match.group(0)
            return _format_argument(violation.arguments[index])

        return _PLACEHOLDER.sub(substitute, template)

    def describe(self, violations: Iterable[Violation]) -> list[dict[str, Any]]:
        """Serializable form of violations, with their rendered messages."""
        return [
            {
                'code': v.code,
                'field': v.field,
                'arguments': list(v.arguments),
                'rejected_value': v.rejected_value,
                'message': self.get_message(v),
            }
            for v in violations
        ]

    def field_errors(self, violations: Iterable[Violation]) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for v in violations:
            if v.field is not None:
                errors.setdefault(v.field, []).append(self.get_message(v))
        return errors

    def global_errors(self, violations: Iterable[Violation]) -> list[str]:
        return [self.get_message(v) for v in violations if v.field is None]


message_source = MessageSource()
