"""Errors raised by the item service core.

Routes catch these and turn them into template responses or HTTP errors.
"""

from itemservice.models.item import Violation


class ItemServiceError(Exception):
    """Base class for all item service errors."""


class ValidationFailed(ItemServiceError):
    """A submitted payload broke one or more validation rules."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        super().__init__(f'{len(self.violations)} validation violation(s)')


class ItemNotFound(ItemServiceError):
    """No item is stored under the requested id."""

    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f'Item {item_id} not found')


class MalformedInput(ItemServiceError):
    """A submitted value could not be converted to the field's type."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        fields = ', '.join(v.field or '?' for v in self.violations)
        super().__init__(f'Malformed input for: {fields}')
