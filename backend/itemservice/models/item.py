from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ItemForm(BaseModel):
    """Payload submitted by the add and edit forms"""

    name: str | None = Field(None, description='Display name of the item')
    price: int | None = Field(None, description='Unit price')
    quantity: int | None = Field(None, description='Units in stock')

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'TV',
                'price': 100000,
                'quantity': 10,
            }
        }
    )


class Item(ItemForm):
    """Stored item; the id is assigned by the store"""

    id: int


class Violation(BaseModel):
    """One failed rule, scoped to a field or (field=None) to the whole item"""

    model_config = ConfigDict(frozen=True)

    code: str
    field: str | None = None
    arguments: tuple[Any, ...] = ()
    rejected_value: Any = None

    @property
    def is_global(self) -> bool:
        return self.field is None
