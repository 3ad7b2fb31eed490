import structlog

from itemservice.core.errors import ValidationFailed
from itemservice.models.item import Item, ItemForm
from itemservice.services.item_store import ItemStore
from itemservice.services.validation_service import Validator, ensure_valid, validate

logger = structlog.get_logger(__name__)


class ItemService:
    """
    Add / edit flow shared by the HTML and JSON routes.

    The validation strategy is injected, so one flow covers every way of
    checking an item: pass any callable that maps an ItemForm to a list of
    violations.
    """

    def __init__(self, store: ItemStore, save_validator: Validator = validate, update_validator: Validator = validate):
        self.store = store
        self.save_validator = save_validator
        self.update_validator = update_validator

    def list_items(self) -> list[Item]:
        return self.store.find_all()

    def get_item(self, item_id: int) -> Item:
        return self.store.find_by_id(item_id)

    def add_item(self, form: ItemForm) -> Item:
        """Validate and save a new item. Raises ValidationFailed on violations."""
        try:
            ensure_valid(form, self.save_validator)
        except ValidationFailed as e:
            logger.info('add_rejected', errors=[v.model_dump() for v in e.violations])
            raise

        return self.store.save(form)

    def edit_item(self, item_id: int, form: ItemForm) -> Item:
        """Validate and apply an edit. Raises ItemNotFound or ValidationFailed."""
        self.store.find_by_id(item_id)

        try:
            ensure_valid(form, self.update_validator)
        except ValidationFailed as e:
            logger.info('edit_rejected', item_id=item_id, errors=[v.model_dump() for v in e.violations])
            raise

        return self.store.update(item_id, form)
