import os

import structlog
from fastapi import FastAPI

from itemservice.api.routes_forms import router as forms_router
from itemservice.api.routes_items import router as items_router
from itemservice.core.config import Settings, settings as default_settings
from itemservice.core.logging import configure_logging
from itemservice.services.item_service import ItemService
from itemservice.services.item_store import ItemStore
from itemservice.services.validation_service import get_update_validator, validate

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application with its own item store."""
    settings = settings or default_settings
    configure_logging(level=settings.log_level, log_json=settings.log_json)

    store = ItemStore()
    if settings.seed_sample_data:
        store.seed()

    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.state.settings = settings
    app.state.item_service = ItemService(
        store,
        save_validator=validate,
        update_validator=get_update_validator(settings.validate_fields_on_update),
    )

    # include routers
    app.include_router(items_router)
    app.include_router(forms_router)

    logger.info('app_created', app_name=settings.app_name, items=len(store.find_all()))
    return app


app = create_app()


if __name__ == '__main__':
    import uvicorn

    port = int(os.environ.get('PORT', 8000))
    uvicorn.run('itemservice.main:app', host='0.0.0.0', port=port, reload=default_settings.debug)
