from fastapi import Request

from itemservice.services.item_service import ItemService


def get_item_service(request: Request) -> ItemService:
    """The service instance owned by the running application."""
    return request.app.state.item_service
