from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from itemservice.api.dependencies import get_item_service
from itemservice.core.errors import ItemNotFound, MalformedInput, ValidationFailed
from itemservice.models.item import Item
from itemservice.services.binding import bind_item_form
from itemservice.services.item_service import ItemService
from itemservice.services.messages import message_source

router = APIRouter(prefix='/api', tags=['items'])


@router.get('/healthz')
async def health_check():
    """Health check endpoint."""
    return 'ok'


@router.get('/items', response_model=list[Item])
def list_items(service: ItemService = Depends(get_item_service)):
    return service.list_items()


@router.get('/items/{item_id}', response_model=Item)
def get_item(item_id: int, service: ItemService = Depends(get_item_service)):
    try:
        return service.get_item(item_id)
    except ItemNotFound:
        raise HTTPException(status_code=404, detail='Item not found')


@router.post('/items', response_model=Item, status_code=status.HTTP_201_CREATED)
def create_item(payload: dict[str, Any] = Body(...), service: ItemService = Depends(get_item_service)):
    """
    Create an item.

    Raises:
        HTTPException: 400 if a value cannot be converted (typeMismatch)
        HTTPException: 422 if the item breaks a validation rule
    """
    try:
        form = bind_item_form(payload)
        return service.add_item(form)
    except MalformedInput as e:
        raise HTTPException(status_code=400, detail={'violations': message_source.describe(e.violations)})
    except ValidationFailed as e:
        raise HTTPException(status_code=422, detail={'violations': message_source.describe(e.violations)})


@router.put('/items/{item_id}', response_model=Item)
def update_item(item_id: int, payload: dict[str, Any] = Body(...), service: ItemService = Depends(get_item_service)):
    """
    Replace name, price and quantity of an item.

    Raises:
        HTTPException: 400 if a value cannot be converted (typeMismatch)
        HTTPException: 404 if the item does not exist
        HTTPException: 422 if the item breaks a validation rule
    """
    try:
        form = bind_item_form(payload)
        return service.edit_item(item_id, form)
    except ItemNotFound:
        raise HTTPException(status_code=404, detail='Item not found')
    except MalformedInput as e:
        raise HTTPException(status_code=400, detail={'violations': message_source.describe(e.violations)})
    except ValidationFailed as e:
        raise HTTPException(status_code=422, detail={'violations': message_source.describe(e.violations)})
