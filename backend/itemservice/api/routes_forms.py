"""HTML views: item list, detail, and the add / edit forms."""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from itemservice.api.dependencies import get_item_service
from itemservice.core.errors import ItemNotFound, MalformedInput, ValidationFailed
from itemservice.models.item import Item, Violation
from itemservice.services.binding import bind_item_form
from itemservice.services.item_service import ItemService
from itemservice.services.messages import message_source

router = APIRouter(prefix='/validation/items', tags=['forms'])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / 'templates'))


def _item_values(item: Item | None = None) -> dict[str, Any]:
    if item is None:
        return {'name': '', 'price': '', 'quantity': ''}
    return {'name': item.name or '', 'price': item.price, 'quantity': item.quantity}


def _render_form(
    request: Request,
    template: str,
    values: dict[str, Any],
    violations: list[Violation] | None = None,
    item_id: int | None = None,
) -> HTMLResponse:
    violations = violations or []
    return templates.TemplateResponse(
        request,
        template,
        {
            'item_id': item_id,
            'values': values,
            'field_errors': message_source.field_errors(violations),
            'global_errors': message_source.global_errors(violations),
        },
    )


def _not_found(request: Request, item_id: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request, 'not_found.html', {'item_id': item_id}, status_code=status.HTTP_404_NOT_FOUND
    )


async def _submitted_values(request: Request) -> dict[str, Any]:
    form_data = await request.form()
    return {key: form_data.get(key) for key in ('name', 'price', 'quantity')}


@router.get('', response_class=HTMLResponse, name='item_list')
def items(request: Request, service: ItemService = Depends(get_item_service)):
    return templates.TemplateResponse(request, 'items.html', {'items': service.list_items()})


@router.get('/add', response_class=HTMLResponse, name='add_form')
def add_form(request: Request):
    return _render_form(request, 'add_form.html', _item_values())


@router.post('/add', response_class=HTMLResponse, name='add_item')
async def add_item(request: Request, service: ItemService = Depends(get_item_service)):
    """Save a new item, or redisplay the form with its violations."""
    values = await _submitted_values(request)

    try:
        form = bind_item_form(values)
        saved = service.add_item(form)
    except (MalformedInput, ValidationFailed) as e:
        return _render_form(request, 'add_form.html', values, e.violations)

    url = request.url_for('item_detail', item_id=saved.id).include_query_params(status='true')
    return RedirectResponse(url=str(url), status_code=status.HTTP_303_SEE_OTHER)


@router.get('/{item_id:int}', response_class=HTMLResponse, name='item_detail')
def item(request: Request, item_id: int, service: ItemService = Depends(get_item_service)):
    try:
        found = service.get_item(item_id)
    except ItemNotFound:
        return _not_found(request, item_id)

    saved = request.query_params.get('status') == 'true'
    return templates.TemplateResponse(request, 'item.html', {'item': found, 'saved': saved})


@router.get('/{item_id:int}/edit', response_class=HTMLResponse, name='edit_form')
def edit_form(request: Request, item_id: int, service: ItemService = Depends(get_item_service)):
    try:
        found = service.get_item(item_id)
    except ItemNotFound:
        return _not_found(request, item_id)

    return _render_form(request, 'edit_form.html', _item_values(found), item_id=item_id)


@router.post('/{item_id:int}/edit', response_class=HTMLResponse, name='edit_item')
async def edit(request: Request, item_id: int, service: ItemService = Depends(get_item_service)):
    """Apply an edit, or redisplay the form with its violations."""
    values = await _submitted_values(request)

    try:
        form = bind_item_form(values)
        service.edit_item(item_id, form)
    except ItemNotFound:
        return _not_found(request, item_id)
    except (MalformedInput, ValidationFailed) as e:
        return _render_form(request, 'edit_form.html', values, e.violations, item_id=item_id)

    url = request.url_for('item_detail', item_id=item_id)
    return RedirectResponse(url=str(url), status_code=status.HTTP_303_SEE_OTHER)
