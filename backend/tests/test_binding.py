"""
Tests for binding raw submitted values to an ItemForm
"""

import pytest

from itemservice.core.errors import MalformedInput
from itemservice.models.item import ItemForm
from itemservice.services.binding import bind_item_form


def test_form_strings_are_converted():
    form = bind_item_form({'name': 'TV', 'price': '100000', 'quantity': '10'})
    assert form == ItemForm(name='TV', price=100000, quantity=10)


def test_json_values_are_kept():
    form = bind_item_form({'name': 'TV', 'price': 100000, 'quantity': 10})
    assert form == ItemForm(name='TV', price=100000, quantity=10)


@pytest.mark.parametrize('blank', ['', '   '])
def test_blank_numbers_bind_to_none(blank):
    form = bind_item_form({'name': 'TV', 'price': blank, 'quantity': blank})
    assert form.price is None
    assert form.quantity is None


def test_missing_fields_bind_to_none():
    assert bind_item_form({}) == ItemForm()


def test_unknown_keys_are_ignored():
    form = bind_item_form({'name': 'TV', 'price': '1000', 'quantity': '10', 'id': 'abc'})
    assert form == ItemForm(name='TV', price=1000, quantity=10)


def test_non_numeric_price_is_malformed():
    with pytest.raises(MalformedInput) as exc_info:
        bind_item_form({'name': 'TV', 'price': 'abc', 'quantity': '10'})

    violations = exc_info.value.violations
    assert len(violations) == 1
    assert violations[0].code == 'typeMismatch'
    assert violations[0].field == 'price'
    assert violations[0].rejected_value == 'abc'


def test_every_malformed_field_is_reported():
    with pytest.raises(MalformedInput) as exc_info:
        bind_item_form({'name': 'TV', 'price': 'abc', 'quantity': '1.5'})

    assert [v.field for v in exc_info.value.violations] == ['price', 'quantity']
    assert all(v.code == 'typeMismatch' for v in exc_info.value.violations)


@pytest.mark.parametrize('price', [True, False, '1000.0', '1_000', 1000.0, '10e3'])
def test_non_integer_price_is_malformed(price):
    with pytest.raises(MalformedInput) as exc_info:
        bind_item_form({'name': 'TV', 'price': price, 'quantity': 10})

    violations = exc_info.value.violations
    assert [(v.code, v.field) for v in violations] == [('typeMismatch', 'price')]
    assert violations[0].rejected_value == price


@pytest.mark.parametrize('text,expected', [(' 1000 ', 1000), ('+1000', 1000), ('-5', -5)])
def test_integer_text_is_accepted(text, expected):
    assert bind_item_form({'name': 'TV', 'price': text, 'quantity': '10'}).price == expected


def test_boolean_quantity_is_malformed():
    with pytest.raises(MalformedInput) as exc_info:
        bind_item_form({'name': 'TV', 'price': 10000, 'quantity': True})
    assert [v.field for v in exc_info.value.violations] == ['quantity']
