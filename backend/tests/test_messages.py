"""
Tests for violation message resolution
"""

import pytest

from itemservice.models.item import Violation
from itemservice.services.messages import MessageSource


@pytest.fixture
def messages():
    return MessageSource()


def test_field_codes_go_from_specific_to_generic(messages):
    violation = Violation(code='required', field='name')
    assert messages.resolve_codes(violation) == ['required.item.name', 'required.name', 'required']


def test_object_codes(messages):
    violation = Violation(code='totalPriceMin', arguments=(10000, 5000))
    assert messages.resolve_codes(violation) == ['totalPriceMin.item', 'totalPriceMin']


@pytest.mark.parametrize(
    'violation,expected',
    [
        (Violation(code='required', field='name'), 'Item name is required.'),
        (Violation(code='range', field='price', arguments=(1000, 1000000)), 'Price must be between 1,000 and 1,000,000.'),
        (Violation(code='max', field='quantity', arguments=(9999,)), 'Quantity must be at most 9,999.'),
        (
            Violation(code='totalPriceMin', arguments=(10000, 5000)),
            'Price * quantity must be at least 10,000. Current value = 5,000.',
        ),
        (Violation(code='typeMismatch', field='price', rejected_value='abc'), 'Please enter a whole number.'),
    ],
)
def test_default_messages(messages, violation, expected):
    assert messages.get_message(violation) == expected


def test_generic_code_is_used_for_other_fields(messages):
    assert messages.get_message(Violation(code='max', field='weight', arguments=(5,))) == 'Must be at most 5.'


def test_unknown_code_falls_back_to_code(messages):
    assert messages.get_message(Violation(code='mystery', field='name')) == 'mystery'


def test_missing_argument_keeps_placeholder():
    source = MessageSource({'range': 'between {0} and {1}'})
    assert source.get_message(Violation(code='range', field='price', arguments=(1,))) == 'between 1 and {1}'


def test_field_and_global_errors_are_split(messages):
    violations = [
        Violation(code='required', field='name'),
        Violation(code='range', field='price', arguments=(1000, 1000000)),
        Violation(code='totalPriceMin', arguments=(10000, 500)),
    ]

    assert messages.field_errors(violations) == {
        'name': ['Item name is required.'],
        'price': ['Price must be between 1,000 and 1,000,000.'],
    }
    assert messages.global_errors(violations) == ['Price * quantity must be at least 10,000. Current value = 500.']


def test_describe(messages):
    described = messages.describe([Violation(code='max', field='quantity', arguments=(9999,), rejected_value=10000)])
    assert described == [
        {
            'code': 'max',
            'field': 'quantity',
            'arguments': [9999],
            'rejected_value': 10000,
            'message': 'Quantity must be at most 9,999.',
        }
    ]
