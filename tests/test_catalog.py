"""
Tests for the unit catalog lookups.
"""

import pytest

from constants import UNIT_OPTIONS, WEIGHT_TO_G, VOLUME_TO_ML
from services import (
    UnitCatalogError, category_of, factor_of, system_of,
    unit_label, is_convertible, units_for,
)


def test_empty_unit_is_count():
    assert category_of(None) == 'count'
    assert category_of('') == 'count'


def test_registered_categories():
    assert category_of('g') == 'weight'
    assert category_of('lb') == 'weight'
    assert category_of('fl oz') == 'volume'
    assert category_of('gallon') == 'volume'
    assert category_of('pinch') == 'count'


def test_unregistered_unit_is_unknown():
    assert category_of('handful') == 'unknown'
    # Lookup is by exact identifier
    assert category_of('G') == 'unknown'
    assert category_of('cups') == 'unknown'


def test_factor_table_pinned():
    assert WEIGHT_TO_G == {'g': 1, 'kg': 1000, 'mg': 0.001, 'oz': 28.35, 'lb': 453.592}
    assert VOLUME_TO_ML == {
        'ml': 1, 'l': 1000, 'tsp': 4.93, 'tbsp': 14.79, 'cup': 236.59,
        'pint': 473.18, 'quart': 946.35, 'gallon': 3785.41, 'fl oz': 29.57,
    }


def test_factor_of():
    assert factor_of('weight', 'oz') == 28.35
    assert factor_of('volume', 'cup') == 236.59


@pytest.mark.parametrize("category,unit", [
    ('count', 'piece'),
    ('unknown', 'handful'),
    ('weight', 'cup'),
    ('volume', 'zzz'),
])
def test_factor_of_rejects_non_convertible(category, unit):
    with pytest.raises(UnitCatalogError):
        factor_of(category, unit)


def test_system_of():
    assert system_of('kg') == 'metric'
    assert system_of('tbsp') == 'imperial'
    assert system_of('slice') == 'none'
    assert system_of(None) == 'none'
    assert system_of('handful') == 'none'


def test_unit_label():
    assert unit_label('fl oz') == 'fl oz (fluid ounce)'
    assert unit_label('handful') == 'handful'
    assert unit_label(None) == ''


def test_is_convertible():
    assert is_convertible('mg')
    assert is_convertible('quart')
    assert not is_convertible('bunch')
    assert not is_convertible('')


def test_units_for_filters():
    assert len(units_for()) == len(UNIT_OPTIONS)
    assert [u['value'] for u in units_for(category='weight', system='imperial')] == ['oz', 'lb']
    assert {u['value'] for u in units_for(category='count')} == {'piece', 'slice', 'pinch', 'bunch'}


def test_units_for_returns_copies():
    units = units_for()
    units[0]['label'] = 'changed'
    assert unit_label('g') == 'g (gram)'
