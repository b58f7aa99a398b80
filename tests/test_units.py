"""
Tests for the unit catalog and exact conversion.
"""

from fractions import Fraction

import pytest

from cookbook.errors import CategoryMismatch, UnknownUnit, ValidationError
from cookbook.models import Quantity
from cookbook.services import Rational
from cookbook.services.units import Category, UnitCatalog, get_catalog


def test_catalog_is_shared_and_complete(catalog):
    assert get_catalog() is catalog
    listing = catalog.listing()
    assert list(listing) == ['Mass', 'Volume', 'Count', 'Time', 'Temperature']
    for category in Category:
        base = catalog.base_unit(category)
        assert base.is_base
        assert base in catalog.units_in(category)
    assert {'g', 'kg', 'oz', 'lb'} <= set(listing['Mass'])
    assert {'mL', 'L', 'cup', 'tbsp', 'tsp', 'fl oz', 'gal (UK)'} <= set(listing['Volume'])
    assert listing['Count'] == ['ea', 'doz']


def test_every_unit_belongs_to_exactly_one_category(catalog):
    seen = [unit.abbreviation for unit in catalog]
    assert len(seen) == len(set(seen)) == len(catalog)


def test_lookup_is_case_sensitive(catalog):
    assert catalog.lookup('mL').category is Category.VOLUME
    assert catalog.lookup('ML').name == 'megaliter'
    with pytest.raises(UnknownUnit):
        catalog.lookup('cups')
    assert 'cups' not in catalog


def test_colliding_tables_are_rejected():
    tables = {
        'Mass': {'g': ('gram', Fraction(1), Fraction(0))},
        'Volume': {'g': ('gill', Fraction(118), Fraction(0)),
                   'mL': ('milliliter', Fraction(1), Fraction(0))},
    }
    with pytest.raises(ValidationError):
        UnitCatalog(tables, {'Mass': 'g', 'Volume': 'mL'})


def test_half_cup_round_trips_exactly(catalog):
    half_cup = Quantity(Rational(1, 2), 'cup')
    in_ml = catalog.convert(half_cup, 'mL')
    assert in_ml.value.as_fraction() == Fraction('118.29411825')
    back = catalog.convert(in_ml, 'cup')
    assert back.value == Rational(1, 2)
    assert back.unit.abbreviation == 'cup'


def test_conversion_composes(catalog):
    q = Quantity(Rational(7, 3), 'tbsp')
    for via in ('tsp', 'fl oz', 'L', 'gi (UK)'):
        assert catalog.convert(catalog.convert(q, via), 'cup').value == catalog.convert(q, 'cup').value


def test_known_factors(catalog):
    assert catalog.convert(Quantity(1, 'lb'), 'g').value == Rational(45359237, 100000)
    assert catalog.convert(Quantity(16, 'oz'), 'lb').value == 1
    assert catalog.convert(Quantity(3, 'tsp'), 'tbsp').value == 1
    assert catalog.convert(Quantity(1, 'doz'), 'ea').value == 12
    assert catalog.convert(Quantity(2, 'h'), 'min').value == 120


def test_temperature_is_affine(catalog):
    celsius = Quantity(Rational(2001, 5), '°C')
    kelvin = catalog.convert(celsius, 'K')
    assert kelvin.value == Rational(2001, 5) + Rational(27315, 100)
    assert kelvin.value == Rational(13467, 20)
    assert catalog.convert(Quantity(212, '°F'), '°C').value == 100
    assert catalog.convert(Quantity(0, '°R'), 'K').value == 0
    assert catalog.convert(Quantity(32, '°F'), 'K').value == Rational(27315, 100)


def test_convert_across_categories_fails(catalog):
    with pytest.raises(CategoryMismatch):
        catalog.convert(Quantity(1, 'cup'), 'g')


def test_same_unit_returns_input(catalog):
    q = Quantity(3, 'g')
    assert catalog.convert(q, 'g') is q
