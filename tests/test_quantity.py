"""
Tests for quantities: equality, ordering, arithmetic and formatting.
"""

import pytest

from cookbook.errors import CategoryMismatch, UnknownUnit
from cookbook.models import Precision, Quantity
from cookbook.services import Rational


def test_unknown_unit():
    with pytest.raises(UnknownUnit):
        Quantity(1, 'smidgen')


def test_equality_across_units():
    assert Quantity(1, 'kg') == Quantity(1000, 'g')
    assert Quantity(1, 'cup') == Quantity(16, 'tbsp')
    assert hash(Quantity(1, 'kg')) == hash(Quantity(1000, 'g'))


def test_different_categories_are_unequal_but_not_comparable():
    grams = Quantity(1, 'g')
    millis = Quantity(1, 'mL')
    assert (grams == millis) is False
    assert grams != millis
    with pytest.raises(CategoryMismatch):
        grams.compare(millis)
    with pytest.raises(CategoryMismatch):
        grams < millis


def test_ordering_within_category():
    assert Quantity(1, 'tsp') < Quantity(1, 'tbsp') < Quantity(1, 'cup')
    assert Quantity(1, 'h').compare(Quantity(60, 'min')) == 0
    assert max(Quantity(400, 'g'), Quantity(1, 'lb')) == Quantity(1, 'lb')
    assert max(Quantity(500, 'g'), Quantity(1, 'lb')) == Quantity(500, 'g')


def test_addition_keeps_left_unit():
    total = Quantity(1, 'cup') + Quantity(4, 'tbsp')
    assert total.unit.abbreviation == 'cup'
    assert total.value == Rational(5, 4)
    assert (Quantity(1, 'kg') - Quantity(250, 'g')).value == Rational(3, 4)


def test_temperatures_do_not_add():
    with pytest.raises(TypeError):
        Quantity(20, '°C') + Quantity(5, '°C')


def test_scaled():
    assert Quantity(Rational(3, 4), 'cup').scaled(Rational(2, 3)).value == Rational(1, 2)


def test_in_unit_leaves_original_untouched():
    q = Quantity(2, 'cup')
    converted = q.in_unit('mL')
    assert q.unit.abbreviation == 'cup'
    assert converted == q


def test_format():
    q = Quantity(Rational(3, 2), 'cup')
    assert str(q) == '3/2 cup'
    assert q.format(Precision.MIXED) == '1 1/2 cup'
    assert q.format(Precision.DECIMAL) == '1.5 cup'
    assert Quantity(Rational(1, 3), 'tsp').format(Precision.DECIMAL, places=3) == '0.333 tsp'
    assert q.value == Rational(3, 2)
