"""
Quantity Model

A Quantity pairs an exact Rational value with a unit from the catalog.
The unit's category (Mass, Volume, Count, Time, Temperature) decides
which kind of quantity it is. Quantities are immutable: conversion and
arithmetic always return new values.
"""

from enum import Enum

from ..errors import CategoryMismatch
from ..services.rational import Rational
from ..services.units import Category, Unit, get_catalog


class Precision(Enum):
    """How ``Quantity.format`` renders the value. Display only."""
    EXACT = 'exact'      # 3/2 cup
    MIXED = 'mixed'      # 1 1/2 cup
    DECIMAL = 'decimal'  # 1.5 cup


class Quantity:
    """An exact value tagged with a unit."""

    __slots__ = ('_value', '_unit')

    def __init__(self, value, unit, catalog=None):
        if not isinstance(unit, Unit):
            unit = (catalog or get_catalog()).lookup(unit)
        self._value = Rational.coerce(value)
        self._unit = unit

    @property
    def value(self):
        return self._value

    @property
    def unit(self):
        return self._unit

    @property
    def category(self):
        return self._unit.category

    def base_value(self):
        """The value expressed in the category's base unit."""
        return self._unit.to_base(self._value)

    def in_unit(self, target, catalog=None):
        """Convert to another unit of the same category."""
        return (catalog or get_catalog()).convert(self, target)

    def _check_category(self, other, operation):
        if not isinstance(other, Quantity):
            raise TypeError(f"cannot {operation} Quantity and {type(other).__name__}")
        if other.category is not self.category:
            raise CategoryMismatch(
                f"cannot {operation} {self.category} quantity with {other.category} quantity"
            )

    def compare(self, other):
        """Return -1, 0 or 1. Raises CategoryMismatch across categories."""
        self._check_category(other, 'compare')
        mine, theirs = self.base_value(), other.base_value()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def __eq__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        if other.category is not self.category:
            return False
        return self.base_value() == other.base_value()

    def is_identical(self, other):
        """Same value written in the same unit; 1 cup is not identical to 236.59 mL."""
        return isinstance(other, Quantity) and self._unit == other._unit and self._value == other._value

    def __hash__(self):
        return hash((self.category, self.base_value()))

    def __lt__(self, other):
        return self.compare(other) < 0

    def __le__(self, other):
        return self.compare(other) <= 0

    def __gt__(self, other):
        return self.compare(other) > 0

    def __ge__(self, other):
        return self.compare(other) >= 0

    def __add__(self, other):
        self._check_category(other, 'add')
        if self.category is Category.TEMPERATURE:
            raise TypeError("absolute temperatures cannot be added")
        return Quantity(self._value + other.in_unit(self._unit).value, self._unit)

    def __sub__(self, other):
        self._check_category(other, 'subtract')
        if self.category is Category.TEMPERATURE:
            raise TypeError("absolute temperatures cannot be subtracted")
        return Quantity(self._value - other.in_unit(self._unit).value, self._unit)

    def scaled(self, factor):
        """Multiply by an exact factor, keeping the unit."""
        if self.category is Category.TEMPERATURE:
            raise TypeError("absolute temperatures cannot be scaled")
        return Quantity(self._value * Rational.coerce(factor), self._unit)

    def format(self, precision=Precision.EXACT, places=2):
        """Render value and unit abbreviation. Never rounds the stored value."""
        if precision is Precision.MIXED:
            text = self._value.to_mixed_string()
        elif precision is Precision.DECIMAL:
            text = self._value.to_decimal_string(places)
        else:
            text = str(self._value)
        return f"{text} {self._unit.abbreviation}"

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"Quantity({self._value!r}, {self._unit.abbreviation!r})"
