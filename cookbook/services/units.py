"""
Unit Catalog Service

The read-only registry of every supported unit. Units are grouped into
disjoint categories, and each carries an exact affine map to its
category's base unit. Conversion goes source -> base -> target using
exact rational arithmetic only.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from functools import lru_cache
from types import MappingProxyType

from ..constants import BASE_UNITS, UNIT_TABLES
from ..errors import CategoryMismatch, UnknownUnit, ValidationError
from .rational import Rational

logger = logging.getLogger(__name__)


class Category(Enum):
    """Unit category. Units never convert across categories."""
    MASS = 'Mass'
    VOLUME = 'Volume'
    COUNT = 'Count'
    TIME = 'Time'
    TEMPERATURE = 'Temperature'

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Unit:
    """A unit and its exact conversion ``base = value * factor + offset``."""
    abbreviation: str
    name: str
    category: Category
    factor: Fraction
    offset: Fraction = Fraction(0)

    @property
    def is_base(self):
        return self.factor == 1 and self.offset == 0

    @property
    def is_affine(self):
        return self.offset != 0

    def to_base(self, value):
        return Rational.coerce(value) * self.factor + self.offset

    def from_base(self, value):
        return (Rational.coerce(value) - self.offset) / self.factor

    def __str__(self):
        return self.abbreviation


class UnitCatalog:
    """
    Immutable unit registry.

    Built once from the unit tables and never modified afterwards, so it
    can be shared by any number of readers without locking. Pass it to
    whatever needs conversion, or use ``get_catalog()`` for the
    process-wide instance.
    """

    def __init__(self, tables=UNIT_TABLES, base_units=BASE_UNITS):
        units = {}
        by_category = {}
        bases = {}
        for category_name, table in tables.items():
            category = Category(category_name)
            members = []
            for abbreviation, (name, factor, offset) in table.items():
                if abbreviation in units:
                    other = units[abbreviation].category
                    raise ValidationError(
                        f"abbreviation collides with a {other} unit",
                        path=f"{category}.{abbreviation}",
                    )
                if factor == 0:
                    raise ValidationError("conversion factor cannot be zero",
                                          path=f"{category}.{abbreviation}")
                unit = Unit(abbreviation, name, category, Fraction(factor), Fraction(offset))
                units[abbreviation] = unit
                members.append(unit)
            base = units.get(base_units[category_name])
            if base is None or base.category is not category or not base.is_base:
                raise ValidationError("base unit missing or not an identity conversion",
                                      path=f"{category}.{base_units[category_name]}")
            by_category[category] = tuple(members)
            bases[category] = base

        self._units = MappingProxyType(units)
        self._by_category = MappingProxyType(by_category)
        self._bases = MappingProxyType(bases)
        logger.debug("Unit catalog built with %d units in %d categories",
                     len(units), len(by_category))

    def __len__(self):
        return len(self._units)

    def __iter__(self):
        return iter(self._units.values())

    def __contains__(self, abbreviation):
        return abbreviation in self._units

    def lookup(self, abbreviation):
        """Return the Unit for an abbreviation (case-sensitive: mL vs ML)."""
        try:
            return self._units[abbreviation]
        except (KeyError, TypeError):
            raise UnknownUnit(f"unknown unit {abbreviation!r}") from None

    def resolve(self, unit):
        """Accept a Unit or an abbreviation and return the catalog Unit."""
        if isinstance(unit, Unit):
            return unit
        return self.lookup(unit)

    def units_in(self, category):
        """All units of one category, in catalog order."""
        if not isinstance(category, Category):
            category = Category(category)
        return self._by_category[category]

    def base_unit(self, category):
        if not isinstance(category, Category):
            category = Category(category)
        return self._bases[category]

    def convert(self, quantity, target):
        """
        Convert a quantity into the target unit.

        Raises CategoryMismatch when the categories differ. The result is
        a new quantity; the input is untouched.
        """
        target = self.resolve(target)
        source = quantity.unit
        if source.category is not target.category:
            raise CategoryMismatch(
                f"cannot convert {source.category} ({source}) to {target.category} ({target})"
            )
        if source == target:
            return quantity
        value = target.from_base(source.to_base(quantity.value))
        return type(quantity)(value, target)

    def listing(self):
        """Every unit abbreviation grouped by category, for help output."""
        return {
            str(category): [unit.abbreviation for unit in members]
            for category, members in self._by_category.items()
        }


@lru_cache(maxsize=None)
def get_catalog():
    """
    Return the process-wide unit catalog.

    Built on first call and cached for the life of the process.
    """
    return UnitCatalog()
