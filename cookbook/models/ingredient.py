"""
Ingredient Model

An ingredient used in a step and its amount. The amount is a single
Quantity whose category is Mass, Volume or Count; which of the three it
is follows from the unit, so "exactly one variant set" holds by
construction.
"""

from ..constants import INGREDIENT_AMOUNT_VARIANTS
from ..errors import CategoryMismatch, ValidationError
from ..services.units import Category
from ..utils.validation import check_text
from .entity import Entity
from .quantity import Quantity

AMOUNT_CATEGORIES = frozenset(Category(c) for c in INGREDIENT_AMOUNT_VARIANTS.values())

# Category -> file-format variant name (Count is written as "Quantity")
VARIANT_NAMES = {Category(c): name for name, c in INGREDIENT_AMOUNT_VARIANTS.items()}


def check_amount(amount, field='amount'):
    if not isinstance(amount, Quantity):
        raise ValidationError(f"must be a Quantity, got {type(amount).__name__}", path=field)
    if amount.category not in AMOUNT_CATEGORIES:
        raise CategoryMismatch(
            f"ingredient amounts must be Mass, Volume or Count, not {amount.category}",
            path=field,
        )
    return amount


class Ingredient(Entity):
    """A named ingredient with an exact amount."""

    scalar_fields = ('name', 'description', 'amount')

    def __init__(self, name, amount, description=None, id=None):
        super().__init__(id)
        self.name = name
        self.description = description
        self.amount = amount

    @classmethod
    def amount_from_variants(cls, count=None, mass=None, volume=None):
        """
        Pick the amount from the three mutually exclusive variants.

        Exactly one must be given, and it must belong to its variant's
        category (a ``mass`` given in mL is a CategoryMismatch).
        """
        given = {
            name: value
            for name, value in (('Quantity', count), ('Mass', mass), ('Volume', volume))
            if value is not None
        }
        if len(given) != 1:
            found = ', '.join(given) or 'none'
            raise ValidationError(
                f"exactly one of Quantity, Mass, Volume must be set (found: {found})"
            )
        (name, amount), = given.items()
        check_amount(amount, field=name)
        expected = Category(INGREDIENT_AMOUNT_VARIANTS[name])
        if amount.category is not expected:
            raise CategoryMismatch(f"{name} needs a {expected} unit, got {amount.unit}",
                                   path=f"{name}.unit")
        return amount

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = check_text(value, 'name', allow_empty=False)

    @property
    def description(self):
        return self._description

    @description.setter
    def description(self, value):
        self._description = check_text(value, 'description', required=False, multiline=True)

    @property
    def amount(self):
        return self._amount

    @amount.setter
    def amount(self, value):
        self._amount = check_amount(value)

    @property
    def amount_variant(self):
        """File-format name of the amount variant: Quantity, Mass or Volume."""
        return VARIANT_NAMES[self._amount.category]
