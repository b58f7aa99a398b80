"""
Step Model

A discrete step of a recipe: instructions, an optional duration and
temperature, and the ingredients and equipment it uses. The step owns
its ingredients and equipment outright.
"""

from enum import Enum

from ..constants import DEFAULT_STEP_TYPE, VALID_STEP_TYPES
from ..errors import CategoryMismatch, CookbookError, ValidationError
from ..services.rational import Rational
from ..services.units import Category, get_catalog
from ..utils.validation import check_text
from .entity import Entity, coerce_id
from .equipment import Equipment
from .ingredient import Ingredient
from .quantity import Quantity


class StepType(Enum):
    """Used to bucket step durations when totalling a recipe."""
    PREP = 'Prep'
    COOK = 'Cook'
    WAIT = 'Wait'
    OTHER = 'Other'

    def __str__(self):
        return self.value


def _check_optional_quantity(value, field, category):
    if value is None:
        return None
    if not isinstance(value, Quantity):
        raise ValidationError(f"must be a Quantity, got {type(value).__name__}", path=field)
    if value.category is not category:
        raise CategoryMismatch(f"must be a {category} quantity, got {value.unit}",
                               path=f"{field}_unit")
    return value


def _quantity_from_pair(value, unit, field, category, catalog):
    """Build an optional quantity from a value/unit pair that must be all-or-nothing."""
    if value is None and unit is None:
        return None
    if unit is None:
        raise ValidationError(f"{field} is set but {field}_unit is missing", path=f"{field}_unit")
    if value is None:
        raise ValidationError(f"{field}_unit is set but {field} is missing", path=field)
    try:
        resolved = (catalog or get_catalog()).lookup(unit)
    except CookbookError as err:
        raise err.located(f"{field}_unit")
    if resolved.category is not category:
        raise CategoryMismatch(f"{unit!r} is a {resolved.category} unit, not {category}",
                               path=f"{field}_unit")
    try:
        amount = Rational.coerce(value)
    except CookbookError as err:
        raise err.located(field)
    return Quantity(amount, resolved)


class Step(Entity):
    """One step of a recipe."""

    scalar_fields = ('instructions', 'step_type', 'time_needed', 'temperature')
    child_fields = ('ingredients', 'equipment')

    def __init__(self, instructions, step_type=DEFAULT_STEP_TYPE, time_needed=None,
                 temperature=None, ingredients=(), equipment=(), id=None):
        super().__init__(id)
        # Recipe this step belongs to; ids are unique across the whole recipe
        self.owner = None
        self.instructions = instructions
        self.step_type = step_type
        self.time_needed = time_needed
        self.temperature = temperature
        self._ingredients = []
        self._equipment = []
        for ingredient in ingredients:
            self.add_ingredient(ingredient)
        for item in equipment:
            self.add_equipment(item)

    # -- scalar fields ----------------------------------------------------

    @property
    def instructions(self):
        return self._instructions

    @instructions.setter
    def instructions(self, value):
        self._instructions = check_text(value, 'instructions', multiline=True)

    @property
    def step_type(self):
        return self._step_type

    @step_type.setter
    def step_type(self, value):
        if isinstance(value, StepType):
            self._step_type = value
            return
        try:
            self._step_type = StepType(value)
        except ValueError:
            raise ValidationError(
                f"must be one of {', '.join(VALID_STEP_TYPES)}, got {value!r}",
                path='step_type',
            ) from None

    @property
    def time_needed(self):
        return self._time_needed

    @time_needed.setter
    def time_needed(self, value):
        self._time_needed = _check_optional_quantity(value, 'time_needed', Category.TIME)

    @property
    def time_needed_unit(self):
        return self._time_needed.unit.abbreviation if self._time_needed else None

    def set_time_needed(self, value, unit, catalog=None):
        """Set the duration from a raw value and unit abbreviation (both or neither)."""
        self._time_needed = _quantity_from_pair(value, unit, 'time_needed', Category.TIME, catalog)

    @property
    def temperature(self):
        return self._temperature

    @temperature.setter
    def temperature(self, value):
        self._temperature = _check_optional_quantity(value, 'temperature', Category.TEMPERATURE)

    @property
    def temperature_unit(self):
        return self._temperature.unit.abbreviation if self._temperature else None

    def set_temperature(self, value, unit, catalog=None):
        """Set the temperature from a raw value and unit abbreviation (both or neither)."""
        self._temperature = _quantity_from_pair(value, unit, 'temperature',
                                                Category.TEMPERATURE, catalog)

    # -- owned children ---------------------------------------------------

    @property
    def ingredients(self):
        return tuple(self._ingredients)

    @property
    def equipment(self):
        return tuple(self._equipment)

    def ids(self):
        """Ids of this step and everything it owns."""
        return {self.id} | {i.id for i in self._ingredients} | {e.id for e in self._equipment}

    def _index_of(self, items, entity_id, field):
        entity_id = coerce_id(entity_id)
        for index, item in enumerate(items):
            if item.id == entity_id:
                return index
        raise ValidationError(f"no entry with id {entity_id}", path=field)

    def _check_new(self, entity, cls, field):
        if not isinstance(entity, cls):
            raise ValidationError(f"must be {cls.__name__}, got {type(entity).__name__}", path=field)
        taken = self.owner.ids() if self.owner is not None else self.ids()
        if entity.id in taken:
            raise ValidationError(f"duplicate id {entity.id}", path=field)

    def add_ingredient(self, ingredient, index=None):
        self._check_new(ingredient, Ingredient, 'ingredients')
        if index is None:
            self._ingredients.append(ingredient)
        else:
            self._ingredients.insert(index, ingredient)
        return ingredient

    def remove_ingredient(self, ingredient_id):
        return self._ingredients.pop(self._index_of(self._ingredients, ingredient_id, 'ingredients'))

    def get_ingredient(self, ingredient_id):
        return self._ingredients[self._index_of(self._ingredients, ingredient_id, 'ingredients')]

    def ingredient_index(self, ingredient_id):
        return self._index_of(self._ingredients, ingredient_id, 'ingredients')

    def add_equipment(self, equipment, index=None):
        self._check_new(equipment, Equipment, 'equipment')
        if index is None:
            self._equipment.append(equipment)
        else:
            self._equipment.insert(index, equipment)
        return equipment

    def remove_equipment(self, equipment_id):
        return self._equipment.pop(self._index_of(self._equipment, equipment_id, 'equipment'))

    def get_equipment(self, equipment_id):
        return self._equipment[self._index_of(self._equipment, equipment_id, 'equipment')]

    def equipment_index(self, equipment_id):
        return self._index_of(self._equipment, equipment_id, 'equipment')
