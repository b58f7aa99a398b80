"""
Recipe Model

The root of a recipe document. A Recipe exclusively owns its Steps,
and each Step owns its Ingredients and Equipment. Every edit goes
through a method or validated setter here, so the tree is never left
in an invalid shape.
"""

import logging

from ..errors import CookbookError, ValidationError
from ..services.rational import Rational
from ..utils.validation import check_tags, check_text
from .entity import Entity, coerce_id
from .ingredient import Ingredient
from .quantity import Quantity
from .step import Step

logger = logging.getLogger(__name__)


class Recipe(Entity):
    """
    One recipe from start to finish.

    ``amount_made_unit`` is a free-text label ("cookies", "servings") and
    is not checked against the unit catalog.

    ``id_generated`` is True when the id was allocated while loading a
    file that had none; it stays True until the recipe is saved, so the
    same id is persisted rather than regenerated on the next load.
    """

    scalar_fields = ('name', 'description', 'comments', 'source', 'author',
                     'amount_made', 'amount_made_unit', 'tags')
    child_fields = ('steps',)

    def __init__(self, name, source, author, amount_made=1, amount_made_unit='',
                 description=None, comments=None, tags=(), steps=(), id=None):
        super().__init__(id)
        self.id_generated = False
        self.name = name
        self.description = description
        self.comments = comments
        self.source = source
        self.author = author
        self.amount_made = amount_made
        self.amount_made_unit = amount_made_unit
        self.tags = tags
        self._steps = []
        for step in steps:
            self.add_step(step)

    # -- scalar fields ----------------------------------------------------

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
    def comments(self):
        return self._comments

    @comments.setter
    def comments(self, value):
        self._comments = check_text(value, 'comments', required=False, multiline=True)

    @property
    def source(self):
        return self._source

    @source.setter
    def source(self, value):
        self._source = check_text(value, 'source')

    @property
    def author(self):
        return self._author

    @author.setter
    def author(self, value):
        self._author = check_text(value, 'author')

    @property
    def amount_made(self):
        return self._amount_made

    @amount_made.setter
    def amount_made(self, value):
        try:
            value = Rational.coerce(value)
        except CookbookError as err:
            raise err.located('amount_made')
        if value < 0:
            raise ValidationError("cannot be negative", path='amount_made')
        self._amount_made = value

    @property
    def amount_made_unit(self):
        return self._amount_made_unit

    @amount_made_unit.setter
    def amount_made_unit(self, value):
        self._amount_made_unit = check_text(value, 'amount_made_unit')

    @property
    def amount_made_display(self):
        return f"Makes: {self._amount_made.to_mixed_string()} {self._amount_made_unit}".rstrip()

    @property
    def tags(self):
        return tuple(self._tags)

    @tags.setter
    def tags(self, value):
        self._tags = check_tags(value)

    def add_tag(self, tag):
        """Append a tag; returns False if it was already present."""
        if tag in self._tags:
            return False
        self._tags = check_tags(self._tags + [tag])
        return True

    def remove_tag(self, tag):
        if tag not in self._tags:
            return False
        self._tags.remove(tag)
        return True

    # -- steps ------------------------------------------------------------

    @property
    def steps(self):
        return tuple(self._steps)

    def ids(self):
        """Every id in the document."""
        ids = {self.id}
        for step in self._steps:
            ids |= step.ids()
        return ids

    def step_index(self, step_id):
        step_id = coerce_id(step_id)
        for index, step in enumerate(self._steps):
            if step.id == step_id:
                return index
        raise ValidationError(f"no step with id {step_id}", path='steps')

    def get_step(self, step_id):
        return self._steps[self.step_index(step_id)]

    def add_step(self, step, index=None):
        """Insert a step (appended by default). Its ids must be new to this document."""
        if not isinstance(step, Step):
            raise ValidationError(f"must be Step, got {type(step).__name__}", path='steps')
        if step.owner is not None and step.owner is not self:
            raise ValidationError("step already belongs to another recipe", path='steps')
        clashes = step.ids() & self.ids()
        if clashes:
            raise ValidationError(f"duplicate id {sorted(map(str, clashes))[0]}", path='steps')
        if index is None:
            self._steps.append(step)
        else:
            self._steps.insert(index, step)
        step.owner = self
        return step

    def remove_step(self, step_id):
        step = self._steps.pop(self.step_index(step_id))
        step.owner = None
        return step

    def move_step(self, step_id, new_index):
        """Move a step to a new position in the step order."""
        if not isinstance(new_index, int) or not 0 <= new_index < len(self._steps):
            raise ValidationError(f"step index {new_index!r} out of range", path='steps')
        step = self._steps.pop(self.step_index(step_id))
        self._steps.insert(new_index, step)
        return step

    def add_ingredient(self, step_id, ingredient, index=None):
        """Add an ingredient to a step, checking ids across the whole document."""
        position = self.step_index(step_id)
        try:
            return self._steps[position].add_ingredient(ingredient, index)
        except CookbookError as err:
            raise err.located(f"steps[{position}]")

    def add_equipment(self, step_id, equipment, index=None):
        """Add equipment to a step, checking ids across the whole document."""
        position = self.step_index(step_id)
        try:
            return self._steps[position].add_equipment(equipment, index)
        except CookbookError as err:
            raise err.located(f"steps[{position}]")

    # -- addressing and atomic edits --------------------------------------

    def path_of(self, entity_id):
        """Document path of any entity by id, e.g. 'steps[1].ingredients[0]'."""
        entity_id = coerce_id(entity_id)
        if entity_id == self.id:
            return ''
        for s, step in enumerate(self._steps):
            if step.id == entity_id:
                return f"steps[{s}]"
            for i, ingredient in enumerate(step.ingredients):
                if ingredient.id == entity_id:
                    return f"steps[{s}].ingredients[{i}]"
            for e, item in enumerate(step.equipment):
                if item.id == entity_id:
                    return f"steps[{s}].equipment[{e}]"
        return None

    def update_step(self, step_id, **changes):
        position = self.step_index(step_id)
        try:
            return self._steps[position].update(**changes)
        except CookbookError as err:
            raise err.located(f"steps[{position}]")

    def update_ingredient(self, step_id, ingredient_id, **changes):
        position = self.step_index(step_id)
        step = self._steps[position]
        index = step.ingredient_index(ingredient_id)
        try:
            return step.ingredients[index].update(**changes)
        except CookbookError as err:
            raise err.located(f"steps[{position}].ingredients[{index}]")

    def update_equipment(self, step_id, equipment_id, **changes):
        position = self.step_index(step_id)
        step = self._steps[position]
        index = step.equipment_index(equipment_id)
        try:
            return step.equipment[index].update(**changes)
        except CookbookError as err:
            raise err.located(f"steps[{position}].equipment[{index}]")

    def mark_saved(self):
        if self.id_generated:
            logger.debug("Recipe %s: generated id persisted", self.id)
        self.id_generated = False

    # -- summaries --------------------------------------------------------

    def step_time_totals(self):
        """
        Time needed per step type, in seconds.

        Only step types that occur in the recipe are keys; the value is None
        when no step of that type has a duration.
        """
        totals = {}
        for step in self._steps:
            current = totals.get(step.step_type)
            if step.time_needed is None:
                totals.setdefault(step.step_type, None)
                continue
            seconds = step.time_needed.in_unit('s')
            totals[step.step_type] = seconds if current is None else current + seconds
        return totals

    def total_time(self):
        """Total time needed across all steps, in seconds."""
        total = Quantity(0, 's')
        for step in self._steps:
            if step.time_needed is not None:
                total = total + step.time_needed
        return total

    def ingredient_list(self):
        """
        All ingredients needed, merged across steps.

        Ingredients with the same name (ignoring case) whose amounts share a
        category are combined into one entry, summed exactly in the unit of
        the first occurrence. The entries are new objects; the document is
        not changed.
        """
        merged = []
        for step in self._steps:
            for ingredient in step.ingredients:
                key = ingredient.name.casefold()
                for index, existing in enumerate(merged):
                    if existing.name.casefold() == key and existing.amount.category is ingredient.amount.category:
                        merged[index] = Ingredient(existing.name, existing.amount + ingredient.amount,
                                                   description=existing.description, id=existing.id)
                        break
                else:
                    merged.append(Ingredient(ingredient.name, ingredient.amount,
                                             description=ingredient.description, id=ingredient.id))
        return merged

    def equipment_list(self):
        """All equipment needed, de-duplicated by name, in first-seen order."""
        seen = set()
        result = []
        for step in self._steps:
            for item in step.equipment:
                key = item.name.casefold()
                if key not in seen:
                    seen.add(key)
                    result.append(item)
        return result

    def all_equipment_owned(self):
        return all(item.is_owned for step in self._steps for item in step.equipment)

    def scale(self, factor):
        """Multiply amount_made and every ingredient amount by an exact factor."""
        try:
            factor = Rational.coerce(factor)
        except CookbookError as err:
            raise err.located('factor')
        if factor <= 0:
            raise ValidationError("scale factor must be positive", path='factor')
        self._amount_made = self._amount_made * factor
        for step in self._steps:
            for ingredient in step.ingredients:
                ingredient.amount = ingredient.amount.scaled(factor)
        return self
