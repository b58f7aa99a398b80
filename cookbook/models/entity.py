"""
Document Entity Base

Shared behaviour for Recipe, Step, Ingredient and Equipment: a UUID
identity, structural equality and atomic multi-field updates.
"""

import copy
import uuid

from ..errors import ValidationError
from .quantity import Quantity


def _same(mine, theirs):
    # Documents compare as written, so quantities must agree on unit too
    if isinstance(mine, Quantity):
        return mine.is_identical(theirs)
    return mine == theirs


def new_id():
    """Allocate a fresh random identifier."""
    return uuid.uuid4()


def coerce_id(value, field='id'):
    """Accept a UUID or its string form."""
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, str):
        try:
            return uuid.UUID(value)
        except ValueError:
            raise ValidationError(f"not a valid UUID: {value!r}", path=field) from None
    raise ValidationError(f"must be a UUID, got {type(value).__name__}", path=field)


class Entity:
    """Base class for document nodes."""

    # Scalar fields that update() may assign, in display order
    scalar_fields = ()
    # Fields compared by __eq__ in addition to scalar_fields and id
    child_fields = ()

    def __init__(self, id=None):
        self._id = new_id() if id is None else coerce_id(id)

    @property
    def id(self):
        return self._id

    def update(self, **changes):
        """
        Assign several scalar fields at once.

        Every assignment is validated on a copy first; if any of them
        fails, the entity is left exactly as it was.
        """
        trial = copy.copy(self)
        for field, value in changes.items():
            if field not in self.scalar_fields:
                raise ValidationError(f"not an editable field of {type(self).__name__}", path=field)
            setattr(trial, field, value)
        self.__dict__.update(trial.__dict__)
        return self

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        fields = ('id',) + self.scalar_fields + self.child_fields
        return all(_same(getattr(self, name), getattr(other, name)) for name in fields)

    __hash__ = None

    def __repr__(self):
        name = getattr(self, 'name', None)
        if name is not None:
            return f"{type(self).__name__}(id={self._id}, name={name!r})"
        return f"{type(self).__name__}(id={self._id})"
