"""
Equipment Model

Any implement a step needs, from a stove to a potato peeler.
"""

from ..utils.validation import check_bool, check_text
from .entity import Entity


class Equipment(Entity):
    """
    A piece of equipment used in a step.

    ``is_owned`` lets callers filter out recipes that need something you
    don't have before you are halfway through them.
    """

    scalar_fields = ('name', 'description', 'is_owned')

    def __init__(self, name, is_owned=False, description=None, id=None):
        super().__init__(id)
        self.name = name
        self.description = description
        self.is_owned = is_owned

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
    def is_owned(self):
        return self._is_owned

    @is_owned.setter
    def is_owned(self, value):
        self._is_owned = check_bool(value, 'is_owned')
